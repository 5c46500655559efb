"""
Database schema definitions.
Table creation, indexes, and structure management.
"""


def drop_tables(db):
    """Drop all existing tables."""
    tables = [
        'bookings',
    ]

    for table in tables:
        db.execute(f'DROP TABLE IF EXISTS {table}')


def create_tables(db):
    """Create all database tables."""

    # Dates are kept as TEXT so ISO date and datetime strings round-trip unchanged;
    # created_at/updated_at are written by the app in the configured timezone
    db.execute('''
        CREATE TABLE IF NOT EXISTS bookings (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            grc_no TEXT NOT NULL UNIQUE,

            booking_date TEXT,
            check_in_date TEXT,
            check_out_date TEXT,
            days INTEGER DEFAULT 0,
            time_in TEXT,
            time_out TEXT,

            salutation TEXT,
            name TEXT,
            age INTEGER DEFAULT 0,
            gender TEXT,
            address TEXT,
            city TEXT,
            nationality TEXT,
            mobile_no TEXT,
            email TEXT,
            phone_no TEXT,
            birth_date TEXT,
            anniversary TEXT,

            company_name TEXT,
            company_gstin TEXT,

            id_proof_type TEXT,
            id_proof_number TEXT,
            photo_url TEXT DEFAULT '',
            id_proof_image_url TEXT DEFAULT '',
            id_proof_image_url2 TEXT DEFAULT '',

            room_no TEXT,
            plan_package TEXT,
            no_of_adults INTEGER DEFAULT 0,
            no_of_children INTEGER DEFAULT 0,
            rate REAL DEFAULT 0,
            tax_included INTEGER DEFAULT 0,
            service_charge INTEGER DEFAULT 0,
            is_leader INTEGER DEFAULT 0,

            arrived_from TEXT,
            destination TEXT,
            remark TEXT,
            business_source TEXT,
            market_segment TEXT,
            purpose_of_visit TEXT,

            discount_percent REAL DEFAULT 0,
            discount_room_source REAL DEFAULT 0,
            payment_mode TEXT,
            payment_status TEXT,
            booking_ref_no TEXT,
            mgmt_block TEXT,
            billing_instruction TEXT,

            temperature REAL DEFAULT 0,
            from_csv INTEGER DEFAULT 0,
            epabx INTEGER DEFAULT 0,
            vip INTEGER DEFAULT 0,
            status TEXT,

            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    ''')


def create_indexes(db):
    """Create performance indexes."""

    db.execute('CREATE INDEX IF NOT EXISTS idx_bookings_created ON bookings(created_at, id)')
    db.execute('CREATE INDEX IF NOT EXISTS idx_bookings_status ON bookings(status)')
    db.execute('CREATE INDEX IF NOT EXISTS idx_bookings_payment_status ON bookings(payment_status)')
    db.execute('CREATE INDEX IF NOT EXISTS idx_bookings_room ON bookings(room_no)')
