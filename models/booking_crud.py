"""
Booking CRUD operations.
Field classification, row conversion, and single-record reads and writes
on the bookings table.
"""

import sqlite3
from typing import Optional, List, Dict, Any

from database import get_db, PersistenceError, DuplicateGrcError
from utils.datetime_helpers import get_now_iso


# =============================================================================
# FIELD CLASSIFICATION
# =============================================================================

# Every stored field except id/created_at/updated_at, in export order
BOOKING_FIELDS = [
    'grc_no',
    'booking_date', 'check_in_date', 'check_out_date', 'days', 'time_in', 'time_out',
    'salutation', 'name', 'age', 'gender', 'address', 'city', 'nationality',
    'mobile_no', 'email', 'phone_no', 'birth_date', 'anniversary',
    'company_name', 'company_gstin',
    'id_proof_type', 'id_proof_number',
    'photo_url', 'id_proof_image_url', 'id_proof_image_url2',
    'room_no', 'plan_package', 'no_of_adults', 'no_of_children', 'rate',
    'tax_included', 'service_charge', 'is_leader',
    'arrived_from', 'destination', 'remark',
    'business_source', 'market_segment', 'purpose_of_visit',
    'discount_percent', 'discount_room_source', 'payment_mode', 'payment_status',
    'booking_ref_no', 'mgmt_block', 'billing_instruction',
    'temperature', 'from_csv', 'epabx', 'vip', 'status',
]

BOOLEAN_FIELDS = frozenset([
    'tax_included', 'service_charge', 'is_leader', 'from_csv', 'epabx', 'vip',
])

NUMBER_FIELDS = frozenset([
    'days', 'age', 'no_of_adults', 'no_of_children', 'rate',
    'discount_percent', 'discount_room_source', 'temperature',
])

DATE_FIELDS = frozenset([
    'booking_date', 'check_in_date', 'check_out_date', 'birth_date', 'anniversary',
])

IMAGE_FIELDS = ('photo_url', 'id_proof_image_url', 'id_proof_image_url2')

# grc_no is immutable once assigned
PATCHABLE_FIELDS = frozenset(BOOKING_FIELDS) - {'grc_no'}

DEFAULT_ORDER = 'ORDER BY created_at DESC, id DESC'


def row_to_booking(row) -> Optional[Dict[str, Any]]:
    """
    Convert a bookings row to a dict with real booleans.

    Args:
        row: sqlite3.Row or None

    Returns:
        Booking dict or None
    """
    if row is None:
        return None

    booking = dict(row)
    for field in BOOLEAN_FIELDS:
        if booking.get(field) is not None:
            booking[field] = bool(booking[field])
    return booking


# =============================================================================
# READ
# =============================================================================

def count_bookings(where: str = '', params: tuple = ()) -> int:
    """
    Count bookings, optionally filtered.

    Args:
        where: SQL condition appended after WHERE (may be empty)
        params: Parameters for the condition

    Returns:
        Number of matching bookings
    """
    db = get_db()
    cursor = db.cursor()

    query = 'SELECT COUNT(*) as total FROM bookings'
    if where:
        query += f' WHERE {where}'

    try:
        cursor.execute(query, params)
    except sqlite3.Error as e:
        raise PersistenceError(str(e)) from e
    return cursor.fetchone()['total']


def get_booking_by_id(booking_id: int) -> Optional[Dict[str, Any]]:
    """
    Get booking by ID.

    Args:
        booking_id: Booking ID

    Returns:
        Booking dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM bookings WHERE id = ?', (booking_id,))
    return row_to_booking(cursor.fetchone())


def get_all_bookings() -> List[Dict[str, Any]]:
    """
    Get all bookings, newest first.

    Returns:
        List of booking dicts
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT * FROM bookings {DEFAULT_ORDER}')
    return [row_to_booking(row) for row in cursor.fetchall()]


def get_latest_booking_by_grc(grc_no: str) -> Optional[Dict[str, Any]]:
    """
    Get the most recently created booking with a GRC number.

    Args:
        grc_no: Guest Registration Code (e.g., 'GRC-005')

    Returns:
        Booking dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(
        f'SELECT * FROM bookings WHERE grc_no = ? {DEFAULT_ORDER} LIMIT 1',
        (grc_no,)
    )
    return row_to_booking(cursor.fetchone())


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================

def insert_booking(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert a new booking.

    Args:
        fields: Column values; unknown keys are ignored.
            Must include 'grc_no'.

    Returns:
        The stored booking (with id, created_at, updated_at)

    Raises:
        DuplicateGrcError: If grc_no already exists
        PersistenceError: On any other database failure
    """
    db = get_db()
    cursor = db.cursor()

    now = get_now_iso()
    columns = [field for field in BOOKING_FIELDS if field in fields]
    values = [fields[field] for field in columns] + [now, now]
    columns += ['created_at', 'updated_at']
    placeholders = ', '.join('?' for _ in columns)

    query = f'INSERT INTO bookings ({", ".join(columns)}) VALUES ({placeholders})'

    try:
        cursor.execute(query, values)
        db.commit()
    except sqlite3.IntegrityError as e:
        db.rollback()
        if 'grc_no' in str(e):
            raise DuplicateGrcError(f"GRC number {fields.get('grc_no')} already exists") from e
        raise PersistenceError(str(e)) from e
    except (sqlite3.Error, OverflowError) as e:
        db.rollback()
        raise PersistenceError(str(e)) from e

    return get_booking_by_id(cursor.lastrowid)


def update_booking(booking_id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Replace the named fields of a booking. Other fields are untouched.

    Args:
        booking_id: Booking ID to update
        fields: Column values; keys outside PATCHABLE_FIELDS are ignored

    Returns:
        The updated booking, or None if no booking has this ID

    Raises:
        PersistenceError: On database failure
    """
    db = get_db()

    updates = []
    values = []

    for field in BOOKING_FIELDS:
        if field in fields and field in PATCHABLE_FIELDS:
            updates.append(f'{field} = ?')
            values.append(fields[field])

    if not updates:
        return get_booking_by_id(booking_id)

    updates.append('updated_at = ?')
    values.append(get_now_iso())
    values.append(booking_id)

    query = f'UPDATE bookings SET {", ".join(updates)} WHERE id = ?'

    cursor = db.cursor()
    try:
        cursor.execute(query, values)
        db.commit()
    except (sqlite3.Error, OverflowError) as e:
        db.rollback()
        raise PersistenceError(str(e)) from e

    if cursor.rowcount == 0:
        return None
    return get_booking_by_id(booking_id)


def delete_booking(booking_id: int) -> bool:
    """
    Delete booking (hard delete).

    Args:
        booking_id: Booking ID to delete

    Returns:
        True if a booking was deleted, False if none matched
    """
    db = get_db()
    cursor = db.cursor()

    try:
        cursor.execute('DELETE FROM bookings WHERE id = ?', (booking_id,))
        db.commit()
    except sqlite3.Error as e:
        db.rollback()
        raise PersistenceError(str(e)) from e

    return cursor.rowcount > 0


def get_max_grc_number() -> int:
    """
    Get the highest numeric suffix among stored GRC numbers.

    Returns:
        Highest N of 'GRC-N', or 0 if there are no bookings
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT MAX(CAST(SUBSTR(grc_no, 5) AS INTEGER)) as max_number
        FROM bookings
        WHERE grc_no LIKE 'GRC-%'
    ''')
    return cursor.fetchone()['max_number'] or 0
