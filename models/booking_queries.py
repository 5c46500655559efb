"""
Booking query operations.
Search filter construction, pagination, and guest lookups.
"""

import math
from typing import Optional, Dict, Any, Tuple

from database import get_db
from .booking_crud import count_bookings, get_latest_booking_by_grc, row_to_booking, DEFAULT_ORDER


SEARCH_FIELDS = ('name', 'grc_no', 'room_no', 'mobile_no', 'phone_no', 'city')

# Fields copied when pre-filling a new booking for a returning guest
GUEST_INFO_FIELDS = (
    'salutation', 'name', 'age', 'gender', 'address', 'city', 'nationality',
    'mobile_no', 'email', 'phone_no', 'birth_date', 'anniversary',
    'id_proof_type', 'id_proof_number', 'id_proof_image_url', 'id_proof_image_url2',
    'photo_url',
    'company_name', 'company_gstin',
)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def build_search_filter(
    search: str = None,
    status: str = None,
    payment_status: str = None
) -> Tuple[str, list]:
    """
    Build the WHERE condition for booking search.

    The search term is a case-insensitive substring match OR-ed across
    SEARCH_FIELDS; status and payment_status are exact matches AND-ed
    with it.

    Args:
        search: Free text search term
        status: Exact booking status
        payment_status: Exact payment status

    Returns:
        Tuple of (condition SQL or '', params list)
    """
    conditions = []
    params = []

    term = search.strip() if isinstance(search, str) else ''
    if term:
        like = f'%{escape_like(term)}%'
        conditions.append(
            '(' + ' OR '.join(f"{field} LIKE ? ESCAPE '\\'" for field in SEARCH_FIELDS) + ')'
        )
        params.extend([like] * len(SEARCH_FIELDS))

    if status:
        conditions.append('status = ?')
        params.append(status)

    if payment_status:
        conditions.append('payment_status = ?')
        params.append(payment_status)

    return ' AND '.join(conditions), params


def search_bookings(
    page: int = 1,
    limit: int = 10,
    search: str = None,
    status: str = None,
    payment_status: str = None
) -> Dict[str, Any]:
    """
    Search bookings with pagination, newest first.

    Args:
        page: 1-based page number
        limit: Page size
        search: Free text search term
        status: Exact booking status filter
        payment_status: Exact payment status filter

    Returns:
        Dict with 'bookings', 'total', 'page' and 'total_pages'
    """
    db = get_db()
    cursor = db.cursor()

    where, params = build_search_filter(search, status, payment_status)

    total = count_bookings(where, tuple(params))
    offset = (page - 1) * limit

    # Pages past the end are empty; offsets beyond SQLite's range never reach the query
    bookings = []
    if offset < total:
        query = 'SELECT * FROM bookings'
        if where:
            query += f' WHERE {where}'
        query += f' {DEFAULT_ORDER} LIMIT ? OFFSET ?'

        cursor.execute(query, params + [limit, offset])
        bookings = [row_to_booking(row) for row in cursor.fetchall()]

    return {
        'bookings': bookings,
        'total': total,
        'page': page,
        'total_pages': math.ceil(total / limit) if limit else 0
    }


def get_guest_info_by_grc(grc_no: str) -> Optional[Dict[str, Any]]:
    """
    Get the guest identity fields of the latest booking with a GRC number.

    Stay and commercial fields are left out.

    Args:
        grc_no: Guest Registration Code

    Returns:
        Dict of GUEST_INFO_FIELDS or None if no booking has this code
    """
    booking = get_latest_booking_by_grc(grc_no)
    if booking is None:
        return None

    return {field: booking.get(field) for field in GUEST_INFO_FIELDS}
