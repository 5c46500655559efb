"""
Booking data access functions.
Handles guest registration records: CRUD, search, and guest lookups.

This module re-exports all functions from the split modules:
- booking_crud.py: Field classification and single-record CRUD
- booking_queries.py: Search, pagination, and guest info queries
"""

# =============================================================================
# RE-EXPORTS
# =============================================================================

# Field classification
from .booking_crud import (
    BOOKING_FIELDS,
    BOOLEAN_FIELDS,
    NUMBER_FIELDS,
    DATE_FIELDS,
    IMAGE_FIELDS,
    PATCHABLE_FIELDS,
)

# CRUD operations
from .booking_crud import (
    # Read
    count_bookings,
    get_booking_by_id,
    get_all_bookings,
    get_latest_booking_by_grc,
    get_max_grc_number,
    # Create/Update/Delete
    insert_booking,
    update_booking,
    delete_booking,
)

# Query operations
from .booking_queries import (
    SEARCH_FIELDS,
    GUEST_INFO_FIELDS,
    build_search_filter,
    search_bookings,
    get_guest_info_by_grc,
)

__all__ = [
    'BOOKING_FIELDS',
    'BOOLEAN_FIELDS',
    'NUMBER_FIELDS',
    'DATE_FIELDS',
    'IMAGE_FIELDS',
    'PATCHABLE_FIELDS',
    'count_bookings',
    'get_booking_by_id',
    'get_all_bookings',
    'get_latest_booking_by_grc',
    'get_max_grc_number',
    'insert_booking',
    'update_booking',
    'delete_booking',
    'SEARCH_FIELDS',
    'GUEST_INFO_FIELDS',
    'build_search_filter',
    'search_bookings',
    'get_guest_info_by_grc',
]
