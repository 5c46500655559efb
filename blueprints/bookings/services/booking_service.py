"""
Business logic for booking commands.
Coerces loosely typed request bodies, stores uploaded images, and
allocates GRC numbers before handing records to the repository.
"""

import logging
from typing import Optional, Dict, Any

from flask import current_app

from database import PersistenceError, DuplicateGrcError
from models.booking import (
    BOOKING_FIELDS, BOOLEAN_FIELDS, NUMBER_FIELDS, DATE_FIELDS, IMAGE_FIELDS,
    PATCHABLE_FIELDS, count_bookings, get_max_grc_number, insert_booking,
    update_booking, delete_booking,
)
from utils.coercion import coerce_field, clean_string
from utils.datetime_helpers import get_now_iso
from utils.helpers import generate_grc_no
from utils.uploads import get_uploaded_paths

logger = logging.getLogger(__name__)


def build_booking_fields(body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Coerce every known booking field from a create request body.

    Date fields pass through; booking_date defaults to now. GRC number
    and image fields are handled separately.

    Args:
        body: Request body (form or JSON)

    Returns:
        Dict of column values
    """
    fields = {}
    for field in BOOKING_FIELDS:
        if field == 'grc_no' or field in IMAGE_FIELDS:
            continue

        value = body.get(field)
        if field in DATE_FIELDS:
            fields[field] = value
        else:
            fields[field] = coerce_field(field, value, BOOLEAN_FIELDS, NUMBER_FIELDS)

    if not fields.get('booking_date'):
        fields['booking_date'] = get_now_iso()

    return fields


def resolve_image_fields(body: Dict[str, Any], uploaded: Dict[str, str]) -> Dict[str, str]:
    """
    Pick the value of each image field.

    An uploaded file wins over a URL in the body; missing both gives ''.

    Args:
        body: Request body
        uploaded: Stored paths of uploaded files by field name

    Returns:
        Dict with all IMAGE_FIELDS
    """
    return {
        field: uploaded.get(field) or body.get(field) or ''
        for field in IMAGE_FIELDS
    }


def create_booking(body: Dict[str, Any], files=None) -> Dict[str, Any]:
    """
    Create a booking with the next GRC number.

    The GRC number comes from the current booking count. If that number
    is already taken (deleted rows, concurrent creates) the insert is
    retried past the highest stored number, up to GRC_MAX_RETRIES times.

    Args:
        body: Request body (form or JSON)
        files: request.files or None

    Returns:
        The stored booking

    Raises:
        ValueError: If an uploaded image has an unsupported type
        PersistenceError: If the store fails or no GRC number could be allocated
    """
    uploaded = get_uploaded_paths(files, IMAGE_FIELDS)

    fields = build_booking_fields(body)
    fields.update(resolve_image_fields(body, uploaded))

    max_retries = current_app.config.get('GRC_MAX_RETRIES', 5)
    count = count_bookings()

    for _ in range(max_retries):
        fields['grc_no'] = generate_grc_no(count)
        try:
            booking = insert_booking(fields)
        except DuplicateGrcError:
            logger.warning(f"GRC number {fields['grc_no']} taken, retrying")
            count = max(count + 1, get_max_grc_number())
            continue

        logger.info(f"Created booking {booking['id']} ({booking['grc_no']})")
        return booking

    raise PersistenceError(f'Could not allocate a GRC number after {max_retries} attempts')


def build_update_fields(body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Coerce the fields present in an update request body.

    Keys outside PATCHABLE_FIELDS (including grc_no) are dropped.

    Args:
        body: Request body (form or JSON)

    Returns:
        Dict of column values to replace
    """
    fields = {}
    for key, value in body.items():
        if key not in PATCHABLE_FIELDS:
            logger.debug(f'Ignoring unknown booking field {key!r}')
            continue
        fields[key] = coerce_field(key, value, BOOLEAN_FIELDS, NUMBER_FIELDS)
    return fields


def update_booking_from_request(
    booking_id: int,
    body: Dict[str, Any],
    files=None
) -> Optional[Dict[str, Any]]:
    """
    Apply a partial update from a request.

    Args:
        booking_id: Booking ID
        body: Request body (form or JSON)
        files: request.files or None

    Returns:
        The updated booking, or None if no booking has this ID
    """
    fields = build_update_fields(body)
    fields.update(get_uploaded_paths(files, IMAGE_FIELDS))

    booking = update_booking(booking_id, fields)
    if booking is None:
        logger.info(f'Update skipped, booking {booking_id} not found')
    else:
        logger.info(f'Updated booking {booking_id}: {", ".join(sorted(fields)) or "no fields"}')
    return booking


def update_booking_status(booking_id: int, status) -> Optional[Dict[str, Any]]:
    """
    Replace only the status of a booking.

    Args:
        booking_id: Booking ID
        status: New status text (trimmed)

    Returns:
        The updated booking, or None if no booking has this ID

    Raises:
        ValueError: If status is missing or not a string
    """
    if not isinstance(status, str):
        raise ValueError('Status is required')

    return update_booking(booking_id, {'status': clean_string(status)})


def remove_booking(booking_id: int) -> bool:
    """
    Delete a booking. Deleting a missing booking is not an error.

    Args:
        booking_id: Booking ID

    Returns:
        True if a booking was deleted
    """
    deleted = delete_booking(booking_id)
    if deleted:
        logger.info(f'Deleted booking {booking_id}')
    else:
        logger.info(f'Delete requested for missing booking {booking_id}')
    return deleted
