"""Booking services package."""

from blueprints.bookings.services.booking_service import (  # noqa: F401
    build_booking_fields,
    resolve_image_fields,
    create_booking,
    build_update_fields,
    update_booking_from_request,
    update_booking_status,
    remove_booking,
)
from blueprints.bookings.services.export_service import (  # noqa: F401
    EXPORT_COLUMNS,
    build_bookings_workbook,
    export_bookings_xlsx,
    import_bookings_from_excel,
)
