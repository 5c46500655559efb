"""
Bookings blueprint initialization.
Registers all guest registration routes under /api/bookings.

Individual route logic is in:
- routes/bookings.py - Booking CRUD, status, search and guest lookup
- routes/exports.py - Excel export and import
"""

from flask import Blueprint

# Create bookings blueprint
bookings_bp = Blueprint('bookings', __name__)

from blueprints.bookings.routes import bookings as booking_routes  # noqa: E402
from blueprints.bookings.routes import exports as export_routes  # noqa: E402

# Register all route functions on the blueprint
export_routes.register_routes(bookings_bp)
booking_routes.register_routes(bookings_bp)
