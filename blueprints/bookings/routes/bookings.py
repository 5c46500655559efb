"""
Booking API routes.
Create, update, status, delete, listing, search and guest lookup.
"""

from flask import current_app, request
from flask_login import login_required

from models.booking import get_all_bookings, get_booking_by_id, search_bookings, get_guest_info_by_grc
from blueprints.bookings.services.booking_service import (
    create_booking, update_booking_from_request, update_booking_status, remove_booking
)
from utils.api_response import api_success, api_error
from utils.decorators import handle_api_errors


def get_request_body() -> dict:
    """Return the request body as a dict (JSON object or form fields)."""
    if request.is_json:
        body = request.get_json(silent=True)
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise ValueError('Request body must be a JSON object')
        return body
    return request.form.to_dict()


def _positive_int_arg(name: str, default: int) -> int:
    """Parse a positive integer query arg, falling back to default."""
    value = request.args.get(name, type=int)
    if value is None or value < 1:
        return default
    return value


def register_routes(bp):
    """Register booking routes on the blueprint."""

    # ============================================================================
    # COMMANDS
    # ============================================================================

    @bp.route('', methods=['POST'])
    @login_required
    @handle_api_errors()
    def create():
        """Create a booking with the next GRC number."""
        booking = create_booking(get_request_body(), request.files)
        return api_success(status=201, booking=booking)

    @bp.route('/<int:booking_id>', methods=['PUT'])
    @login_required
    @handle_api_errors()
    def update(booking_id):
        """
        Partially update a booking.

        An unknown ID is not an error: the response carries booking=null.
        """
        booking = update_booking_from_request(booking_id, get_request_body(), request.files)
        return api_success(booking=booking)

    @bp.route('/<int:booking_id>/status', methods=['PATCH'])
    @login_required
    @handle_api_errors()
    def update_status(booking_id):
        """Update only the booking status."""
        body = get_request_body()
        booking = update_booking_status(booking_id, body.get('status'))
        return api_success(booking=booking)

    @bp.route('/<int:booking_id>', methods=['DELETE'])
    @login_required
    @handle_api_errors()
    def delete(booking_id):
        """Delete a booking. Succeeds even if the booking does not exist."""
        remove_booking(booking_id)
        return api_success(message='Booking deleted')

    # ============================================================================
    # QUERIES
    # ============================================================================

    @bp.route('', methods=['GET'])
    @login_required
    @handle_api_errors()
    def list_all():
        """Get all bookings, newest first."""
        return api_success(bookings=get_all_bookings())

    @bp.route('/search')
    @login_required
    @handle_api_errors()
    def search():
        """
        Search bookings with pagination.

        Query params:
            page: Page number (default 1)
            limit: Page size (default DEFAULT_PAGE_SIZE, max MAX_PAGE_SIZE)
            search: Text matched against name, GRC, room, mobile, phone, city
            status: Exact status
            payment_status: Exact payment status (paymentStatus also accepted)
        """
        default_limit = current_app.config.get('DEFAULT_PAGE_SIZE', 10)
        max_limit = current_app.config.get('MAX_PAGE_SIZE', 100)

        page = _positive_int_arg('page', 1)
        limit = min(_positive_int_arg('limit', default_limit), max_limit)
        payment_status = request.args.get('payment_status') or request.args.get('paymentStatus')

        result = search_bookings(
            page=page,
            limit=limit,
            search=request.args.get('search', ''),
            status=request.args.get('status') or None,
            payment_status=payment_status or None
        )
        return api_success(**result)

    @bp.route('/guest/<grc_no>')
    @login_required
    @handle_api_errors()
    def guest_info(grc_no):
        """Get guest details of the latest booking with a GRC number."""
        guest = get_guest_info_by_grc(grc_no)
        if guest is None:
            return api_error('No existing guest found', status=404)
        return api_success(data=guest)

    @bp.route('/<int:booking_id>', methods=['GET'])
    @login_required
    @handle_api_errors()
    def detail(booking_id):
        """Get a single booking."""
        booking = get_booking_by_id(booking_id)
        if booking is None:
            return api_error('Booking not found', status=404)
        return api_success(booking=booking)
