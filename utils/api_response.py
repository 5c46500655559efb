"""
Standardized API response helpers.

Provides consistent JSON response format across all API endpoints:

    Success:  {"success": true, "booking": {...}, "message": "..."}
    Error:    {"success": false, "message": "Booking not found"}

Usage:
    from utils.api_response import api_success, api_error

    return api_success(status=201, booking=booking)
    return api_error('Booking not found', status=404)
"""

from flask import jsonify
from typing import Any


def api_success(
    message: str | None = None,
    status: int = 200,
    **payload: Any
) -> tuple:
    """
    Build a standardized success JSON response.

    Args:
        message: Optional success message.
        status: HTTP status code (default 200).
        **payload: Top-level fields to include in the response
            (e.g., booking=..., bookings=..., total=...).

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': True}

    if message:
        response['message'] = message

    if payload:
        response.update(payload)

    return jsonify(response), status


def api_error(message: str, status: int = 400, **extra_fields: Any) -> tuple:
    """
    Build a standardized error JSON response.

    Args:
        message: Error message shown to the client.
        status: HTTP status code (default 400).
        **extra_fields: Additional top-level fields for error context.

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': False, 'message': message}

    if extra_fields:
        response.update(extra_fields)

    return jsonify(response), status
