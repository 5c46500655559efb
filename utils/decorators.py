"""
Route decorators for authentication and error handling.
"""

from functools import wraps
from flask import current_app
from flask_login import login_required
from werkzeug.exceptions import HTTPException

from database import PersistenceError
from utils.api_response import api_error


def handle_api_errors(error_message: str = None):
    """
    Decorator converting any failure inside an API route into the
    standard error envelope.

    ValueError maps to 400 with its message. PersistenceError and any
    other exception map to 500 with error_message if given, else the
    exception's message. Failures are logged with traceback; responses
    never include one.

    Usage:
        @bp.route('/bookings', methods=['POST'])
        @login_required
        @handle_api_errors()
        def create():
            ...

    Args:
        error_message: Fixed message for 500 responses (optional)

    Returns:
        Decorator function
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except ValueError as e:
                current_app.logger.warning(f'{func.__name__} rejected input: {e}')
                return api_error(str(e), status=400)
            except PersistenceError as e:
                current_app.logger.error(f'{func.__name__} store error: {e}', exc_info=True)
                return api_error(error_message or str(e), status=500)
            except Exception as e:
                current_app.logger.error(f'{func.__name__} error: {e}', exc_info=True)
                return api_error(error_message or str(e), status=500)
        return wrapper
    return decorator


# Re-export login_required for convenience
__all__ = ['login_required', 'handle_api_errors']
