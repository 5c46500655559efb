"""
Flask extensions initialization.
Extensions are initialized here and then initialized with the app in app.py.
"""

from flask import g, current_app
from flask_login import LoginManager

from utils.api_response import api_error

# Initialize Flask-Login
login_manager = LoginManager()

# API only: never redirect to a login page
login_manager.login_view = None

NO_TOKEN_MESSAGE = 'Unauthorized - no token provided'
INVALID_TOKEN_MESSAGE = 'Unauthorized - invalid token'


@login_manager.request_loader
def load_user_from_token(request):
    """
    Load the user from the signed token cookie.

    Records the failure reason on g.auth_error so the unauthorized
    handler can tell a missing token from an invalid one.

    Args:
        request: Incoming Flask request

    Returns:
        User object or None if the token is missing or invalid
    """
    from models.user import User
    from utils.tokens import verify_token, InvalidTokenError

    cookie_name = current_app.config.get('TOKEN_COOKIE_NAME', 'token')
    token = request.cookies.get(cookie_name)
    if not token:
        g.auth_error = NO_TOKEN_MESSAGE
        return None

    try:
        user_id = verify_token(token)
    except InvalidTokenError as e:
        current_app.logger.info(f'Rejected auth token: {e}')
        g.auth_error = INVALID_TOKEN_MESSAGE
        return None

    g.user_id = user_id
    return User(user_id)


@login_manager.unauthorized_handler
def unauthorized():
    """Return a JSON 401 instead of redirecting."""
    return api_error(g.get('auth_error', NO_TOKEN_MESSAGE), status=401)
