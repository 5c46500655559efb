"""
Signed auth token helpers.
Tokens carry a user_id claim, are signed with TOKEN_SECRET and expire
after TOKEN_MAX_AGE seconds.
"""

from flask import current_app
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

TOKEN_SALT = 'auth-token'


class InvalidTokenError(Exception):
    """Raised when a token is tampered, malformed or expired."""


def _get_serializer() -> URLSafeTimedSerializer:
    secret = current_app.config.get('TOKEN_SECRET') or current_app.config['SECRET_KEY']
    return URLSafeTimedSerializer(secret, salt=TOKEN_SALT)


def issue_token(user_id) -> str:
    """
    Create a signed token for a user.

    Args:
        user_id: User identifier to embed

    Returns:
        URL-safe token string
    """
    return _get_serializer().dumps({'user_id': user_id})


def verify_token(token: str, max_age: int = None):
    """
    Verify a token and return its user_id claim.

    Args:
        token: Token string from the cookie
        max_age: Max age in seconds (default: TOKEN_MAX_AGE)

    Returns:
        The user_id claim

    Raises:
        InvalidTokenError: If the signature is bad, the token expired
            or the payload has no user_id
    """
    if max_age is None:
        max_age = current_app.config.get('TOKEN_MAX_AGE')

    try:
        payload = _get_serializer().loads(token, max_age=max_age)
    except SignatureExpired as e:
        raise InvalidTokenError('Token expired') from e
    except BadSignature as e:
        raise InvalidTokenError('Invalid token signature') from e

    if not isinstance(payload, dict) or payload.get('user_id') is None:
        raise InvalidTokenError('Token has no user_id claim')

    return payload['user_id']
