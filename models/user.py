"""
Token user for Flask-Login integration.
Users are not stored locally: identity comes from the signed token cookie.
"""


class User:
    """
    User class for Flask-Login integration.
    Wraps the user_id claim decoded from the auth token.
    """

    def __init__(self, user_id):
        """
        Initialize User from a token claim.

        Args:
            user_id: User identifier embedded in the token
        """
        self.id = user_id

    @property
    def is_authenticated(self):
        """Required by Flask-Login."""
        return True

    @property
    def is_active(self):
        """Required by Flask-Login."""
        return True

    @property
    def is_anonymous(self):
        """Required by Flask-Login."""
        return False

    def get_id(self):
        """Required by Flask-Login. Returns user ID as unicode string."""
        return str(self.id)
