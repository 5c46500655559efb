"""
Tests for the token cookie authentication gate.
"""

import pytest
from flask import g
from flask_login import current_user
from itsdangerous import URLSafeTimedSerializer

from utils.tokens import issue_token, verify_token, InvalidTokenError, TOKEN_SALT


class TestTokens:
    """Tests for token issue/verify helpers."""

    def test_round_trip(self, app):
        """Test a fresh token yields its user id."""
        with app.app_context():
            token = issue_token(42)
            assert verify_token(token) == 42

    def test_wrong_secret(self, app):
        """Test a token signed with another secret is rejected."""
        forged = URLSafeTimedSerializer('another-secret', salt=TOKEN_SALT).dumps({'user_id': 1})
        with app.app_context():
            with pytest.raises(InvalidTokenError):
                verify_token(forged)

    def test_garbage(self, app):
        """Test a malformed token is rejected."""
        with app.app_context():
            with pytest.raises(InvalidTokenError):
                verify_token('not-a-token')

    def test_expired(self, app):
        """Test an expired token is rejected."""
        with app.app_context():
            token = issue_token(1)
            with pytest.raises(InvalidTokenError):
                verify_token(token, max_age=-1)

    def test_missing_user_id_claim(self, app):
        """Test a validly signed token without user_id is rejected."""
        with app.app_context():
            serializer = URLSafeTimedSerializer(app.config['TOKEN_SECRET'], salt=TOKEN_SALT)
            token = serializer.dumps({'role': 'admin'})
            with pytest.raises(InvalidTokenError):
                verify_token(token)


class TestAuthGate:
    """Tests for protected route access."""

    def test_no_token(self, client):
        """Test request without cookie is rejected as no-token."""
        response = client.get('/api/bookings')
        assert response.status_code == 401
        data = response.get_json()
        assert data['success'] is False
        assert data['message'] == 'Unauthorized - no token provided'

    def test_tampered_token(self, app, client, make_token):
        """Test request with a tampered token is rejected as invalid."""
        token = make_token(1)
        tampered = token[:-4] + ('AAAA' if not token.endswith('AAAA') else 'BBBB')
        client.set_cookie(app.config['TOKEN_COOKIE_NAME'], tampered)

        response = client.get('/api/bookings')
        assert response.status_code == 401
        assert response.get_json()['message'] == 'Unauthorized - invalid token'

    def test_expired_token(self, app, client, make_token):
        """Test request with an expired token is rejected as invalid."""
        client.set_cookie(app.config['TOKEN_COOKIE_NAME'], make_token(1))
        app.config['TOKEN_MAX_AGE'] = -1

        response = client.get('/api/bookings')
        assert response.status_code == 401
        assert response.get_json()['message'] == 'Unauthorized - invalid token'

    def test_valid_token(self, auth_client):
        """Test request with a valid token proceeds."""
        response = auth_client.get('/api/bookings')
        assert response.status_code == 200
        assert response.get_json()['success'] is True

    def test_remember_cookie_does_not_bypass_token(self, auth_client):
        """Test a stray Flask-Login remember cookie leaves token auth in charge."""
        auth_client.set_cookie('remember_token', '1|garbage')
        response = auth_client.get('/api/bookings')
        assert response.status_code == 200
        assert response.get_json()['success'] is True

    def test_user_id_available_downstream(self, app, make_token):
        """Test the decoded user id is attached to the request context."""
        token = make_token(7)
        cookie = f"{app.config['TOKEN_COOKIE_NAME']}={token}"

        with app.test_request_context('/api/bookings', headers={'Cookie': cookie}):
            assert current_user.is_authenticated
            assert current_user.id == 7
            assert g.user_id == 7

    def test_every_booking_route_is_protected(self, client):
        """Test all booking routes require the token."""
        requests = [
            ('post', '/api/bookings'),
            ('get', '/api/bookings/search'),
            ('get', '/api/bookings/export'),
            ('post', '/api/bookings/import'),
            ('get', '/api/bookings/guest/GRC-001'),
            ('get', '/api/bookings/1'),
            ('put', '/api/bookings/1'),
            ('patch', '/api/bookings/1/status'),
            ('delete', '/api/bookings/1'),
        ]
        for method, url in requests:
            response = getattr(client, method)(url)
            assert response.status_code == 401, f'{method.upper()} {url} should be protected'

    def test_health_is_public(self, client):
        """Test health check needs no token."""
        response = client.get('/api/health')
        assert response.status_code == 200
        assert response.get_json()['status'] == 'ok'
