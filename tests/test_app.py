"""
Application factory and configuration tests.
"""

import pytest

from app import create_app
from config import ProductionConfig


class TestAppFactory:
    """Test application creation."""

    def test_test_config(self, app):
        """Test the test configuration is loaded."""
        assert app.testing is True
        assert app.config['TOKEN_COOKIE_NAME'] == 'token'
        assert app.config['DEFAULT_PAGE_SIZE'] == 10

    def test_blueprints_registered(self, app):
        """Test the API blueprints are registered."""
        assert 'api' in app.blueprints
        assert 'bookings' in app.blueprints

    def test_unknown_route_envelope(self, client):
        """Test unknown routes return the JSON error envelope."""
        response = client.get('/api/nothing-here')
        assert response.status_code == 404
        data = response.get_json()
        assert data['success'] is False
        assert data['message']

    def test_method_not_allowed_envelope(self, auth_client):
        """Test wrong methods return the JSON error envelope."""
        response = auth_client.post('/api/bookings/search')
        assert response.status_code == 405
        assert response.get_json()['success'] is False

    def test_init_db_cli(self, app):
        """Test the init-db command recreates the schema."""
        runner = app.test_cli_runner()
        result = runner.invoke(args=['init-db'])
        assert 'Database initialized successfully!' in result.output

    def test_issue_token_cli(self, app):
        """Test the issue-token command prints a verifiable token."""
        from utils.tokens import verify_token

        runner = app.test_cli_runner()
        result = runner.invoke(args=['issue-token', 'user-9'])
        token = result.output.strip()

        with app.app_context():
            assert verify_token(token) == 'user-9'


class TestProductionConfig:
    """Test production configuration validation."""

    def test_requires_secret_key(self, monkeypatch):
        """Test production refuses to start without a SECRET_KEY."""
        monkeypatch.delenv('SECRET_KEY', raising=False)
        with pytest.raises(ValueError):
            ProductionConfig.validate()

    def test_rejects_short_secret(self, monkeypatch):
        """Test production refuses a short SECRET_KEY."""
        monkeypatch.setenv('SECRET_KEY', 'short')
        monkeypatch.setenv('DATABASE_PATH', '/tmp/bookings.db')
        with pytest.raises(ValueError):
            create_app('production')

    def test_valid_environment(self, monkeypatch):
        """Test validation passes with the required variables."""
        monkeypatch.setenv('SECRET_KEY', 'x' * 40)
        monkeypatch.setenv('DATABASE_PATH', '/tmp/bookings.db')
        monkeypatch.delenv('TOKEN_SECRET', raising=False)
        ProductionConfig.validate()
