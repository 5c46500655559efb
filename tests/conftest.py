"""
Pytest configuration and fixtures.
Ensures tests use an isolated database per test, never the real one.
"""

import os
import pytest

# Set the environment BEFORE importing app so config picks it up
os.environ['FLASK_ENV'] = 'test'


@pytest.fixture
def app(tmp_path):
    """Create test application with an isolated database."""
    from app import create_app
    from database import init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['DATABASE_PATH'] = str(tmp_path / 'bookings_test.db')
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')

    # No app context is held during the test: each request gets its own g
    with app.app_context():
        init_db()

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def make_token(app):
    """Return a function issuing a signed token for a user id."""
    from utils.tokens import issue_token

    def _make_token(user_id=1):
        with app.app_context():
            return issue_token(user_id)

    return _make_token


@pytest.fixture
def auth_client(app, client, make_token):
    """Create test client carrying a valid token cookie."""
    client.set_cookie(app.config['TOKEN_COOKIE_NAME'], make_token(1))
    return client


@pytest.fixture
def create_booking_record(app):
    """Return a function creating a booking through the create service."""
    from blueprints.bookings.services.booking_service import create_booking

    def _create(**body):
        with app.app_context():
            return create_booking(body)

    return _create
