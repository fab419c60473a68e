# tests/conftest.py

import pytest
from flask.testing import FlaskClient
from daily_diet import create_app, db

TEST_SECRET = "test-secret-key-0123456789abcdefghijklmnop"


class _IsolatedClient(FlaskClient):
    # Cada petición en su propio app context (g no se comparte con el del fixture)
    def open(self, *args, **kwargs):
        with self.application.app_context():
            return super().open(*args, **kwargs)


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": TEST_SECRET,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    })
    app.test_client_class = _IsolatedClient
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def other_client(app):
    # Cliente con su propio tarro de cookies (otra sesión)
    return app.test_client()
