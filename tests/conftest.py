# tests/conftest.py
import os
import sys
from datetime import date

import pytest

# чтобы import create_app работал при запуске из корня
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from extensions import db
from models import User
from modules.vehicles.models import Vehicle

API = "/.netlify/functions"


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
        "UPLOAD_FOLDER": str(tmp_path / "enterprisefiles"),
    })
    with app.app_context():
        db.create_all()
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def vehicle(app):
    v = Vehicle(
        license_plate="AB-123-CI",
        brand="Toyota",
        model="Hilux",
        type="TRUCK",
        year=2021,
        chassis_number="CH-0001",
        fuel_type="DIESEL",
    )
    db.session.add(v)
    db.session.commit()
    return v


@pytest.fixture()
def employee(app):
    user = User(
        first_name="Awa",
        last_name="Kone",
        email="awa.kone@example.com",
        employee_number="EMP-001",
        hire_date=date(2020, 5, 4),
    )
    db.session.add(user)
    db.session.commit()
    return user


class FlaskFetch:
    """``fetch(url, params)`` for the client views, served by the Flask test client."""

    class Response:
        def __init__(self, resp):
            self.status_code = resp.status_code
            self.ok = 200 <= resp.status_code < 300
            self._json = resp.get_json(silent=True)

        def json(self):
            return self._json

    def __init__(self, client):
        self.client = client
        self.calls = []

    def __call__(self, url, params):
        self.calls.append(dict(params))
        return self.Response(self.client.get(url, query_string=params))


@pytest.fixture()
def flask_fetch(client):
    return FlaskFetch(client)
