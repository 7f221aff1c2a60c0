from datetime import datetime

import pytest
from flask import request

from external.database import db
from main.setup import create_app
from market.libs.auth import SessionResult
from market.libs.constants import Hall, ProductCategory, ServiceCategory
from market.users.services import UserService
from market.products.models import Product
from market.services.models import Service
from market.demands.models import Demand

TEST_EMAIL_HEADER = "X-Test-Email"

OWNER = "arjun.sharma@iitkgp.ac.in"
OTHER = "priya.patel@iitkgp.ac.in"


class HeaderSessionValidator:
    """Signs a request in as whoever the test header names"""

    def validate(self):
        email = request.headers.get(TEST_EMAIL_HEADER)
        if not email:
            return SessionResult(valid=False, error="Unauthorized")
        return SessionResult(valid=True, email=email, name="Test User")


def as_user(email):
    return {TEST_EMAIL_HEADER: email}


@pytest.fixture
def test_config(tmp_path):
    return {
        "ENV": "testing",
        "TESTING": True,
        "DEBUG": False,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "LOG_DIR": tmp_path / "logs",
        "LOG_LEVEL": "WARNING",
    }


@pytest.fixture
def app(test_config):
    app = create_app(config=test_config, session_validator=HeaderSessionValidator())
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def make_product(app):
    def _make(title, owner=OWNER, **fields):
        fields.setdefault("category", ProductCategory.ELECTRONICS)
        product = Product(
            title=title, owner=UserService.get_or_create_user(owner), **fields
        )
        db.session.add(product)
        db.session.commit()
        return product

    return _make


@pytest.fixture
def make_service(app):
    def _make(title, owner=OWNER, **fields):
        fields.setdefault("category", ServiceCategory.ACADEMICS)
        service = Service(
            title=title, owner=UserService.get_or_create_user(owner), **fields
        )
        db.session.add(service)
        db.session.commit()
        return service

    return _make


@pytest.fixture
def make_demand(app):
    def _make(title, owner=OWNER, **fields):
        demand = Demand(
            title=title, owner=UserService.get_or_create_user(owner), **fields
        )
        db.session.add(demand)
        db.session.commit()
        return demand

    return _make


@pytest.fixture
def lamps(make_product):
    """Two lamps; the desk lamp is created last and so sorts first"""
    study = make_product(
        "Study Lamp",
        address_hall=Hall.RK,
        price=300,
        created_at=datetime(2024, 1, 1),
    )
    desk = make_product(
        "Desk Lamp",
        address_hall=Hall.MS,
        price=800,
        created_at=datetime(2024, 1, 2),
    )
    return study, desk
