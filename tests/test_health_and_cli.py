from external.database import db
from market.products.models import Product
from market.services.models import Service
from market.demands.models import Demand
from market.listings.management.data import PRODUCTS, SERVICES, DEMANDS


def test_status(client):
    assert client.get("/status").get_json() == {"status": "running", "environment": "testing"}


def test_health(client):
    body = client.get("/health").get_json()
    assert body["status"] == "healthy"
    assert body["environment"] == "testing"


def test_detailed_health(client, lamps):
    res = client.get("/health/detailed")
    assert res.status_code == 200
    body = res.get_json()
    assert body["components"]["database"]["status"] == "healthy"
    assert body["components"]["application"]["listings"] == {
        "products": 2,
        "services": 0,
        "demands": 0,
    }


def test_unknown_route_uses_error_envelope(client):
    res = client.get("/nowhere")
    assert res.status_code == 404
    assert "error" in res.get_json()


def test_seed_and_clear_listings(runner):
    result = runner.invoke(args=["seed-listings"])
    assert result.exit_code == 0, result.output
    assert db.session.query(Product).count() == len(PRODUCTS)
    assert db.session.query(Service).count() == len(SERVICES)
    assert db.session.query(Demand).count() == len(DEMANDS)

    result = runner.invoke(args=["seed-listings"])
    assert "already present" in result.output
    assert db.session.query(Product).count() == len(PRODUCTS)

    result = runner.invoke(args=["seed-listings", "--force"])
    assert result.exit_code == 0, result.output
    assert db.session.query(Product).count() == len(PRODUCTS)

    result = runner.invoke(args=["clear-listings", "--confirm"])
    assert result.exit_code == 0, result.output
    assert db.session.query(Product).count() == 0
    assert db.session.query(Demand).count() == 0


def test_clear_listings_can_be_cancelled(runner, lamps):
    result = runner.invoke(args=["clear-listings"], input="n\n")
    assert "cancelled" in result.output
    assert db.session.query(Product).count() == 2


def test_seeded_corpus_is_searchable(client, runner):
    runner.invoke(args=["seed-listings"])
    body = client.get("/search?q=lamp").get_json()
    assert [p["title"] for p in body["products"]] == ["Desk Lamp"]
