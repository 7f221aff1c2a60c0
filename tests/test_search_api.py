from market.libs.constants import Hall, ProductCategory, ServiceCategory
from market.products.models import ProductStatus
from market.search import services as search_services


def test_blank_query_returns_no_query_message(client):
    for url in ("/products/search", "/services/search?q=%20", "/demands/search?q="):
        res = client.get(url)
        assert res.status_code == 200
        assert res.get_json() == {"success": True, "data": [], "message": "No query provided"}


def test_product_search_with_hall(client, lamps):
    study, _ = lamps
    body = client.get("/products/search?q=lamp&hall=rk").get_json()
    assert body["success"] is True
    assert [p["id"] for p in body["data"]] == [study.id]
    assert body["query"] == "lamp"
    assert body["appliedFilters"] == {"type": "product", "hall": "RK"}


def test_product_search_with_max_price(client, lamps):
    study, _ = lamps
    body = client.get("/products/search?q=lamp&maxPrice=500").get_json()
    assert [p["id"] for p in body["data"]] == [study.id]
    assert body["appliedFilters"]["priceRange"] == {"max": 500.0}


def test_product_search_is_newest_first_and_limited(client, lamps):
    study, desk = lamps
    body = client.get("/products/search?q=lamp").get_json()
    assert [p["id"] for p in body["data"]] == [desk.id, study.id]

    body = client.get("/products/search?q=lamp&limit=1").get_json()
    assert [p["id"] for p in body["data"]] == [desk.id]


def test_product_search_ignores_malformed_and_unknown_filters(client, lamps):
    body = client.get(
        "/products/search?q=lamp&minPrice=abc&category=All%20Categories&color=red"
    ).get_json()
    assert len(body["data"]) == 2
    assert body["appliedFilters"] == {"type": "product"}


def test_product_search_covers_every_status(client, make_product):
    make_product("Sold Lamp", status=ProductStatus.SOLD)
    body = client.get("/products/search?q=lamp&status=sold").get_json()
    assert [p["title"] for p in body["data"]] == ["Sold Lamp"]


def test_product_search_condition(client, make_product):
    make_product("Old Lamp", condition=2)
    make_product("New Lamp", condition=5)
    body = client.get("/products/search?q=lamp&condition=4").get_json()
    assert [p["title"] for p in body["data"]] == ["New Lamp"]
    assert body["appliedFilters"]["condition"] == {"min": 4, "max": 5}


def test_service_search_filters(client, make_service):
    make_service("Maths Tutoring", min_price=300, max_price=500, experience="3+ years")
    make_service(
        "Design Tutoring",
        category=ServiceCategory.DESIGN,
        min_price=1000,
        max_price=2000,
        address_hall=Hall.RK,
    )

    body = client.get("/services/search?q=tutoring&maxPrice=600").get_json()
    assert [s["title"] for s in body["data"]] == ["Maths Tutoring"]

    body = client.get("/services/search?q=tutoring&experience=3%2B%20years").get_json()
    assert [s["title"] for s in body["data"]] == ["Maths Tutoring"]

    body = client.get("/services/search?q=tutoring&category=design&hall=RK").get_json()
    assert [s["title"] for s in body["data"]] == ["Design Tutoring"]


def test_demand_search_by_category(client, make_demand):
    make_demand("Need a calculator", product_category=ProductCategory.STATIONERY)
    make_demand("Need a designer", service_category=ServiceCategory.DESIGN)

    body = client.get("/demands/search?q=need&category=DESIGN").get_json()
    assert [d["title"] for d in body["data"]] == ["Need a designer"]
    assert body["appliedFilters"] == {"type": "demand", "category": "DESIGN"}


def test_search_rejects_invalid_limit(client):
    assert client.get("/products/search?q=lamp&limit=-1").status_code == 400


def test_search_failure_envelope(app, client, monkeypatch):
    def broken():
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(
        search_services.ProductService, "get_all_products_for_search", broken
    )

    res = client.get("/products/search?q=lamp")
    assert res.status_code == 500
    assert res.get_json() == {"success": False, "message": "Search failed"}

    app.config["ENV"] = "development"
    res = client.get("/products/search?q=lamp")
    assert res.get_json()["details"] == "database unavailable"


def test_global_search(client, lamps, make_service, make_demand):
    make_service("Lamp Repair")
    make_demand("Need a lamp")

    body = client.get("/search?q=lamp").get_json()
    assert [p["title"] for p in body["products"]] == ["Desk Lamp", "Study Lamp"]
    assert [s["title"] for s in body["services"]] == ["Lamp Repair"]
    assert [d["title"] for d in body["demands"]] == ["Need a lamp"]
    assert body["total"] == 4
    assert body["query"] == "lamp"
    assert "suggestions" not in body


def test_global_search_short_query(client, lamps):
    body = client.get("/search?q=l").get_json()
    assert body == {"products": [], "services": [], "demands": [], "total": 0, "query": "l"}


def test_global_search_limit_and_type(client, lamps, make_demand):
    make_demand("Need a lamp")

    body = client.get("/search?q=lamp&limit=1").get_json()
    assert len(body["products"]) == 1
    assert body["total"] == 2

    body = client.get("/search?q=lamp&type=demand").get_json()
    assert body["products"] == []
    assert body["total"] == 1

    assert client.get("/search?q=lamp&type=user").status_code == 400


def test_global_search_miss_offers_suggestions(client, lamps):
    body = client.get("/search?q=chair").get_json()
    assert body["total"] == 0
    assert "lamp" in body["suggestions"]
    assert 0 < len(body["suggestions"]) <= 5


def test_global_search_without_corpus_has_no_suggestions(client):
    body = client.get("/search?q=chair").get_json()
    assert body["total"] == 0
    assert "suggestions" not in body


def test_repeated_global_search_is_identical(client, lamps):
    assert client.get("/search?q=lamp").get_json() == client.get("/search?q=lamp").get_json()


def test_global_search_with_hall(client, lamps):
    body = client.get("/search?q=lamp&hall=RK").get_json()
    assert [p["title"] for p in body["products"]] == ["Study Lamp"]
    assert body["total"] == 1


def test_global_search_with_price_bounds(client, lamps, make_service):
    make_service("Lamp Repair", min_price=600, max_price=900)

    body = client.get("/search?q=lamp&maxPrice=500").get_json()
    assert [p["title"] for p in body["products"]] == ["Study Lamp"]
    assert body["services"] == []

    body = client.get("/search?q=lamp&minPrice=700").get_json()
    assert [p["title"] for p in body["products"]] == ["Desk Lamp"]
    assert [s["title"] for s in body["services"]] == ["Lamp Repair"]


def test_global_search_category_reaches_demands(client, lamps, make_demand):
    make_demand("Need a lamp", product_category=ProductCategory.ELECTRONICS)
    make_demand("Lamp design help", service_category=ServiceCategory.DESIGN)

    body = client.get("/search?q=lamp&category=design").get_json()
    assert body["products"] == []
    assert [d["title"] for d in body["demands"]] == ["Lamp design help"]


def test_global_search_filtered_miss_suggests_whole_title(client, lamps):
    body = client.get("/search?q=desk&hall=RK").get_json()
    assert body["total"] == 0
    assert body["suggestions"][0] == "desk lamp"
