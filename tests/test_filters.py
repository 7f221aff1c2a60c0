from types import SimpleNamespace

from market.libs.constants import Hall, ProductCategory, ServiceCategory
from market.products.models import ProductStatus, ProductType
from market.search.filters import (
    DemandFilters,
    PriceRange,
    ProductFilters,
    ServiceFilters,
    parse_float,
)


def product(**overrides):
    fields = dict(
        title="Study Lamp",
        description=None,
        category=ProductCategory.ELECTRONICS,
        address_hall=Hall.RK,
        product_type=ProductType.USED,
        status=ProductStatus.LISTED,
        condition=3,
        price=300.0,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def service(**overrides):
    fields = dict(
        title="Maths Tutoring",
        description=None,
        category=ServiceCategory.ACADEMICS,
        address_hall=Hall.NEHRU,
        experience="3+ years",
        min_price=300.0,
        max_price=500.0,
    )
    fields.update(overrides)
    item = SimpleNamespace(**fields)
    low = item.min_price if item.min_price is not None else item.max_price
    high = item.max_price if item.max_price is not None else item.min_price
    item.price_bounds = (low, high)
    return item


def test_blank_and_placeholder_values_are_not_supplied():
    filters = ProductFilters.from_args(
        {
            "category": "All Categories",
            "hall": "   ",
            "product_type": "",
            "condition": "abc",
            "min_price": "cheap",
            "max_price": None,
        }
    )
    assert filters == ProductFilters()
    assert filters.to_dict() == {"type": "product"}


def test_all_categories_equals_no_category_filter():
    items = [product(), product(category=ProductCategory.BOOKS)]
    with_sentinel = ProductFilters.from_args({"category": "All Categories"})
    without = ProductFilters.from_args({})
    assert [with_sentinel.matches(p) for p in items] == [without.matches(p) for p in items]


def test_enum_inputs_are_uppercased():
    filters = ProductFilters.from_args(
        {"category": "electronics", "hall": "rk", "product_type": "used", "status": "listed"}
    )
    assert filters.matches(product())
    assert not filters.matches(product(address_hall=Hall.MS))
    assert not filters.matches(product(status=ProductStatus.SOLD))


def test_condition_is_a_lower_bound():
    filters = ProductFilters.from_args({"condition": "4"})
    assert not filters.matches(product(condition=3))
    assert filters.matches(product(condition=4))
    assert filters.matches(product(condition=5))
    assert filters.to_dict()["condition"] == {"min": 4, "max": 5}


def test_product_price_bounds_are_inclusive():
    filters = ProductFilters.from_args({"min_price": "300", "max_price": "800"})
    assert filters.matches(product(price=300))
    assert filters.matches(product(price=800))
    assert not filters.matches(product(price=299.99))
    assert not filters.matches(product(price=800.01))
    assert not filters.matches(product(price=None))


def test_open_ended_price_range():
    filters = ProductFilters.from_args({"max_price": "500"})
    assert filters.price_range == PriceRange(min=None, max=500.0)
    assert filters.matches(product(price=0))
    assert filters.to_dict()["priceRange"] == {"max": 500.0}


def test_non_finite_numbers_are_dropped():
    assert parse_float("nan") is None
    assert parse_float("inf") is None
    assert parse_float(" 12.5 ") == 12.5


def test_service_price_range_overlaps():
    filters = ServiceFilters.from_args({"min_price": "450", "max_price": "1000"})
    assert filters.matches(service())
    assert filters.matches(service(min_price=1000, max_price=2000))
    assert not filters.matches(service(min_price=100, max_price=449))


def test_service_single_ended_price_mirrors():
    filters = ServiceFilters.from_args({"min_price": "200", "max_price": "250"})
    assert filters.matches(service(min_price=None, max_price=200))
    assert not filters.matches(service(min_price=None, max_price=None))


def test_service_experience_is_exact():
    filters = ServiceFilters.from_args({"experience": "3+ years"})
    assert filters.matches(service())
    assert not filters.matches(service(experience="3+ years of tutoring"))


def test_demand_category_matches_either_kind():
    filters = DemandFilters.from_args({"category": "design"})
    assert filters.matches(
        SimpleNamespace(product_category=None, service_category=ServiceCategory.DESIGN)
    )
    assert not filters.matches(
        SimpleNamespace(product_category=ProductCategory.BOOKS, service_category=None)
    )


def test_demand_ignores_hall():
    filters = DemandFilters.from_args({"hall": "RK"})
    assert filters == DemandFilters()


def test_predicate_combines_text_and_filters():
    predicate = ProductFilters.from_args({"hall": "RK"}).predicate("lamp")
    assert predicate(product())
    assert not predicate(product(title="Desk Chair"))
    assert not predicate(product(address_hall=Hall.MS))
