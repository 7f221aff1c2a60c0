"""
Typed filter bags for the per-entity search endpoints.

Each entity type gets its own dataclass listing exactly the options that affect
it. Raw query-string values go through ``from_args`` which applies the lenient
parsing rules shared by every listing page:

* a blank value is treated as not supplied
* a number that does not parse is treated as not supplied
* the "All Categories" placeholder is treated as not supplied
* enum-like values are upper-cased before comparison

Every supplied option is AND-combined with the others and with the text match.
"""
import math
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional

from market.libs.constants import ALL_CATEGORIES, MAX_CONDITION
from .normalizer import matches_query


def clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def clean_enum(value: Any) -> Optional[str]:
    value = clean_text(value)
    return value.upper() if value else None


def clean_category(value: Any) -> Optional[str]:
    value = clean_text(value)
    if value is None or value.lower() == ALL_CATEGORIES.lower():
        return None
    return value.upper()


def parse_float(value: Any) -> Optional[float]:
    value = clean_text(value)
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: Any) -> Optional[int]:
    number = parse_float(value)
    return int(number) if number is not None else None


def enum_value(value: Any) -> Optional[str]:
    """Stored enum members compare by their value"""
    if value is None:
        return None
    return getattr(value, "value", value)


@dataclass(frozen=True)
class PriceRange:
    min: Optional[float] = None
    max: Optional[float] = None

    @classmethod
    def from_bounds(cls, min_value: Any, max_value: Any) -> Optional["PriceRange"]:
        low, high = parse_float(min_value), parse_float(max_value)
        if low is None and high is None:
            return None
        return cls(min=low, max=high)

    def contains(self, value: Optional[float]) -> bool:
        if value is None:
            return False
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    def overlaps(self, low: Optional[float], high: Optional[float]) -> bool:
        if low is None or high is None:
            return False
        if self.min is not None and high < self.min:
            return False
        if self.max is not None and low > self.max:
            return False
        return True

    def to_dict(self) -> Dict[str, float]:
        return {k: v for k, v in (("min", self.min), ("max", self.max)) if v is not None}


class BaseFilters:
    entity_type: ClassVar[str] = ""

    def matches(self, entity) -> bool:
        raise NotImplementedError

    def predicate(self, query: str) -> Callable[[Any], bool]:
        """Text match on title/description composed with the structured filters"""

        def _predicate(entity) -> bool:
            return matches_query(
                entity.title, entity.description, query
            ) and self.matches(entity)

        return _predicate

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class ProductFilters(BaseFilters):
    entity_type: ClassVar[str] = "product"

    category: Optional[str] = None
    hall: Optional[str] = None
    product_type: Optional[str] = None
    status: Optional[str] = None
    min_condition: Optional[int] = None
    price_range: Optional[PriceRange] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "ProductFilters":
        return cls(
            category=clean_category(args.get("category")),
            hall=clean_enum(args.get("hall")),
            product_type=clean_enum(args.get("product_type")),
            status=clean_enum(args.get("status")),
            min_condition=parse_int(args.get("condition")),
            price_range=PriceRange.from_bounds(
                args.get("min_price"), args.get("max_price")
            ),
        )

    def matches(self, product) -> bool:
        if self.category and enum_value(product.category) != self.category:
            return False
        if self.hall and enum_value(product.address_hall) != self.hall:
            return False
        if self.product_type and enum_value(product.product_type) != self.product_type:
            return False
        if self.status and enum_value(product.status) != self.status:
            return False
        if self.min_condition is not None:
            if product.condition is None or not (
                self.min_condition <= product.condition <= MAX_CONDITION
            ):
                return False
        if self.price_range and not self.price_range.contains(product.price):
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        applied: Dict[str, Any] = {"type": self.entity_type}
        if self.category:
            applied["category"] = self.category
        if self.hall:
            applied["hall"] = self.hall
        if self.product_type:
            applied["productType"] = self.product_type
        if self.status:
            applied["status"] = self.status
        if self.min_condition is not None:
            applied["condition"] = {"min": self.min_condition, "max": MAX_CONDITION}
        if self.price_range:
            applied["priceRange"] = self.price_range.to_dict()
        return applied


@dataclass(frozen=True)
class ServiceFilters(BaseFilters):
    entity_type: ClassVar[str] = "service"

    category: Optional[str] = None
    hall: Optional[str] = None
    experience: Optional[str] = None
    price_range: Optional[PriceRange] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "ServiceFilters":
        return cls(
            category=clean_category(args.get("category")),
            hall=clean_enum(args.get("hall")),
            experience=clean_text(args.get("experience")),
            price_range=PriceRange.from_bounds(
                args.get("min_price"), args.get("max_price")
            ),
        )

    def matches(self, service) -> bool:
        if self.category and enum_value(service.category) != self.category:
            return False
        if self.hall and enum_value(service.address_hall) != self.hall:
            return False
        if self.experience and service.experience != self.experience:
            return False
        if self.price_range and not self.price_range.overlaps(*service.price_bounds):
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        applied: Dict[str, Any] = {"type": self.entity_type}
        if self.category:
            applied["category"] = self.category
        if self.hall:
            applied["hall"] = self.hall
        if self.experience:
            applied["experience"] = self.experience
        if self.price_range:
            applied["priceRange"] = self.price_range.to_dict()
        return applied


@dataclass(frozen=True)
class DemandFilters(BaseFilters):
    entity_type: ClassVar[str] = "demand"

    category: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "DemandFilters":
        return cls(category=clean_category(args.get("category")))

    def matches(self, demand) -> bool:
        if self.category and self.category not in (
            enum_value(demand.product_category),
            enum_value(demand.service_category),
        ):
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        applied: Dict[str, Any] = {"type": self.entity_type}
        if self.category:
            applied["category"] = self.category
        return applied
