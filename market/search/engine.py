"""
In-memory search over candidate sets loaded from the database.

The functions here never touch the session: callers hand over the candidate
lists already ordered newest first and get plain lists back, so the same
code serves the per-entity endpoints, the global endpoint and the tests.
"""
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .filters import BaseFilters, DemandFilters, ProductFilters, ServiceFilters

MAX_RESULTS = 100
DEFAULT_GLOBAL_RESULTS = 20
MIN_GLOBAL_QUERY_LENGTH = 2

ENTITY_TYPES = ("product", "service", "demand")
CAP_PER_TYPE = "per_type"
CAP_AGGREGATE = "aggregate"

FILTER_CLASSES = {
    "product": ProductFilters,
    "service": ServiceFilters,
    "demand": DemandFilters,
}


@dataclass
class Corpus:
    products: Sequence[Any] = field(default_factory=list)
    services: Sequence[Any] = field(default_factory=list)
    demands: Sequence[Any] = field(default_factory=list)

    def collections(self):
        return (
            ("product", "products", self.products),
            ("service", "services", self.services),
            ("demand", "demands", self.demands),
        )

    def titles(self) -> Iterable[str]:
        for _, _, items in self.collections():
            for item in items:
                if item.title:
                    yield item.title


def clamp_limit(limit: Optional[int], ceiling: int = MAX_RESULTS) -> int:
    """Requested limit, never above ``ceiling`` and never negative"""
    ceiling = min(ceiling, MAX_RESULTS)
    if limit is None:
        return ceiling
    return max(0, min(int(limit), ceiling))


def search(
    candidates: Iterable[Any],
    query: Optional[str],
    filters: BaseFilters,
    limit: Optional[int] = MAX_RESULTS,
) -> List[Any]:
    """First ``limit`` candidates matching ``query`` and ``filters``, in candidate order"""
    query = (query or "").strip()
    if not query:
        return []

    limit = clamp_limit(limit)
    if not limit:
        return []

    predicate = filters.predicate(query)
    return list(islice((item for item in candidates if predicate(item)), limit))


def empty_envelope(query: str = "") -> Dict[str, Any]:
    return {"products": [], "services": [], "demands": [], "total": 0, "query": query}


def global_search(
    corpus: Corpus,
    query: Optional[str],
    max_results: Optional[int] = DEFAULT_GLOBAL_RESULTS,
    entity_type: Optional[str] = None,
    cap_mode: str = CAP_PER_TYPE,
    filters: Optional[Mapping[str, BaseFilters]] = None,
) -> Dict[str, Any]:
    """
    Run the search over products, services and demands at once.

    ``filters`` maps an entity type to the filters applied to that collection;
    types left out are matched on text alone. ``cap_mode`` decides how
    ``max_results`` applies: ``per_type`` caps each collection separately,
    ``aggregate`` caps the products, services, demands concatenation as a
    whole. ``entity_type`` restricts the search to one collection.
    """
    query = (query or "").strip()
    if len(query) < MIN_GLOBAL_QUERY_LENGTH:
        return empty_envelope(query)

    filters = filters or {}
    budget = clamp_limit(max_results)
    envelope = empty_envelope(query)

    for kind, key, items in corpus.collections():
        if entity_type and entity_type != kind:
            continue

        cap = budget
        if cap_mode == CAP_AGGREGATE:
            cap = budget - envelope["total"]
        if cap <= 0:
            continue

        predicate = filters.get(kind, FILTER_CLASSES[kind]()).predicate(query)
        found = list(islice((item for item in items if predicate(item)), cap))
        envelope[key] = found
        envelope["total"] += len(found)

    return envelope
