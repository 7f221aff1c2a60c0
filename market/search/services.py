# python imports
import logging

# package imports
from flask import current_app

# project imports
from market.libs.errors import SearchError
from market.products.services import ProductService
from market.services.services import ServiceListingService
from market.demands.services import DemandService

# app imports
from .engine import (
    CAP_PER_TYPE,
    DEFAULT_GLOBAL_RESULTS,
    FILTER_CLASSES,
    MAX_RESULTS,
    MIN_GLOBAL_QUERY_LENGTH,
    Corpus,
    clamp_limit,
    empty_envelope,
    global_search,
    search,
)
from .filters import DemandFilters, ProductFilters, ServiceFilters
from .suggestions import suggest

logger = logging.getLogger(__name__)

NO_QUERY_MESSAGE = "No query provided"


def _error_details(error):
    if current_app.config.get("ENV") == "development":
        return str(error)
    return None


class SearchService:
    @staticmethod
    def _search_entity(entity_type, load_candidates, filters_class, args):
        query = (args.get("q") or "").strip()
        if not query:
            return {"success": True, "data": [], "message": NO_QUERY_MESSAGE}

        filters = filters_class.from_args(args)
        limit = clamp_limit(
            args.get("limit"),
            current_app.config.get("SEARCH_MAX_RESULTS", MAX_RESULTS),
        )
        try:
            results = search(load_candidates(), query, filters, limit)
        except Exception as e:
            logger.exception(f"{entity_type} search failed for {query!r}")
            raise SearchError(details=_error_details(e))

        logger.info(f"{entity_type} search {query!r} returned {len(results)} results")
        return {
            "success": True,
            "data": results,
            "query": query,
            "applied_filters": filters.to_dict(),
        }

    @staticmethod
    def search_products(args):
        return SearchService._search_entity(
            "product", ProductService.get_all_products_for_search, ProductFilters, args
        )

    @staticmethod
    def search_services(args):
        return SearchService._search_entity(
            "service", ServiceListingService.get_all_services, ServiceFilters, args
        )

    @staticmethod
    def search_demands(args):
        return SearchService._search_entity(
            "demand", DemandService.get_all_demands, DemandFilters, args
        )

    @staticmethod
    def _load_corpus(entity_type=None):
        loaders = {
            "product": ("products", ProductService.get_all_products_for_search),
            "service": ("services", ServiceListingService.get_all_services),
            "demand": ("demands", DemandService.get_all_demands),
        }
        collections = {
            key: load()
            for kind, (key, load) in loaders.items()
            if entity_type in (None, kind)
        }
        return Corpus(**collections)

    @staticmethod
    def global_search(args):
        """
        Products, services and demands matching ``q`` and the shared filters.

        ``category``, ``hall`` and the price bounds go to every entity type
        that supports them. Suggestions are added on a miss.
        """
        query = (args.get("q") or "").strip()
        if len(query) < MIN_GLOBAL_QUERY_LENGTH:
            return empty_envelope(query)

        config = current_app.config
        entity_type = args.get("type")
        max_results = args.get("limit") or config.get(
            "GLOBAL_SEARCH_MAX_RESULTS", DEFAULT_GLOBAL_RESULTS
        )
        try:
            corpus = SearchService._load_corpus(entity_type)
            results = global_search(
                corpus,
                query,
                max_results=max_results,
                entity_type=entity_type,
                cap_mode=config.get("GLOBAL_SEARCH_CAP_MODE", CAP_PER_TYPE),
                filters={
                    kind: filters_class.from_args(args)
                    for kind, filters_class in FILTER_CLASSES.items()
                },
            )
        except Exception as e:
            logger.exception(f"Global search failed for {query!r}")
            raise SearchError(details=_error_details(e))

        if results["total"] == 0:
            suggestions = suggest(
                corpus.titles(), query, config.get("SEARCH_SUGGESTION_COUNT", 5)
            )
            if suggestions:
                results["suggestions"] = suggestions

        logger.info(f"Global search {query!r} returned {results['total']} results")
        return results
