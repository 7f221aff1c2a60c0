# python imports
import logging

# package imports
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

# project imports
from external.database import db
from market.libs.session import session_scope
from market.libs.errors import APIError, ForbiddenError, NotFoundError, ValidationError
from market.users.services import UserService

# app imports
from .models import Service
from .constants import EDITABLE_SERVICE_FIELDS, SIMILAR_SERVICES_LIMIT


logger = logging.getLogger(__name__)


def _check_price_range(service):
    if (
        service.min_price is not None
        and service.max_price is not None
        and service.min_price > service.max_price
    ):
        raise ValidationError(
            "Minimum price cannot exceed maximum price",
            errors={"minPrice": ["Must not be greater than maxPrice."]},
        )


class ServiceListingService:
    """Persistence operations for service listings"""

    @staticmethod
    def _base_query():
        return db.session.query(Service).options(joinedload(Service.owner))

    @staticmethod
    def _newest_first(query):
        return query.order_by(Service.created_at.desc(), Service.id.desc())

    @staticmethod
    def get_all_services():
        try:
            return ServiceListingService._newest_first(
                ServiceListingService._base_query()
            ).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching services: {str(e)}")
            raise APIError("Failed to fetch services", 500)

    @staticmethod
    def get_recent_services(limit=SIMILAR_SERVICES_LIMIT):
        try:
            return ServiceListingService._newest_first(
                ServiceListingService._base_query()
            ).limit(limit).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching recent services: {str(e)}")
            raise APIError("Failed to fetch services", 500)

    @staticmethod
    def get_similar_services(category, exclude_id=None, limit=SIMILAR_SERVICES_LIMIT):
        try:
            query = ServiceListingService._base_query().filter(
                Service.category == category
            )
            if exclude_id:
                query = query.filter(Service.id != exclude_id)
            return ServiceListingService._newest_first(query).limit(limit).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching similar services: {str(e)}")
            raise APIError("Failed to fetch services", 500)

    @staticmethod
    def get_service(service_id):
        try:
            service = (
                ServiceListingService._base_query()
                .filter(Service.id == service_id)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching service {service_id}: {str(e)}")
            raise APIError("Failed to fetch service", 500)
        if not service:
            raise NotFoundError("Service not found")
        return service

    @staticmethod
    def create_service(service_data, email):
        try:
            with session_scope() as session:
                owner = UserService.get_or_create_user(email)
                service = Service(
                    owner=owner,
                    **{
                        k: v
                        for k, v in service_data.items()
                        if k in EDITABLE_SERVICE_FIELDS
                    },
                )
                _check_price_range(service)
                session.add(service)
                session.flush()

                logger.info(f"Created service {service.id} for {email}")
                return service
        except SQLAlchemyError as e:
            logger.error(f"Database error creating service: {str(e)}")
            raise APIError("Failed to create service", 500)

    @staticmethod
    def update_service(service_id, email, update_data):
        """Update service details (owner only)"""
        try:
            with session_scope():
                service = ServiceListingService.get_service(service_id)
                if not service.is_owned_by(email):
                    raise ForbiddenError("Unauthorized to edit this service")

                for field in EDITABLE_SERVICE_FIELDS:
                    if field in update_data:
                        setattr(service, field, update_data[field])
                _check_price_range(service)
                return service

        except SQLAlchemyError as e:
            logger.error(f"Database error updating service {service_id}: {str(e)}")
            raise APIError("Failed to update service", 500)

    @staticmethod
    def delete_service(service_id, email):
        """Delete service (owner only)"""
        try:
            with session_scope() as session:
                service = ServiceListingService.get_service(service_id)
                if not service.is_owned_by(email):
                    raise ForbiddenError("Unauthorized to delete this service")

                session.delete(service)
                logger.info(f"Deleted service {service_id}")
                return True

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting service {service_id}: {str(e)}")
            raise APIError("Failed to delete service", 500)
