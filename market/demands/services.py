# python imports
import logging

# package imports
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

# project imports
from external.database import db
from market.libs.session import session_scope
from market.libs.errors import APIError, ForbiddenError, NotFoundError
from market.users.services import UserService

# app imports
from .models import Demand
from .constants import EDITABLE_DEMAND_FIELDS


logger = logging.getLogger(__name__)


class DemandService:
    @staticmethod
    def get_all_demands():
        """Every demand, newest first"""
        try:
            return (
                db.session.query(Demand)
                .options(joinedload(Demand.owner))
                .order_by(Demand.created_at.desc(), Demand.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching demands: {str(e)}")
            raise APIError("Failed to fetch demands", 500)

    @staticmethod
    def get_demand(demand_id):
        try:
            demand = (
                db.session.query(Demand)
                .options(joinedload(Demand.owner))
                .filter(Demand.id == demand_id)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching demand {demand_id}: {str(e)}")
            raise APIError("Failed to fetch demand", 500)
        if not demand:
            raise NotFoundError("Demand not found")
        return demand

    @staticmethod
    def create_demand(demand_data, email):
        try:
            with session_scope() as session:
                owner = UserService.get_or_create_user(email)
                demand = Demand(
                    owner=owner,
                    **{
                        k: v
                        for k, v in demand_data.items()
                        if k in EDITABLE_DEMAND_FIELDS
                    },
                )
                session.add(demand)
                session.flush()

                logger.info(f"Created demand {demand.id} for {email}")
                return demand
        except SQLAlchemyError as e:
            logger.error(f"Database error creating demand: {str(e)}")
            raise APIError("Failed to create demand", 500)

    @staticmethod
    def update_demand(demand_id, email, update_data):
        try:
            with session_scope():
                demand = DemandService.get_demand(demand_id)
                if not demand.is_owned_by(email):
                    raise ForbiddenError()

                for field in EDITABLE_DEMAND_FIELDS:
                    if field in update_data:
                        setattr(demand, field, update_data[field])
                return demand

        except SQLAlchemyError as e:
            logger.error(f"Database error updating demand {demand_id}: {str(e)}")
            raise APIError("Failed to update demand", 500)

    @staticmethod
    def delete_demand(demand_id, email):
        try:
            with session_scope() as session:
                demand = DemandService.get_demand(demand_id)
                if not demand.is_owned_by(email):
                    raise ForbiddenError()

                session.delete(demand)
                logger.info(f"Deleted demand {demand_id}")
                return True

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting demand {demand_id}: {str(e)}")
            raise APIError("Failed to delete demand", 500)
