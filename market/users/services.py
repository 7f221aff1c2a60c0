# python imports
import logging

# package imports
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# projects imports
from external.database import db
from market.libs.session import session_scope
from market.libs.errors import APIError, NotFoundError, ValidationError

# app imports
from .models import User

logger = logging.getLogger(__name__)

# Marks a profile field the caller did not send, as opposed to an explicit null
UNSET = object()


def generate_initials(email):
    """'arjun.sharma@x' -> 'AS', 'rohit@x' -> 'RO'"""
    if not email:
        return "NA"
    local_part = email.split("@")[0]
    name_parts = [part for part in local_part.split(".") if part]
    if len(name_parts) >= 2:
        return "".join(part[0].upper() for part in name_parts)
    return local_part[:2].upper()


def is_allowed_email(email, allowed_domains):
    if not email or "@" not in email:
        return False
    return any(email.lower().endswith(f"@{domain.lower()}") for domain in allowed_domains)


class UserService:
    @staticmethod
    def get_user_by_email(email):
        if not email:
            return None
        try:
            return db.session.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching user {email}: {str(e)}")
            raise APIError("Failed to fetch user", 500)

    @staticmethod
    def get_user(user_id):
        try:
            user = db.session.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching user {user_id}: {str(e)}")
            raise APIError("Failed to fetch user", 500)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def get_or_create_user(email, name=None, image=None):
        """
        Return the user for ``email``, adding one to the session if absent.

        The new row is flushed, not committed: callers run inside their own
        ``session_scope``.
        """
        if not email:
            raise ValidationError("Email is required")

        user = UserService.get_user_by_email(email)
        if user:
            return user

        user = User(email=email, name=name or generate_initials(email), image=image)
        db.session.add(user)
        db.session.flush()
        logger.info(f"Created user {user.id} for {email}")
        return user

    @staticmethod
    def ensure_user(email, name=None, image=None):
        """Committed variant of ``get_or_create_user``"""
        try:
            with session_scope():
                return UserService.get_or_create_user(email, name=name, image=image)
        except IntegrityError:
            # Created by a concurrent request in the meantime
            logger.info(f"User {email} created concurrently, reloading")
            user = UserService.get_user_by_email(email)
            if not user:
                raise APIError("Failed to create user", 500)
            return user
        except SQLAlchemyError as e:
            logger.error(f"Database error creating user {email}: {str(e)}")
            raise APIError("Failed to create user", 500)

    @staticmethod
    def create_or_update_user(email, name=UNSET, image=UNSET, mobile_number=UNSET):
        """Upsert keyed by email; only the fields that were passed are written"""
        if not email:
            raise ValidationError("Email is required")
        try:
            with session_scope():
                user = UserService.get_or_create_user(
                    email,
                    name=None if name is UNSET else name,
                    image=None if image is UNSET else image,
                )
                if name is not UNSET:
                    user.name = name or generate_initials(email)
                if image is not UNSET:
                    user.image = image
                if mobile_number is not UNSET:
                    user.mobile_number = mobile_number
                return user
        except SQLAlchemyError as e:
            logger.error(f"Database error saving user {email}: {str(e)}")
            raise APIError("Failed to save user", 500)

    @staticmethod
    def get_user_listings(user):
        """Products, services and demands of ``user``, newest first"""
        from market.products.models import Product
        from market.services.models import Service
        from market.demands.models import Demand

        return {
            "products": user.products.order_by(
                Product.created_at.desc(), Product.id.desc()
            ).all(),
            "services": user.services.order_by(
                Service.created_at.desc(), Service.id.desc()
            ).all(),
            "demands": user.demands.order_by(
                Demand.created_at.desc(), Demand.id.desc()
            ).all(),
        }

    @staticmethod
    def get_user_detail(user_id):
        """Public profile with every listing and per-type counts"""
        user = UserService.get_user(user_id)
        try:
            listings = UserService.get_user_listings(user)
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching listings of {user_id}: {str(e)}")
            raise APIError("Failed to fetch user", 500)
        return {
            **user.to_dict(),
            **listings,
            "counts": {key: len(items) for key, items in listings.items()},
        }
