import logging

# package imports
from flask import current_app
from flask.views import MethodView

# project imports
from market.libs.api import Blueprint
from market.libs.decorators import session_required
from market.libs.errors import ForbiddenError, NotFoundError, ValidationError

# app imports
from .services import UNSET, UserService, is_allowed_email
from .schemas import (
    PublicProfileResultSchema,
    UserCreateSchema,
    UserListingsSchema,
    UserProfileUpdateSchema,
    UserResultSchema,
)

logger = logging.getLogger(__name__)

bp = Blueprint("user", __name__, description="Signed-in user", url_prefix="/user")
public_bp = Blueprint(
    "users", __name__, description="Public user profiles", url_prefix="/users"
)


@bp.route("/create")
class UserCreate(MethodView):
    @session_required
    @bp.arguments(UserCreateSchema)
    @bp.response(200, UserResultSchema)
    def post(self, user_data, session):
        """Create or update the caller's profile"""
        email = session.email
        if user_data.get("email") and user_data["email"].lower() != email.lower():
            raise ForbiddenError("Email does not match the signed-in user")

        if not is_allowed_email(email, current_app.config["ALLOWED_EMAIL_DOMAINS"]):
            raise ValidationError("Only IIT KGP emails are allowed")

        user = UserService.create_or_update_user(
            email,
            name=user_data.get("name", UNSET),
            image=user_data.get("image", UNSET),
            mobile_number=user_data.get("mobile_number", UNSET),
        )
        return {
            "success": True,
            "user": user,
            "message": "User created/updated successfully",
        }

    @session_required
    @bp.response(200, UserResultSchema)
    def get(self, session):
        user = UserService.get_user_by_email(session.email)
        if not user:
            raise NotFoundError("User not found")
        return {"user": user}


@bp.route("/profile")
class UserProfile(MethodView):
    @session_required
    @bp.response(200, UserResultSchema)
    def get(self, session):
        """Caller's profile, created on first visit"""
        user = UserService.ensure_user(session.email, name=session.name, image=session.image)
        return {"user": user}

    @session_required
    @bp.arguments(UserProfileUpdateSchema)
    @bp.response(200, UserResultSchema)
    def put(self, profile_data, session):
        """Update name and mobile number"""
        user = UserService.create_or_update_user(
            session.email,
            name=profile_data.get("name", UNSET),
            mobile_number=profile_data.get("mobile_number", UNSET),
        )
        return {"user": user}


@bp.route("/listings")
class UserListings(MethodView):
    @session_required
    @bp.response(200, UserListingsSchema)
    def get(self, session):
        """Products, services and demands owned by the caller"""
        user = UserService.get_user_by_email(session.email)
        if not user:
            return {"products": [], "services": [], "demands": []}
        return UserService.get_user_listings(user)


@public_bp.route("/<user_id>")
class PublicProfile(MethodView):
    @public_bp.response(200, PublicProfileResultSchema)
    def get(self, user_id):
        """Public profile with listings and per-type counts"""
        return {"user": UserService.get_user_detail(user_id)}
