"""
Session handling.

Sign-in happens upstream: an auth proxy in front of the app authenticates the
user and forwards the verified address in a trusted header. flask-login turns
that header into ``current_user`` through ``load_user_from_request``; views
never look at it directly but ask the session validator stored on the app,
which tests replace with their own.
"""
# python imports
import logging
from dataclasses import dataclass
from typing import Optional

# package imports
from flask import current_app
from flask_login import UserMixin, current_user

logger = logging.getLogger(__name__)

EXTENSION_KEY = "session_validator"


@dataclass
class SessionResult:
    valid: bool
    email: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    error: Optional[str] = None


class SessionUser(UserMixin):
    """Signed-in caller without a stored profile yet"""

    def __init__(self, email, name=None, image=None):
        self.email = email
        self.name = name
        self.image = image

    def get_id(self):
        return self.email


class LoginSessionValidator:
    """Validates the session flask-login established for the current request"""

    def validate(self) -> SessionResult:
        if not current_user or not current_user.is_authenticated:
            return SessionResult(valid=False, error="Unauthorized")
        if not current_user.email:
            return SessionResult(valid=False, error="Session has no email")
        return SessionResult(
            valid=True,
            email=current_user.email,
            name=current_user.name,
            image=current_user.image,
        )


def get_session_validator():
    return current_app.extensions[EXTENSION_KEY]


def load_user_from_request(request):
    """flask-login request loader reading the auth proxy headers"""
    from market.users.models import User
    from market.users.services import UserService, is_allowed_email

    email = (request.headers.get(current_app.config["AUTH_EMAIL_HEADER"]) or "").strip()
    if not email:
        return None
    email = email.lower()

    if not is_allowed_email(email, current_app.config["ALLOWED_EMAIL_DOMAINS"]):
        logger.warning(f"Rejected session for {email}: domain not allowed")
        return None

    user: Optional[User] = UserService.get_user_by_email(email)
    if user is None:
        return SessionUser(email, name=request.headers.get(current_app.config["AUTH_NAME_HEADER"]))
    if not user.is_active:
        logger.warning(f"Rejected session for blocked user {email}")
        return None
    return user


def load_user(email):
    from market.users.services import UserService

    return UserService.get_user_by_email(email)
