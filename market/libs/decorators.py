# python imports
from functools import wraps

# project imports
from .auth import get_session_validator
from .errors import AuthError


def session_required(f):
    """Decorator to require a valid session; the view receives it as ``session``"""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        result = get_session_validator().validate()
        if not result.valid or not result.email:
            raise AuthError(result.error or "Unauthorized")

        return f(*args, session=result, **kwargs)

    return decorated_function
