class APIError(Exception):
    """Base API error with status code and message"""

    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv["error"] = self.message
        return rv


class ValidationError(APIError):
    """Malformed input or a rejected value"""

    def __init__(self, message, errors=None, status_code=400):
        super().__init__(message, status_code, payload={"errors": errors} if errors else None)
        self.errors = errors


class AuthError(APIError):
    """Authentication errors"""

    def __init__(self, message="Unauthorized", status_code=401):
        super().__init__(message, status_code, payload={"code": "UNAUTHORIZED"})


class ForbiddenError(APIError):
    """Valid session, but not allowed to touch the resource"""

    def __init__(self, message="Forbidden", status_code=403):
        super().__init__(message, status_code)


class NotFoundError(APIError):
    """Resource not found errors"""

    def __init__(self, message="Resource not found", status_code=404):
        super().__init__(message, status_code)


class SearchError(APIError):
    """Search failures keep the search envelope shape"""

    def __init__(self, message="Search failed", details=None, status_code=500):
        super().__init__(message, status_code)
        self.details = details

    def to_dict(self):
        rv = {"success": False, "message": self.message}
        if self.details:
            rv["details"] = self.details
        return rv
