"""
API error hierarchy

Every error carries the machine-readable code returned to the caller as
{"error": code} and the HTTP status it maps to.
"""


class ApiError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code = 500

    def __init__(self, code: str, status_code: int = None):
        super().__init__(code)
        self.code = code
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        return {"error": self.code}


class ConfigurationError(ApiError):
    """Required server setting is missing"""
    status_code = 500


class UnauthorizedError(ApiError):
    """Missing or wrong API key"""
    status_code = 401

    def __init__(self, code: str = "unauthorized"):
        super().__init__(code)


class ClientInputError(ApiError):
    """Missing or malformed request parameter"""
    status_code = 400


class NotFoundError(ApiError):
    """Lookup or update target does not exist"""
    status_code = 404
