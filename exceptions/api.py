"""
Backend operation exceptions.
"""

from .base import StorefrontException


class ApiException(StorefrontException):
    """
    Raised when a backend query or mutation fails.

    Carries the backend's own error message and a fixed client-error
    status code, so UI callers can treat every failure the same way.
    """
    status_code = 400

    def to_dict(self) -> dict:
        """Error payload in the shape the storefront UI expects."""
        return {'message': self.message, 'statusCode': self.status_code}
