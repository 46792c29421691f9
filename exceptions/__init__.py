"""
Custom exceptions for the storefront data-access layer.

Exception Hierarchy:
--------------------
StorefrontException (base)
└── ApiException (backend operation failed, carries message, operation and status_code 400)

Usage:
------
Services raise ApiException after reporting the failure:
    raise await report_backend_error("Error fetching cart", e, session) from e

UI callers catch it and read the payload:
    try:
        cart = await CartService.fetch_cart_by_user_id(user_id, session)
    except ApiException as e:
        return e.to_dict()
"""

from .base import StorefrontException
from .api import ApiException

__all__ = [
    # Base
    'StorefrontException',

    # Backend
    'ApiException',
]
