"""
Failure path shared by every storefront service.

A failed backend operation is:
- rolled back on the caller's session
- logged
- shown to the user as a destructive toast
- turned into an ApiException carrying the backend's message

Usage in services:
    from utils.error_handler import report_backend_error

    try:
        return await CartItemRepository.get_by_cart_id(cart_id, session)
    except SQLAlchemyError as e:
        raise await report_backend_error("Error fetching cart items", e, session) from e
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_rollback
from enums.toast_variant import ToastVariant
from exceptions import ApiException
from services.notification import NotificationService


def backend_error_message(error: SQLAlchemyError) -> str:
    """
    Extract the backend's own message from a SQLAlchemy error.

    DBAPI errors wrap the driver exception in `orig`; asyncpg additionally
    chains the server error (which has a `message`) as its cause.

    Args:
        error: Error raised while executing a statement

    Returns:
        The backend's message without SQLAlchemy's decoration
    """
    orig = getattr(error, 'orig', None)
    if orig is None:
        return str(error)
    for candidate in (orig.__cause__, orig):
        message = getattr(candidate, 'message', None)
        if isinstance(message, str) and message:
            return message
    return str(orig)


async def report_backend_error(title: str, error: SQLAlchemyError,
                               session: AsyncSession | Session | None = None) -> ApiException:
    """
    Roll back, log the failure, toast it, and build the exception to raise.

    The rollback leaves the caller's session usable for the next call. A
    rollback that fails itself (e.g. the connection is gone) is logged and
    the original error is still reported.

    Args:
        title: Toast title naming the failed operation, e.g. "Error fetching cart"
        error: The backend error
        session: Session the failed statement ran on

    Returns:
        ApiException with the backend's message and status code 400
    """
    if session is not None:
        try:
            await session_rollback(session)
        except SQLAlchemyError as rollback_error:
            logging.error(f"{title}: rollback failed - {rollback_error}")
    message = backend_error_message(error)
    logging.error(f"{title}: {type(error).__name__} - {message}")
    await NotificationService.toast(title, message, ToastVariant.DESTRUCTIVE)
    return ApiException(message, operation=title)
