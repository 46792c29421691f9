import inspect
import logging
from typing import Awaitable, Callable

from enums.toast_variant import ToastVariant
from models.toast import ToastDTO

ToastHandler = Callable[[ToastDTO], Awaitable[None] | None]


class NotificationService:
    """
    Toast surface of the storefront UI.

    The UI registers a handler once at startup; services call toast() on
    every failed backend operation. Without a handler the toast is logged.
    """
    _toast_handler: ToastHandler | None = None

    @staticmethod
    def set_toast_handler(handler: ToastHandler | None) -> None:
        NotificationService._toast_handler = handler

    @staticmethod
    async def toast(title: str, description: str | None = None,
                    variant: ToastVariant = ToastVariant.DEFAULT) -> ToastDTO:
        toast_dto = ToastDTO(title=title, description=description, variant=variant)
        handler = NotificationService._toast_handler
        if handler is None:
            logging.info(f"[Toast] {variant.value}: {title} - {description}")
            return toast_dto
        try:
            result = handler(toast_dto)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logging.error(e)
        return toast_dto
