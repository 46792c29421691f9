"""
Tests for the toast surface in services/notification.py
"""
import logging

import pytest
from unittest.mock import AsyncMock, MagicMock

from enums.toast_variant import ToastVariant
from services.notification import NotificationService


@pytest.fixture(autouse=True)
def reset_handler():
    yield
    NotificationService.set_toast_handler(None)


class TestToast:

    @pytest.mark.asyncio
    async def test_sync_handler(self):
        handler = MagicMock(return_value=None)
        NotificationService.set_toast_handler(handler)

        toast = await NotificationService.toast("Error fetching cart", "timeout", ToastVariant.DESTRUCTIVE)

        handler.assert_called_once_with(toast)
        assert toast.variant == ToastVariant.DESTRUCTIVE

    @pytest.mark.asyncio
    async def test_async_handler_is_awaited(self):
        handler = AsyncMock()
        NotificationService.set_toast_handler(handler)

        await NotificationService.toast("Saved", "Cart updated")

        handler.assert_awaited_once()
        assert handler.call_args.args[0].variant == ToastVariant.DEFAULT

    @pytest.mark.asyncio
    async def test_without_handler_toast_is_logged(self, caplog):
        with caplog.at_level(logging.INFO):
            toast = await NotificationService.toast("Error fetching product", "not found", ToastVariant.DESTRUCTIVE)

        assert toast.title == "Error fetching product"
        assert "[Toast] destructive: Error fetching product - not found" in caplog.text

    @pytest.mark.asyncio
    async def test_handler_failure_is_logged(self, caplog):
        NotificationService.set_toast_handler(MagicMock(side_effect=RuntimeError("ui unavailable")))

        with caplog.at_level(logging.ERROR):
            await NotificationService.toast("Error deleting cart", "boom", ToastVariant.DESTRUCTIVE)

        assert "ui unavailable" in caplog.text
