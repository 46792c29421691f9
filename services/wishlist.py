from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit
from models.wishlist import WishlistItemDTO
from repositories.wishlist import WishlistRepository
from utils.error_handler import report_backend_error


class WishlistService:

    @staticmethod
    async def get_wishlist_items(user_id: str, session: AsyncSession | Session) -> list[WishlistItemDTO]:
        try:
            return await WishlistRepository.get_by_user_id(user_id, session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error fetching wishlist", e, session) from e

    @staticmethod
    async def add_to_wishlist(user_id: str, product_id: int, session: AsyncSession | Session) -> None:
        """Adding a product twice fails with the backend's unique-violation message."""
        try:
            await WishlistRepository.create(user_id, product_id, session)
            await session_commit(session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error adding to wishlist", e, session) from e

    @staticmethod
    async def delete_wishlist_item(user_id: str, product_id: int, session: AsyncSession | Session) -> None:
        try:
            await WishlistRepository.delete(user_id, product_id, session)
            await session_commit(session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error deleting wishlist item", e, session) from e
