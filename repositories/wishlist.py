from sqlalchemy import select, delete, insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute
from models.wishlist import WishlistItem, WishlistItemDTO


class WishlistRepository:
    @staticmethod
    async def get_by_user_id(user_id: str, session: AsyncSession | Session) -> list[WishlistItemDTO]:
        stmt = select(WishlistItem).where(WishlistItem.user_id == user_id)
        items = await session_execute(stmt, session)
        return [WishlistItemDTO.model_validate(item, from_attributes=True) for item in items.scalars().all()]

    @staticmethod
    async def create(user_id: str, product_id: int, session: AsyncSession | Session) -> None:
        # uniqueness of (user_id, product_id) is enforced by the backend
        stmt = insert(WishlistItem).values(user_id=user_id, product_id=product_id)
        await session_execute(stmt, session)

    @staticmethod
    async def delete(user_id: str, product_id: int, session: AsyncSession | Session) -> None:
        stmt = delete(WishlistItem).where(WishlistItem.user_id == user_id,
                                          WishlistItem.product_id == product_id)
        await session_execute(stmt, session)
