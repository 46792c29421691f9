from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, upsert_statement
from models.cartItem import CartItem, CartItemDTO


class CartItemRepository:
    @staticmethod
    async def get_by_cart_id(cart_id: str, session: AsyncSession | Session) -> list[CartItemDTO]:
        stmt = select(CartItem).where(CartItem.cart_id == cart_id)
        cart_items = await session_execute(stmt, session)
        return [CartItemDTO.model_validate(cart_item, from_attributes=True)
                for cart_item in cart_items.scalars().all()]

    @staticmethod
    async def upsert_many(cart_items: list[CartItemDTO], session: AsyncSession | Session) -> None:
        if not cart_items:
            return
        rows = [cart_item.model_dump(exclude_none=True) for cart_item in cart_items]
        stmt = upsert_statement(CartItem, rows, session)
        await session_execute(stmt, session)

    @staticmethod
    async def delete_by_cart_id(cart_id: str, session: AsyncSession | Session) -> None:
        stmt = delete(CartItem).where(CartItem.cart_id == cart_id)
        await session_execute(stmt, session)
