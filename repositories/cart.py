from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, upsert_statement
from models.cart import Cart, CartDTO


class CartRepository:
    @staticmethod
    async def get_latest_by_owner(user_id: str, session: AsyncSession | Session) -> CartDTO:
        """
        Get the most recently updated cart created by the user.

        Raises:
            NoResultFound: the user has no cart
        """
        stmt = (select(Cart)
                .where(Cart.created_by == user_id)
                .order_by(Cart.updated_at.desc())
                .limit(1))
        cart = await session_execute(stmt, session)
        return CartDTO.model_validate(cart.scalar_one(), from_attributes=True)

    @staticmethod
    async def upsert(cart_dto: CartDTO, session: AsyncSession | Session) -> None:
        stmt = upsert_statement(Cart, [cart_dto.model_dump(exclude_none=True)], session)
        await session_execute(stmt, session)

    @staticmethod
    async def delete(cart_id: str, session: AsyncSession | Session) -> None:
        stmt = delete(Cart).where(Cart.id == cart_id)
        await session_execute(stmt, session)
