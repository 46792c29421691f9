import logging

from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit
from models.cart import CartDTO
from models.cartItem import CartItemDTO
from repositories.cart import CartRepository
from repositories.cartItem import CartItemRepository
from utils.error_handler import report_backend_error


class CartService:

    @staticmethod
    async def fetch_cart_by_user_id(user_id: str, session: AsyncSession | Session) -> CartDTO | None:
        """
        Most recently updated cart of the user.

        A user without a cart is a normal case: returns None, no toast.
        """
        try:
            return await CartRepository.get_latest_by_owner(user_id, session)
        except NoResultFound:
            logging.info(f"No cart found for user {user_id}")
            return None
        except SQLAlchemyError as e:
            raise await report_backend_error("Error fetching cart", e, session) from e

    @staticmethod
    async def fetch_cart_items_by_cart_id(cart_id: str, session: AsyncSession | Session) -> list[CartItemDTO]:
        try:
            return await CartItemRepository.get_by_cart_id(cart_id, session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error fetching cart items", e, session) from e

    @staticmethod
    async def update_cart(cart: CartDTO, session: AsyncSession | Session) -> None:
        try:
            await CartRepository.upsert(cart, session)
            await session_commit(session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error updating cart", e, session) from e

    @staticmethod
    async def update_cart_items(cart_items: list[CartItemDTO], session: AsyncSession | Session) -> None:
        try:
            await CartItemRepository.upsert_many(cart_items, session)
            await session_commit(session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error updating cart items", e, session) from e

    @staticmethod
    async def delete_cart(cart_id: str, session: AsyncSession | Session) -> None:
        try:
            await CartRepository.delete(cart_id, session)
            await session_commit(session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error deleting cart", e, session) from e

    @staticmethod
    async def delete_cart_items(cart_id: str, session: AsyncSession | Session) -> None:
        try:
            await CartItemRepository.delete_by_cart_id(cart_id, session)
            await session_commit(session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error deleting cart items", e, session) from e
