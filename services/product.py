from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from models.product import ProductDTO, ProductSummaryDTO
from models.search import CollectionSearchParams
from repositories.product import ProductRepository
from utils.error_handler import report_backend_error


class ProductService:

    @staticmethod
    async def get_products_by_category(category_id: int,
                                       search_info: CollectionSearchParams,
                                       session: AsyncSession | Session) -> list[ProductDTO]:
        """
        One page of a category's products.

        Applies the product-type filter when it is non-empty and orders by
        search_info.sort_by; manual or unsupported sort values keep the
        backend's order.
        """
        try:
            return await ProductRepository.get_by_category(category_id, search_info, session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error fetching products", e, session) from e

    @staticmethod
    async def get_total_products_by_category(category_id: int,
                                             search_info: CollectionSearchParams,
                                             session: AsyncSession | Session) -> int:
        """Exact number of products matching the same filters, ignoring paging."""
        try:
            return await ProductRepository.count_by_category(category_id, search_info, session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error fetching total products", e, session) from e

    @staticmethod
    async def fetch_product(product_id: int, session: AsyncSession | Session) -> ProductSummaryDTO | None:
        try:
            return await ProductRepository.get_summary_by_id(product_id, session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error fetching product", e, session) from e

    @staticmethod
    async def search_product(product_name: str, session: AsyncSession | Session) -> list[dict]:
        try:
            return await ProductRepository.search_by_name_prefix(product_name, session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error searching product", e, session) from e
