from sqlalchemy import select, func, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute
from enums.sort_by import SortBy
from models.category import ProductCategory
from models.product import Product, ProductDTO, ProductSummaryDTO
from models.search import CollectionSearchParams
from models.vendor import Vendor, VendorDTO

# SortBy.MANUAL and unsupported values are intentionally absent: no ordering
SORT_ORDER = {
    SortBy.PRICE_ASC: Product.unit_price.asc(),
    SortBy.PRICE_DESC: Product.unit_price.desc(),
    SortBy.NAME_ASC: Product.name.asc(),
    SortBy.NAME_DESC: Product.name.desc(),
    SortBy.CREATED_AT_DESC: Product.created_at.desc(),
}

SEARCH_PRODUCTS_BY_NAME_PREFIX = text("SELECT * FROM search_products_by_name_prefix(:prefix)")


class ProductRepository:

    @staticmethod
    def apply_sort(stmt, sort_by: SortBy | str | None):
        order = SORT_ORDER.get(SortBy.from_string(sort_by))
        if order is None:
            return stmt
        return stmt.order_by(order)

    @staticmethod
    def by_category_stmt(category_id: int, search_info: CollectionSearchParams):
        first, last = search_info.page_range()
        stmt = (select(Product)
                .select_from(ProductCategory)
                .join(Product, ProductCategory.product_id == Product.id)
                .where(ProductCategory.category_id == category_id,
                       ProductCategory.product_id.is_not(None))
                .offset(first)
                .limit(last - first + 1))
        if len(search_info.product_type) > 0:
            stmt = stmt.where(Product.product_type.in_(search_info.product_type))
        return ProductRepository.apply_sort(stmt, search_info.sort_by)

    @staticmethod
    def count_by_category_stmt(category_id: int, search_info: CollectionSearchParams):
        stmt = (select(func.count())
                .select_from(ProductCategory)
                .join(Product, ProductCategory.product_id == Product.id)
                .where(ProductCategory.category_id == category_id))
        if len(search_info.product_type) > 0:
            stmt = stmt.where(Product.product_type.in_(search_info.product_type))
        return stmt

    @staticmethod
    async def get_by_category(category_id: int, search_info: CollectionSearchParams,
                              session: AsyncSession | Session) -> list[ProductDTO]:
        stmt = ProductRepository.by_category_stmt(category_id, search_info)
        products = await session_execute(stmt, session)
        return [ProductDTO.model_validate(product, from_attributes=True) for product in products.scalars().all()]

    @staticmethod
    async def count_by_category(category_id: int, search_info: CollectionSearchParams,
                                session: AsyncSession | Session) -> int:
        stmt = ProductRepository.count_by_category_stmt(category_id, search_info)
        count = await session_execute(stmt, session)
        return count.scalar_one()

    @staticmethod
    async def get_summary_by_id(product_id: int, session: AsyncSession | Session) -> ProductSummaryDTO | None:
        stmt = (select(Product.name.label("name"),
                       Product.unit_price.label("unit_price"),
                       Product.primary_image.label("primary_image"),
                       Vendor.name.label("vendor_name"),
                       Product.currency.label("currency"),
                       Product.in_stock.label("in_stock"))
                .select_from(Product)
                .outerjoin(Vendor, Product.vendor_id == Vendor.id)
                .where(Product.id == product_id))
        result = await session_execute(stmt, session)
        row = result.first()
        if row is None:
            return None
        return ProductSummaryDTO(
            name=row.name,
            unit_price=row.unit_price,
            primary_image=row.primary_image,
            currency=row.currency,
            in_stock=row.in_stock,
            vendor=VendorDTO(name=row.vendor_name) if row.vendor_name is not None else None
        )

    @staticmethod
    async def search_by_name_prefix(prefix: str, session: AsyncSession | Session) -> list[dict]:
        """
        Run the backend's search_products_by_name_prefix function.

        Rows come back exactly as the function returns them (backend column names).
        """
        result = await session_execute(SEARCH_PRODUCTS_BY_NAME_PREFIX.bindparams(prefix=prefix), session)
        return [dict(row) for row in result.mappings().all()]
