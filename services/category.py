from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from models.category import CategoryDTO
from repositories.category import CategoryRepository
from utils.error_handler import report_backend_error


class CategoryService:

    @staticmethod
    async def get_category_by_slug(slug: str, session: AsyncSession | Session) -> CategoryDTO | None:
        try:
            return await CategoryRepository.get_by_slug(slug, session)
        except SQLAlchemyError as e:
            raise await report_backend_error("Error fetching category", e, session) from e
