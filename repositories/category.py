from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute
from models.category import Category, CategoryDTO


class CategoryRepository:
    @staticmethod
    async def get_by_slug(slug: str, session: AsyncSession | Session) -> CategoryDTO | None:
        stmt = select(Category).where(Category.slug == slug)
        category = await session_execute(stmt, session)
        category = category.scalars().first()
        if category is not None:
            return CategoryDTO.model_validate(category, from_attributes=True)
        else:
            return category
