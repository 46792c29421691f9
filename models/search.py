from pydantic import BaseModel, ConfigDict, Field, field_validator

from enums.sort_by import SortBy


class CollectionSearchParams(BaseModel):
    """
    Filter, sort and paging options for a product collection page.

    Accepts both the UI's camelCase keys (productType, sortBy) and the
    attribute names. sort_by keeps unsupported strings as-is; they are
    passed through and simply don't order the results.
    """
    model_config = ConfigDict(populate_by_name=True)

    start: int = Field(default=0, ge=0)
    limit: int = Field(default=20, gt=0)
    product_type: list[str] = Field(default_factory=list, alias='productType')
    sort_by: SortBy | str = Field(default=SortBy.MANUAL, alias='sortBy')

    @field_validator('sort_by', mode='before')
    @classmethod
    def normalize_sort_by(cls, v):
        if v is None or v == "":
            return SortBy.MANUAL
        # Non-string values fall through to field validation and are rejected
        return SortBy.from_string(v) or v

    def page_range(self) -> tuple[int, int]:
        """Inclusive (first, last) row range of the page."""
        return self.start, self.start + self.limit - 1
