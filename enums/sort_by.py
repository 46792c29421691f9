from enum import Enum


class SortBy(str, Enum):
    """
    Sort options for product collections.

    Values match the query-string values the storefront sends, e.g.
    ?sort_by=price-ascending. MANUAL keeps the backend's own row order.
    """
    MANUAL = "manual"
    PRICE_ASC = "price-ascending"
    PRICE_DESC = "price-descending"
    NAME_ASC = "title-ascending"
    NAME_DESC = "title-descending"
    CREATED_AT_DESC = "created-descending"

    @classmethod
    def from_string(cls, value) -> 'SortBy | None':
        """
        Convert a raw sort value to SortBy.

        Returns None for empty, non-string or unsupported values so callers
        can skip ordering instead of failing.

        Examples:
            >>> SortBy.from_string("price-ascending")
            SortBy.PRICE_ASC
            >>> SortBy.from_string("best-selling") is None
            True
        """
        if isinstance(value, SortBy):
            return value
        if not value or not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
