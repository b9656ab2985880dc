"""Data models for site collections."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class File(BaseModel):
    """A content file with its already-parsed frontmatter data.

    A metadata key that is absent from ``data`` is undefined. A key that is
    present is defined, even when its value is ``None``, ``False``, ``0`` or ``""``.
    """

    path: str = ""
    data: dict[str, Any] = Field(default_factory=dict)


class SortConfig(BaseModel):
    """Sort rule: a data key and a direction."""

    key: str
    order: str = "ascending"

    @property
    def descending(self) -> bool:
        return self.order == "descending"


class PaginationConfig(BaseModel):
    """Page size and the permalink templates for first and later pages."""

    model_config = ConfigDict(populate_by_name=True)

    size: int = Field(default=1, ge=1)
    permalink_index: str | None = Field(default=None, alias="permalinkIndex")
    permalink_page: str | None = Field(default=None, alias="permalinkPage")

    @property
    def enabled(self) -> bool:
        """Pages are only created when both permalinks are set."""
        return bool(self.permalink_index and self.permalink_page)


class FilterConfig(BaseModel):
    """Declarative rules for excluding files from a collection."""

    metadata: dict[str, Any] = Field(default_factory=dict)
    future_date: str | None = None

    @property
    def filters_future_dates(self) -> bool:
        # Presence of the field enables the rule, even when left empty.
        return "future_date" in self.model_fields_set


class CollectionConfig(BaseModel):
    """Configuration block for a single named collection."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    path: str | None = None
    metadata: str | None = None
    template: str | None = None
    permalink: str | None = None
    sort: SortConfig | None = None
    pagination: PaginationConfig | None = None
    filter: FilterConfig | None = None
    exclude_paths: list[str] | None = Field(default=None, alias="excludePaths")


class PageContext(BaseModel):
    """Pagination context handed to the template of a collection page."""

    metadata: str | None = None
    page: int
    total_pages: int
    per_page: int
    total: int

    def as_dict(self) -> dict[str, Any]:
        """Return the context, dropping ``metadata`` for non-metadata collections."""
        return self.model_dump(exclude_none=True)
