"""Pagination envelope returned by the paginated list operations."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar("T")


class PageMetadata(BaseModel):
    """Shape of one page of results.

    total is the number of rows matching the query before pagination;
    records_in_dataset is the number actually returned, which is smaller than
    per_page on the final page.
    """

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    per_page: int = Field(ge=1)
    current_page: int = Field(ge=1)
    records_in_dataset: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return -(-self.total // self.per_page)


class ListWrapper(BaseModel, Generic[T]):
    """One page of results plus its metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: list[T]
    meta: PageMetadata
