from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pagekit.utils.pagination import PaginationArgs

T = TypeVar("T")


class PaginationQuery(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    page: int | None = None
    page_index: int | None = None
    limit: int = Field(ge=1)
    exceed_count: bool | None = None
    exceed_total_pages: bool | None = None

    def to_args(self) -> PaginationArgs:
        return PaginationArgs(
            limit=self.limit,
            page=self.page,
            page_index=self.page_index,
            exceed_count=self.exceed_count,
            exceed_total_pages=self.exceed_total_pages,
        )


class PaginationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    count: int
    limit: int
    page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class PageRead(PaginationRead, Generic[T]):
    result: list[T]
