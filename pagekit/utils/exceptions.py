from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagekit.services.result import Pagination


class DomainError(Exception):
    """Base domain error."""


class PaginationError(DomainError):
    pass


class ExceedTotalPages(PaginationError):
    def __init__(self, pagination: "Pagination") -> None:
        super().__init__("Pagination options exceed total of pages")
        self.pagination = pagination


class ExceedCount(PaginationError):
    def __init__(self, pagination: "Pagination") -> None:
        super().__init__("Pagination options exceed count of rows")
        self.pagination = pagination
