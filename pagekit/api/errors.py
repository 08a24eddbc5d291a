from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pagekit.schemas.pagination import PaginationRead
from pagekit.utils.exceptions import ExceedCount, ExceedTotalPages


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ExceedTotalPages)
    async def exceed_total_pages_handler(_: Request, exc: ExceedTotalPages) -> JSONResponse:
        return _exceed_response(exc)

    @app.exception_handler(ExceedCount)
    async def exceed_count_handler(_: Request, exc: ExceedCount) -> JSONResponse:
        return _exceed_response(exc)


def _exceed_response(exc: ExceedTotalPages | ExceedCount) -> JSONResponse:
    pagination = PaginationRead.model_validate(exc.pagination).model_dump(by_alias=True)
    return JSONResponse(status_code=404, content={"detail": str(exc), "pagination": pagination})
