import os
from typing import Generator

import pytest
from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

load_dotenv(".env.test", override=True)


def _apply_test_env() -> None:
    os.environ.setdefault("PAGEKIT_MAX_LIMIT", "100")


_apply_test_env()

from pagekit.api.errors import register_exception_handlers
from pagekit.api.params import pagination_args
from pagekit.repositories.sequence_source import SequenceDataSource
from pagekit.schemas.pagination import PageRead
from pagekit.services.paginator import Paginator
from pagekit.utils.pagination import PaginationArgs


class ItemRead(BaseModel):
    id: int
    name: str


ITEMS = [{"id": i, "name": f"item-{i}"} for i in range(1, 46)]


def create_app() -> FastAPI:
    app = FastAPI(title="pagekit-test")
    register_exception_handlers(app)

    paginator = Paginator(SequenceDataSource(ITEMS))
    strict = Paginator(SequenceDataSource(ITEMS), exceed_total_pages=True)
    counted = Paginator(SequenceDataSource(ITEMS), exceed_count=True)

    @app.get("/items", response_model=PageRead[ItemRead])
    async def list_items(args: PaginationArgs = Depends(pagination_args)):
        return PageRead[ItemRead].model_validate(await paginator.paginate(None, args))

    @app.get("/items/strict", response_model=PageRead[ItemRead])
    async def list_items_strict(args: PaginationArgs = Depends(pagination_args)):
        return PageRead[ItemRead].model_validate(await strict.paginate(None, args))

    @app.get("/items/counted", response_model=PageRead[ItemRead])
    async def list_items_counted(args: PaginationArgs = Depends(pagination_args)):
        return PageRead[ItemRead].model_validate(await counted.paginate(None, args))

    return app


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(create_app()) as c:
        yield c
