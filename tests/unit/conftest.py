from types import SimpleNamespace

import pytest
from sqlalchemy import Integer, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from pagekit.repositories.sequence_source import SequenceDataSource


class Base(DeclarativeBase):
    pass


class Row(Base):
    __tablename__ = "rows"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(64), nullable=False)


class RecordingSource(SequenceDataSource):
    def __init__(self, rows):
        super().__init__(rows)
        self.calls = []

    async def count(self, query=None):
        self.calls.append(("count", query))
        return await super().count(query)

    async def fetch_window(self, query, offset, limit):
        self.calls.append(("fetch_window", offset, limit))
        return await super().fetch_window(query, offset, limit)


@pytest.fixture(scope="function")
def make_source():
    return RecordingSource


@pytest.fixture(scope="function")
def source():
    return RecordingSource(range(1, 101))


@pytest.fixture(scope="function")
def models():
    return SimpleNamespace(Base=Base, Row=Row, Tag=Tag)


@pytest.fixture(scope="function")
def db_session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)

    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False, future=True)
    db = SessionLocal()
    try:
        db.add_all([Row(id=i, name=f"row-{i}") for i in range(1, 26)])
        db.add_all([Tag(id=i, label=f"tag-{i}") for i in range(1, 4)])
        db.commit()
        yield db
    finally:
        db.close()
