"""Document-style access to the database.

Each collection is backed by one table. Filters use the document query shape
the rest of the application speaks:

    {"owner": user_id}                  exact match
    {"task": {"$in": [id1, id2]}}       membership

and documents go in and come out as plain dicts keyed by document field names.
"""

import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from organizer.config import Settings
from organizer.core.errors import InvalidArgument, StoreFailure
from organizer.database import Base, create_db_engine, create_tables
from organizer.models import Comment, Group, Task, User

logger = logging.getLogger(__name__)

COLLECTIONS: dict[str, type[Base]] = {
    "users": User,
    "tasks": Task,
    "comments": Comment,
    "groups": Group,
}


@contextmanager
def _store_errors(collection: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"Store operation on {collection!r} failed: {exc}")
        raise StoreFailure(f"Store operation on {collection!r} failed") from exc


class Collection:
    """A named collection of documents."""

    def __init__(self, name: str, model: type[Base], session_factory: sessionmaker):
        self.name = name
        self.model = model
        self._fields: dict[str, str] = model.__document__
        self._session_factory = session_factory

    def _attribute(self, field: str) -> str:
        try:
            return self._fields[field]
        except KeyError:
            raise InvalidArgument(f"Unknown field {field!r} in collection {self.name!r}") from None

    def _where(self, filter: Mapping[str, Any] | None) -> list:
        clauses = []
        for field, condition in (filter or {}).items():
            column = getattr(self.model, self._attribute(field))
            if isinstance(condition, Mapping):
                if set(condition) != {"$in"}:
                    raise InvalidArgument(
                        f"Unsupported operator in filter on {field!r}: {sorted(condition)}"
                    )
                clauses.append(column.in_(list(condition["$in"])))
            else:
                clauses.append(column == condition)
        return clauses

    def _to_document(self, row: Base) -> dict[str, Any]:
        document = {}
        for field, attribute in self._fields.items():
            value = getattr(row, attribute)
            if value is not None:
                document[field] = value
        return document

    def _to_attributes(self, document: Mapping[str, Any]) -> dict[str, Any]:
        return {self._attribute(field): value for field, value in document.items()}

    def find(self, filter: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """Return every document matching the filter."""
        stmt = select(self.model).where(*self._where(filter))
        with _store_errors(self.name), self._session_factory() as session:
            rows = session.execute(stmt).scalars().all()
            return [self._to_document(row) for row in rows]

    def find_one(self, filter: Mapping[str, Any]) -> dict[str, Any] | None:
        """Return the first document matching the filter, or None."""
        stmt = select(self.model).where(*self._where(filter)).limit(1)
        with _store_errors(self.name), self._session_factory() as session:
            row = session.execute(stmt).scalars().first()
            return self._to_document(row) if row is not None else None

    def insert_one(self, document: Mapping[str, Any]) -> None:
        """Insert a single document."""
        row = self.model(**self._to_attributes(document))
        with _store_errors(self.name), self._session_factory.begin() as session:
            session.add(row)

    def update_one(self, filter: Mapping[str, Any], update: Mapping[str, Any]) -> None:
        """
        Apply a ``$set`` update to the first document matching the filter.

        A filter that matches nothing is not an error.
        """
        if set(update) != {"$set"}:
            raise InvalidArgument(f"Unsupported update operators: {sorted(update)}")
        values = self._to_attributes(update["$set"])
        stmt = select(self.model).where(*self._where(filter)).limit(1)

        with _store_errors(self.name), self._session_factory.begin() as session:
            row = session.execute(stmt).scalars().first()
            if row is None:
                return
            for attribute, value in values.items():
                setattr(row, attribute, value)


class Store:
    """
    Lazily connected handle to the document collections.

    The engine is created by the first caller that needs it; concurrent first
    callers share a single engine.
    """

    def __init__(self, settings: Settings, engine: Engine | None = None):
        self.settings = settings
        self._engine = engine
        self._session_factory: sessionmaker | None = None
        self._lock = threading.Lock()

    def _connect(self) -> sessionmaker:
        if self._session_factory is None:
            with self._lock:
                if self._session_factory is None:
                    if self._engine is None:
                        with _store_errors("<engine>"):
                            self._engine = create_db_engine(self.settings)
                        logger.info("Database engine created")
                    self._session_factory = sessionmaker(
                        autocommit=False,
                        autoflush=False,
                        expire_on_commit=False,
                        bind=self._engine,
                    )
        return self._session_factory

    @property
    def engine(self) -> Engine:
        self._connect()
        return self._engine

    def create_tables(self) -> None:
        """Create the backing tables for every collection."""
        with _store_errors("<schema>"):
            create_tables(self.engine)

    def collection(self, name: str) -> Collection:
        """Return the collection with the given name."""
        try:
            model = COLLECTIONS[name]
        except KeyError:
            raise InvalidArgument(f"Unknown collection {name!r}") from None
        return Collection(name, model, self._connect())

    def dispose(self) -> None:
        """Release pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
