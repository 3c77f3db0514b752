"""Relational blueprint store backed by SQLAlchemy."""

from typing import Set

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from blueprints.database.blueprint_repo import (
    append_point_row,
    blueprint_exists,
    find_blueprint_row,
    insert_blueprint_row,
    list_blueprint_rows,
    row_to_blueprint,
)
from blueprints.database.client import get_engine, get_session_factory, session_context
from blueprints.errors import BlueprintAlreadyExistsError, BlueprintNotFoundError
from blueprints.models import Blueprint, Point
from blueprints.persistence.base import BlueprintStore
from blueprints.utils.logging import get_logger

logger = get_logger(__name__)


class SqlBlueprintStore(BlueprintStore):
    """
    Store blueprints in a `blueprints` table with ordered `blueprint_points`.

    Uniqueness of (author, name) is enforced by the database constraint;
    the pre-insert existence check only short-circuits the common case.
    Each operation runs in its own session and transaction.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = get_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str) -> "SqlBlueprintStore":
        return cls(get_engine(database_url))

    def save(self, blueprint: Blueprint) -> None:
        with session_context(self._session_factory) as session:
            if blueprint_exists(session, blueprint.author, blueprint.name):
                raise BlueprintAlreadyExistsError(blueprint.author, blueprint.name)
            insert_blueprint_row(session, blueprint)
            try:
                session.commit()
            except IntegrityError as e:
                logger.info(f"Lost insert race for {blueprint.author}/{blueprint.name}: {e.orig}")
                raise BlueprintAlreadyExistsError(blueprint.author, blueprint.name) from e

    def get(self, author: str, name: str) -> Blueprint:
        with session_context(self._session_factory) as session:
            row = find_blueprint_row(session, author, name)
            if row is None:
                raise BlueprintNotFoundError(author, name)
            return row_to_blueprint(row)

    def get_by_author(self, author: str) -> Set[Blueprint]:
        with session_context(self._session_factory) as session:
            rows = list_blueprint_rows(session, author=author)
            if not rows:
                raise BlueprintNotFoundError(author)
            return {row_to_blueprint(row) for row in rows}

    def get_all(self) -> Set[Blueprint]:
        with session_context(self._session_factory) as session:
            return {row_to_blueprint(row) for row in list_blueprint_rows(session)}

    def append_point(self, author: str, name: str, point: Point) -> None:
        with session_context(self._session_factory) as session:
            if not append_point_row(session, author, name, point):
                raise BlueprintNotFoundError(author, name)
            session.commit()
