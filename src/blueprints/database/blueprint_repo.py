"""Repository functions for the blueprints and blueprint_points tables."""

from typing import List, Optional

from sqlalchemy.orm import Session

from blueprints.database.schema import BlueprintPointRow, BlueprintRow
from blueprints.models import Blueprint, Point
from blueprints.utils.logging import get_logger

logger = get_logger(__name__)


def row_to_blueprint(row: BlueprintRow) -> Blueprint:
    """Convert a BlueprintRow (with points loaded in point_order) to a Blueprint."""
    return Blueprint(
        author=row.author,
        name=row.name,
        points=tuple(Point(x=p.x, y=p.y) for p in row.points),
    )


def find_blueprint_row(session: Session, author: str, name: str) -> Optional[BlueprintRow]:
    """Get blueprint row by (author, name)."""
    return (
        session.query(BlueprintRow)
        .filter(BlueprintRow.author == author, BlueprintRow.name == name)
        .first()
    )


def blueprint_exists(session: Session, author: str, name: str) -> bool:
    query = session.query(BlueprintRow.id).filter(
        BlueprintRow.author == author,
        BlueprintRow.name == name,
    )
    return query.first() is not None


def list_blueprint_rows(session: Session, author: Optional[str] = None) -> List[BlueprintRow]:
    """List blueprint rows, optionally restricted to one author."""
    query = session.query(BlueprintRow)
    if author is not None:
        query = query.filter(BlueprintRow.author == author)
    return query.order_by(BlueprintRow.author, BlueprintRow.name).all()


def insert_blueprint_row(session: Session, blueprint: Blueprint) -> BlueprintRow:
    """
    Add a new blueprint row with its points to the session.

    The unique constraint on (author, name) is checked on flush/commit,
    so a concurrent insert of the same key raises IntegrityError there.

    Args:
        session: SQLAlchemy session
        blueprint: Blueprint to store (raw points)

    Returns:
        Created BlueprintRow (not yet committed)
    """
    row = BlueprintRow(
        author=blueprint.author,
        name=blueprint.name,
        point_count=len(blueprint.points),
    )
    row.points = [
        BlueprintPointRow(point_order=i, x=p.x, y=p.y)
        for i, p in enumerate(blueprint.points)
    ]
    session.add(row)
    logger.debug(f"Created blueprint row: {blueprint.author}/{blueprint.name} ({len(blueprint.points)} points)")
    return row


def append_point_row(session: Session, author: str, name: str, point: Point) -> bool:
    """
    Append a point to the end of a stored blueprint.

    The point_count UPDATE runs first so the row is write-locked before the
    next point_order is read; concurrent appends to the same blueprint are
    serialized by the database.

    Returns:
        False if no blueprint matches (author, name), True otherwise
    """
    updated = (
        session.query(BlueprintRow)
        .filter(BlueprintRow.author == author, BlueprintRow.name == name)
        .update({BlueprintRow.point_count: BlueprintRow.point_count + 1}, synchronize_session=False)
    )
    if updated == 0:
        return False

    blueprint_id, point_count = (
        session.query(BlueprintRow.id, BlueprintRow.point_count)
        .filter(BlueprintRow.author == author, BlueprintRow.name == name)
        .one()
    )
    session.add(
        BlueprintPointRow(
            blueprint_id=blueprint_id,
            point_order=point_count - 1,
            x=point.x,
            y=point.y,
        )
    )
    logger.debug(f"Appended point ({point.x}, {point.y}) to {author}/{name} at position {point_count - 1}")
    return True
