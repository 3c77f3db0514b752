from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class BlueprintRow(Base):
    __tablename__ = "blueprints"

    id = Column(Integer, primary_key=True, autoincrement=True)
    author = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    point_count = Column(Integer, nullable=False, default=0)  # next point_order to assign

    points = relationship(
        "BlueprintPointRow",
        order_by="BlueprintPointRow.point_order",
        lazy="selectin",
    )

    __table_args__ = (
        UniqueConstraint("author", "name", name="uk_blueprint_author_name"),
    )


class BlueprintPointRow(Base):
    __tablename__ = "blueprint_points"

    blueprint_id = Column(Integer, ForeignKey("blueprints.id"), primary_key=True)
    point_order = Column(Integer, primary_key=True)
    x = Column(Integer, nullable=False)
    y = Column(Integer, nullable=False)
