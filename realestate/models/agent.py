"""Agent database model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from realestate.core.database import Base

if TYPE_CHECKING:
    from realestate.models.associations import PropertyAgent
    from realestate.models.property import Property


class Agent(Base):
    """Real estate agent who manages properties."""

    __tablename__ = "agent"

    agent_id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_date: Mapped[date | None] = mapped_column(nullable=True)

    # Relationships
    property_links: Mapped[list["PropertyAgent"]] = relationship(
        back_populates="agent", passive_deletes="all"
    )
    properties: Mapped[list["Property"]] = relationship(
        secondary="property_agent", viewonly=True
    )

    def __repr__(self) -> str:
        return f"<Agent(agent_id={self.agent_id}, name={self.name!r})>"
