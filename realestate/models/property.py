"""Property database model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from realestate.core.database import Base

if TYPE_CHECKING:
    from realestate.models.agent import Agent
    from realestate.models.associations import PropertyAgent, PropertyClient
    from realestate.models.client import Client


class Property(Base):
    """Property listed for rent or sale."""

    __tablename__ = "property"

    property_id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    listing_number: Mapped[str | None] = mapped_column(String(13), unique=True, nullable=True)
    listing_date: Mapped[date | None] = mapped_column(nullable=True)

    # Relationships; deletes are left to the engine's FK rules
    agent_links: Mapped[list["PropertyAgent"]] = relationship(
        back_populates="property", passive_deletes="all"
    )
    client_transactions: Mapped[list["PropertyClient"]] = relationship(
        back_populates="property", passive_deletes="all"
    )
    agents: Mapped[list["Agent"]] = relationship(
        secondary="property_agent", viewonly=True
    )
    clients: Mapped[list["Client"]] = relationship(
        secondary="property_client", viewonly=True
    )

    def __repr__(self) -> str:
        return f"<Property(property_id={self.property_id}, title={self.title!r})>"
