"""Association models for the many-to-many relationships."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from realestate.core.database import Base

if TYPE_CHECKING:
    from realestate.models.agent import Agent
    from realestate.models.client import Client
    from realestate.models.property import Property


class PropertyAgent(Base):
    """Property <-> Agent: which agents manage which properties."""

    __tablename__ = "property_agent"

    property_id: Mapped[int] = mapped_column(
        ForeignKey("property.property_id"), primary_key=True
    )
    agent_id: Mapped[int] = mapped_column(ForeignKey("agent.agent_id"), primary_key=True)

    property: Mapped["Property"] = relationship(back_populates="agent_links")
    agent: Mapped["Agent"] = relationship(back_populates="property_links")

    def __repr__(self) -> str:
        return f"<PropertyAgent(property_id={self.property_id}, agent_id={self.agent_id})>"


class PropertyClient(Base):
    """Property <-> Client: a rental or purchase on a given date.

    The same client may transact on the same property more than once,
    as long as the transaction dates differ.
    """

    __tablename__ = "property_client"

    property_id: Mapped[int] = mapped_column(
        ForeignKey("property.property_id"), primary_key=True
    )
    client_id: Mapped[int] = mapped_column(ForeignKey("client.client_id"), primary_key=True)
    transaction_date: Mapped[date] = mapped_column(primary_key=True)

    property: Mapped["Property"] = relationship(back_populates="client_transactions")
    client: Mapped["Client"] = relationship(back_populates="transactions")

    def __repr__(self) -> str:
        return (
            f"<PropertyClient(property_id={self.property_id}, "
            f"client_id={self.client_id}, transaction_date={self.transaction_date})>"
        )
