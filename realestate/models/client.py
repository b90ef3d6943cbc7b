"""Client database model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from realestate.core.database import Base

if TYPE_CHECKING:
    from realestate.models.associations import PropertyClient
    from realestate.models.property import Property


class Client(Base):
    """Client who rents or buys properties."""

    __tablename__ = "client"

    client_id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    registration_date: Mapped[date | None] = mapped_column(nullable=True)

    # Relationships
    transactions: Mapped[list["PropertyClient"]] = relationship(
        back_populates="client", passive_deletes="all"
    )
    properties: Mapped[list["Property"]] = relationship(
        secondary="property_client", viewonly=True
    )

    def __repr__(self) -> str:
        return f"<Client(client_id={self.client_id}, name={self.name!r})>"
