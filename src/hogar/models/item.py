"""GroceryItem model for Hogar."""
from typing import Optional
from datetime import datetime
from sqlalchemy import String, ForeignKey, Float, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hogar.domain.categories import FALLBACK_CATEGORY
from .base import Base, TimestampMixin, ArchiveMixin, TZDateTime


class GroceryItem(Base, TimestampMixin, ArchiveMixin):
    """Model representing an item in the shared grocery list."""

    __tablename__ = "grocery_items"

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True)

    # Fields
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    normalized_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    quantity: Mapped[float] = mapped_column(Float, default=1, nullable=False)
    unit: Mapped[Optional[str]] = mapped_column(String(20))
    category: Mapped[str] = mapped_column(
        String(50),
        default=FALLBACK_CATEGORY,
        nullable=False
    )
    is_bought: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    bought_at: Mapped[Optional[datetime]] = mapped_column(TZDateTime)

    # Items may outlive the user that created them
    owner_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True
    )

    # Relationships
    owner = relationship(
        "User",
        back_populates="grocery_items"
    )

    @property
    def is_pending(self) -> bool:
        return not self.is_bought and not self.is_archived

    def __repr__(self) -> str:
        return f"<GroceryItem(id={self.id}, name='{self.name}', quantity={self.quantity})>"
