"""SavingsMovement model for Hogar."""
from decimal import Decimal
from typing import Optional
from sqlalchemy import String, ForeignKey, Numeric, Enum as SAEnum, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hogar.domain.types import MovementType
from .base import Base, TimestampMixin


class SavingsMovement(Base, TimestampMixin):
    """Model representing a deposit into or withdrawal from savings."""

    __tablename__ = "savings_movements"

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_savings_amount_positive"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True)

    # Fields
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    type: Mapped[MovementType] = mapped_column(
        SAEnum(MovementType, values_callable=lambda e: [m.value for m in e]),
        nullable=False
    )
    description: Mapped[Optional[str]] = mapped_column(String(255))

    # Foreign keys
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False
    )

    # Relationships
    owner = relationship(
        "User",
        back_populates="savings_movements"
    )

    @property
    def signed_amount(self) -> Decimal:
        """Amount with its effect on the balance: deposits add, withdrawals subtract."""
        return self.amount if self.type == MovementType.DEPOSIT else -self.amount

    def __repr__(self) -> str:
        return f"<SavingsMovement(id={self.id}, type='{self.type.value}', amount={self.amount})>"
