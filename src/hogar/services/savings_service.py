"""Savings movements service."""
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from sqlalchemy import select

from hogar.models import SavingsMovement
from hogar.domain.types import MovementType
from .base_service import BaseService, Result

INVALID_AMOUNT_ERROR = "El monto debe ser un número positivo."


def movement_total(movements) -> Decimal:
    """Balance of a set of movements: deposits minus withdrawals."""
    return sum((m.signed_amount for m in movements), Decimal("0"))


class SavingsService(BaseService):
    """Service for recording deposits and withdrawals."""

    def add_movement(
        self,
        amount: Union[Decimal, float, int, str],
        type_: Union[MovementType, str] = MovementType.DEPOSIT,
        description: Optional[str] = None
    ) -> Result[SavingsMovement]:
        """
        Record a deposit or withdrawal for the acting user.

        Args:
            amount: Positive amount of money
            type_: "deposit" or "withdrawal"
            description: Optional free-text note

        Returns:
            Result containing the created movement or error
        """
        try:
            value = Decimal(str(amount)).quantize(Decimal("0.01"))
        except (InvalidOperation, ValueError):
            return Result.fail(INVALID_AMOUNT_ERROR)
        if not value.is_finite() or value <= 0:
            return Result.fail(INVALID_AMOUNT_ERROR)

        try:
            movement_type = MovementType(type_)
        except ValueError:
            return Result.fail(
                "Tipo de movimiento no válido",
                suggestions=[t.value for t in MovementType]
            )

        description = (description or "").strip() or None

        try:
            with self.transaction.transaction() as session:
                movement = SavingsMovement(
                    amount=value,
                    type=movement_type,
                    description=description,
                    owner_id=self.user_id,
                )
                session.add(movement)
                session.commit()
                session.refresh(movement)

                self._log_action(
                    "add_movement",
                    movement_id=movement.id,
                    type=movement_type.value,
                    amount=str(value)
                )
                return Result.ok(movement)

        except Exception:
            self.logger.exception("Failed to add movement")
            return Result.fail("Error al añadir movimiento")

    def delete_movement(self, movement_id: int) -> Result[SavingsMovement]:
        """
        Delete one of the acting user's movements.

        Args:
            movement_id: ID of the movement

        Returns:
            Result containing the deleted movement or error
        """
        try:
            with self.transaction.transaction() as session:
                movement = session.get(SavingsMovement, movement_id)
                if not movement:
                    return Result.fail("Movimiento no encontrado")

                if movement.owner_id != self.user_id:
                    return Result.fail("No tienes permiso para eliminar este movimiento")

                session.delete(movement)
                session.commit()

                self._log_action("delete_movement", movement_id=movement_id)
                return Result.ok(movement)

        except Exception:
            self.logger.exception("Failed to delete movement")
            return Result.fail("Error al eliminar movimiento")

    def get_movements(self, household: bool = False) -> Result[List[SavingsMovement]]:
        """
        Get movements, newest first.

        Args:
            household: Include the other household members' movements

        Returns:
            Result containing the movements or error
        """
        owners = self.household_ids if household else [self.user_id]
        try:
            movements = self.session.execute(
                select(SavingsMovement)
                .where(SavingsMovement.owner_id.in_(owners))
                .order_by(SavingsMovement.created_at.desc(), SavingsMovement.id.desc())
            ).scalars().all()
            return Result.ok(list(movements))

        except Exception:
            self.logger.exception("Failed to load movements")
            return Result.fail("Error al cargar movimientos")

    def get_total(self, household: bool = False) -> Result[Decimal]:
        """Current savings balance for the user or the whole household."""
        result = self.get_movements(household=household)
        if not result.success:
            return Result.fail(result.error)
        return Result.ok(movement_total(result.data))
