"""Tests for the savings service."""
from decimal import Decimal

import pytest

from hogar.domain.types import MovementType
from hogar.models import SavingsMovement
from hogar.services.savings_service import INVALID_AMOUNT_ERROR, movement_total


def test_add_deposit(savings_service, user):
    """Test recording a deposit."""
    result = savings_service.add_movement(Decimal("150000"), description=" Quincena ")
    assert result.success
    movement = result.data
    assert movement.id is not None
    assert movement.amount == Decimal("150000.00")
    assert movement.type == MovementType.DEPOSIT
    assert movement.description == "Quincena"
    assert movement.owner_id == user.id


def test_add_withdrawal_from_string_type(savings_service):
    """Test the movement type can be given by value."""
    result = savings_service.add_movement("2500.505", "withdrawal")
    assert result.success
    assert result.data.type == MovementType.WITHDRAWAL
    assert result.data.amount == Decimal("2500.50")
    assert result.data.description is None


@pytest.mark.parametrize("amount", [0, -10, "0.001", "abc", None, "NaN", "Infinity"])
def test_add_movement_invalid_amount(savings_service, session, amount):
    """Test non-positive and non-numeric amounts are rejected."""
    result = savings_service.add_movement(amount)
    assert not result.success
    assert result.error == INVALID_AMOUNT_ERROR
    assert session.query(SavingsMovement).count() == 0


def test_add_movement_invalid_type(savings_service):
    """Test unknown movement types are rejected with the valid ones."""
    result = savings_service.add_movement(100, "transfer")
    assert not result.success
    assert result.suggestions == ["deposit", "withdrawal"]


def test_delete_movement(savings_service, session, deposit):
    """Test users can delete their own movements."""
    movement_id = deposit.id
    result = savings_service.delete_movement(movement_id)
    assert result.success
    assert session.get(SavingsMovement, movement_id) is None
    assert not savings_service.delete_movement(movement_id).success


def test_partner_cannot_delete_movement(partner_savings_service, session, deposit):
    """Test movements can only be deleted by their owner."""
    result = partner_savings_service.delete_movement(deposit.id)
    assert not result.success
    assert "permiso" in result.error
    assert session.get(SavingsMovement, deposit.id) is not None


def test_get_movements(savings_service, partner_savings_service):
    """Test personal and household movement lists, newest first."""
    first = savings_service.add_movement(1000).data
    second = partner_savings_service.add_movement(2000).data
    third = savings_service.add_movement(500, MovementType.WITHDRAWAL).data

    own = savings_service.get_movements()
    assert own.success
    assert [m.id for m in own.data] == [third.id, first.id]

    household = savings_service.get_movements(household=True)
    assert [m.id for m in household.data] == [third.id, second.id, first.id]


def test_get_total(savings_service, partner_savings_service):
    """Test totals subtract withdrawals."""
    savings_service.add_movement(100000)
    savings_service.add_movement(25000, MovementType.WITHDRAWAL)
    partner_savings_service.add_movement(50000)

    assert savings_service.get_total().data == Decimal("75000")
    assert savings_service.get_total(household=True).data == Decimal("125000")
    assert partner_savings_service.get_total().data == Decimal("50000")


def test_get_total_without_movements(savings_service):
    """Test an empty history has a zero balance."""
    result = savings_service.get_total()
    assert result.success
    assert result.data == Decimal("0")


def test_movement_total():
    """Test the balance helper on plain movements."""
    movements = [
        SavingsMovement(amount=Decimal("10"), type=MovementType.DEPOSIT),
        SavingsMovement(amount=Decimal("3.50"), type=MovementType.WITHDRAWAL),
    ]
    assert movement_total(movements) == Decimal("6.50")
    assert movement_total([]) == Decimal("0")
