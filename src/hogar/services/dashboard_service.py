"""Household dashboard metrics."""
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from hogar.models import SavingsMovement
from hogar.domain.types import MovementType
from .base_service import BaseService, Result
from .grocery_service import GroceryService
from .savings_service import SavingsService, movement_total


@dataclass
class DashboardSummary:
    """Savings and grocery figures for the whole household."""
    total_savings: Decimal
    monthly_growth_pct: Optional[float]
    last_deposit: Optional[Decimal]
    weekly_streak: int
    total_items: int
    bought_items: int


def monthly_growth(
    movements: Sequence[SavingsMovement],
    total: Decimal,
    now: datetime
) -> Optional[float]:
    """
    Deposits made this month as a percentage of the balance before them.

    Returns None when the balance at the start of the month was not positive.
    """
    start_of_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    deposits = sum(
        (
            m.amount for m in movements
            if m.type == MovementType.DEPOSIT
            and m.created_at.astimezone(now.tzinfo) >= start_of_month
        ),
        Decimal("0")
    )
    total_at_start = total - deposits
    if total_at_start <= 0:
        return None
    return float(deposits / total_at_start * 100)


def weekly_streak(movements: Sequence[SavingsMovement], now: datetime) -> int:
    """Number of consecutive ISO weeks, up to the current one, with a deposit."""
    deposit_weeks = {
        m.created_at.astimezone(now.tzinfo).isocalendar()[:2]
        for m in movements
        if m.type == MovementType.DEPOSIT
    }
    streak = 0
    day = now
    while day.isocalendar()[:2] in deposit_weeks:
        streak += 1
        day -= timedelta(weeks=1)
    return streak


class DashboardService(BaseService):
    """Service aggregating savings and grocery data for the household."""

    def get_summary(self, now: Optional[datetime] = None) -> Result[DashboardSummary]:
        """
        Build the dashboard figures.

        Args:
            now: Reference time, defaults to the current time in the
                configured timezone

        Returns:
            Result containing the summary or error
        """
        tz = ZoneInfo(self.settings.TIMEZONE)
        now = (now or self._get_now()).astimezone(tz)

        savings = SavingsService(self.session, self.user_id, self.settings)
        groceries = GroceryService(self.session, self.user_id, self.settings)

        movements_result = savings.get_movements(household=True)
        if not movements_result.success:
            return Result.fail("Error al cargar datos del panel")
        items_result = groceries.get_items(include_bought=True)
        if not items_result.success:
            return Result.fail("Error al cargar datos del panel")

        movements = movements_result.data
        items = items_result.data
        total = movement_total(movements)
        last_deposit = next(
            (m.amount for m in movements if m.type == MovementType.DEPOSIT),
            None
        )

        summary = DashboardSummary(
            total_savings=total,
            monthly_growth_pct=monthly_growth(movements, total, now),
            last_deposit=last_deposit,
            weekly_streak=weekly_streak(movements, now),
            total_items=len(items),
            bought_items=sum(1 for item in items if item.is_bought),
        )
        self._log_action(
            "dashboard_summary",
            movements=len(movements),
            items=len(items),
            weekly_streak=summary.weekly_streak
        )
        return Result.ok(summary)
