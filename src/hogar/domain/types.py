"""Domain types for Hogar."""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class MovementType(str, Enum):
    """Direction of a savings movement."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"

    @property
    def label(self) -> str:
        return "Depósito" if self is MovementType.DEPOSIT else "Retiro"


class ParsedGroceryEntry(BaseModel):
    """Name, quantity and unit extracted from a free-text grocery entry."""
    name: str
    quantity: float = 1
    unit: Optional[str] = None

    model_config = ConfigDict(frozen=True)
