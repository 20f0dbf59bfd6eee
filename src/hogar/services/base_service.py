"""Base service class with common functionality."""
from typing import TypeVar, Generic, Optional, List
from datetime import datetime, UTC
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from hogar.config.settings import HogarSettings, get_settings
from hogar.utils.logger import get_logger
from hogar.db.session import TransactionManager

# Generic type for service results
T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """Generic result type for service operations."""
    success: bool
    data: Optional[T] = None
    error: str = ""
    suggestions: List[str] = []

    # Allow arbitrary types (like SQLAlchemy models)
    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, data: T) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, suggestions: Optional[List[str]] = None) -> 'Result[T]':
        """Create a failed result."""
        return cls(success=False, error=error or "Error desconocido", suggestions=suggestions or [])


class BaseService:
    """Base class for all services."""

    def __init__(
        self,
        session: Session,
        user_id: int,
        settings: Optional[HogarSettings] = None
    ):
        """
        Initialize the service.

        Args:
            session: Database session
            user_id: ID of the acting user
            settings: Settings override, defaults to the cached settings
        """
        self.session = session
        self.user_id = user_id
        self.settings = settings or get_settings()
        self.logger = get_logger(self.__class__.__name__)
        self.transaction = TransactionManager(session)

    @property
    def household_ids(self) -> List[int]:
        """The acting user first, then the configured household members."""
        return list(dict.fromkeys([self.user_id, *self.settings.HOUSEHOLD_MEMBER_IDS]))

    def _in_household(self, owner_id: Optional[int]) -> bool:
        return owner_id is not None and owner_id in self.household_ids

    def _log_action(
        self,
        action: str,
        status: str = "success",
        **kwargs
    ) -> None:
        """
        Log a service action.

        Args:
            action: Name of the action
            status: Status of the action
            **kwargs: Additional log data
        """
        self.logger.info(
            f"{action}: {status}",
            user_id=self.user_id,
            **kwargs
        )

    def _get_now(self) -> datetime:
        """Get current UTC datetime."""
        return datetime.now(UTC)
