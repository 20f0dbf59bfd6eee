"""Test configuration and fixtures for Hogar."""
import pytest
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import Session
import sqlite3

from hogar.config.settings import HogarSettings
from hogar.models import Base, User, GroceryItem, SavingsMovement
from hogar.domain.types import MovementType
from hogar.services.grocery_service import GroceryService
from hogar.services.savings_service import SavingsService
from hogar.services.dashboard_service import DashboardService
from hogar.utils.logger import configure_logging


@pytest.fixture(scope="session", autouse=True)
def console_logging():
    """Log to the console only while testing."""
    configure_logging(HogarSettings(LOG_FILE=None))


@pytest.fixture(scope="session")
def engine():
    """Create a test database engine."""
    def _fk_pragma_on_connect(dbapi_con, con_record):
        if isinstance(dbapi_con, sqlite3.Connection):
            dbapi_con.execute('PRAGMA foreign_keys=ON')

    test_engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False}
    )
    event.listen(test_engine, 'connect', _fk_pragma_on_connect)
    return test_engine


@pytest.fixture(scope="session")
def tables(engine):
    """Create all database tables."""
    Base.metadata.create_all(engine)
    yield
    # Drop children first to avoid foreign key issues
    for table in reversed(Base.metadata.sorted_tables):
        if table.name in inspect(engine).get_table_names():
            table.drop(engine)


@pytest.fixture(scope="function")
def session(engine, tables):
    """Create a new database session for a test, rolled back afterwards."""
    connection = engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)

    Base.metadata.create_all(connection)

    yield session

    session.close()
    # Only rollback if transaction is still active
    if transaction.is_active:
        transaction.rollback()
    connection.close()


@pytest.fixture
def user(session) -> User:
    """Create the acting user."""
    user = User(email="ana@example.com", display_name="Ana")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def partner(session) -> User:
    """Create the other household member."""
    partner = User(email="luis@example.com", display_name="Luis")
    session.add(partner)
    session.commit()
    session.refresh(partner)
    return partner


@pytest.fixture
def outsider(session) -> User:
    """Create a user outside the household."""
    outsider = User(email="vecino@example.com")
    session.add(outsider)
    session.commit()
    session.refresh(outsider)
    return outsider


@pytest.fixture
def settings(user, partner) -> HogarSettings:
    """Settings with a two-member household."""
    return HogarSettings(
        ACTIVE_USER_ID=user.id,
        HOUSEHOLD_MEMBER_IDS=[partner.id],
        MAX_QUANTITY=99,
        SUGGESTION_LIMIT=3,
        LOG_FILE=None,
    )


@pytest.fixture
def grocery_service(session, user, settings) -> GroceryService:
    """Create a grocery service for the acting user."""
    return GroceryService(session, user.id, settings)


@pytest.fixture
def partner_grocery_service(session, partner, settings) -> GroceryService:
    """Create a grocery service for the partner."""
    return GroceryService(session, partner.id, settings)


@pytest.fixture
def savings_service(session, user, settings) -> SavingsService:
    """Create a savings service for the acting user."""
    return SavingsService(session, user.id, settings)


@pytest.fixture
def partner_savings_service(session, partner, settings) -> SavingsService:
    """Create a savings service for the partner."""
    return SavingsService(session, partner.id, settings)


@pytest.fixture
def dashboard_service(session, user, settings) -> DashboardService:
    """Create a dashboard service for the acting user."""
    return DashboardService(session, user.id, settings)


@pytest.fixture
def grocery_item(session, user) -> GroceryItem:
    """Create a pending grocery item."""
    item = GroceryItem(
        name="Leche",
        normalized_name="leche",
        quantity=2,
        unit="litros",
        category="Lácteos y Huevos",
        owner_id=user.id,
    )
    session.add(item)
    session.commit()
    session.refresh(item)
    return item


@pytest.fixture
def deposit(session, user) -> SavingsMovement:
    """Create a deposit for the acting user."""
    movement = SavingsMovement(
        amount=100000,
        type=MovementType.DEPOSIT,
        description="Quincena",
        owner_id=user.id,
    )
    session.add(movement)
    session.commit()
    session.refresh(movement)
    return movement
