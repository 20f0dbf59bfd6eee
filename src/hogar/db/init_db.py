"""Database initialization script."""
from sqlalchemy.orm import Session

from hogar.models import Base, User
from hogar.config.settings import get_settings
from hogar.db.session import engine
from hogar.utils.logger import get_logger

logger = get_logger(__name__)


def init_db(bind=None) -> User:
    """Create all tables and make sure the configured user exists."""
    settings = get_settings()
    bind = bind if bind is not None else engine

    Base.metadata.create_all(bind)

    with Session(bind) as session:
        user = session.get(User, settings.ACTIVE_USER_ID)
        if not user:
            user = User(
                id=settings.ACTIVE_USER_ID,
                email=settings.ACTIVE_USER_EMAIL,
            )
            session.add(user)
            session.commit()
            session.refresh(user)
            logger.info("Created active user", user_id=user.id, email=user.email)
        else:
            logger.info("Active user already exists", user_id=user.id)
        session.expunge(user)
        return user


if __name__ == "__main__":
    init_db()
