from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from portfolio_reports.core.config import DATABASE_URL, DB_CONNECT_TIMEOUT
from portfolio_reports.core.exceptions import StoreUnavailableError

# ---------------------
# SQLAlchemy engine / session / Base
# ---------------------
connect_args = {}
if DATABASE_URL.startswith("postgresql"):
    # fail fast when the store is down instead of hanging the request
    connect_args["connect_timeout"] = DB_CONNECT_TIMEOUT

engine = create_engine(
    DATABASE_URL,
    echo=False,
    pool_pre_ping=True,  # drops dead connections automatically
    future=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def open_session(session_factory=SessionLocal) -> Session:
    """
    Open a session and ping the store once.

    Raises StoreUnavailableError when the store cannot be reached, so the
    caller can switch to the static dataset without retrying.
    """
    db = session_factory()
    try:
        db.execute(text("select 1"))
    except SQLAlchemyError as exc:
        db.close()
        raise StoreUnavailableError(str(exc)) from exc
    return db
