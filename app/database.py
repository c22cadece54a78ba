from typing import Optional
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session
from app.config import settings

engine = create_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,      # checks dead connections
    pool_recycle=1800        # refresh every 30 min
)

def create_db_and_tables(bind: Optional[Engine] = None):
    from app.models import category, book, customer, order, line_item
    SQLModel.metadata.create_all(bind or engine)


def transaction_scope(bind: Optional[Engine] = None) -> Session:
    """Session for one unit of work.

    Nothing is committed until the caller calls ``commit()``; ``close()``
    releases the connection back to the pool.
    """
    return Session(bind or engine, autoflush=False, expire_on_commit=False)
