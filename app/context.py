from functools import partial
from sqlalchemy.engine import Engine

from app.dao import BookDao, CustomerDao, LineItemDao, OrderDao
from app.database import transaction_scope
from app.services.order_service import DefaultOrderService, OrderService


def build_order_service(engine: Engine) -> OrderService:
    """Wire the data access objects into a ready order service."""
    return DefaultOrderService(
        book_dao=BookDao(engine),
        customer_dao=CustomerDao(engine),
        order_dao=OrderDao(engine),
        line_item_dao=LineItemDao(engine),
        session_factory=partial(transaction_scope, engine),
    )
