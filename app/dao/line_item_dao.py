from typing import List
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from app.models.line_item import LineItem


class LineItemDao:
    def __init__(self, engine: Engine):
        self.engine = engine

    def create(self, session: Session, order_id: int, book_id: int, quantity: int):
        session.add(LineItem(order_id=order_id, book_id=book_id, quantity=quantity))
        session.flush()

    def find_by_order_id(self, order_id: int) -> List[LineItem]:
        with Session(self.engine) as session:
            return list(session.exec(
                select(LineItem)
                .where(LineItem.order_id == order_id)
                .order_by(LineItem.id)
            ).all())
