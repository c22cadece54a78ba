from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.exceptions import ResourceNotFound
from app.models.order import CustomerOrder


class OrderDao:
    def __init__(self, engine: Engine):
        self.engine = engine

    def create(
        self,
        session: Session,
        amount: int,
        confirmation_number: int,
        customer_id: int,
    ) -> int:
        order = CustomerOrder(
            amount=amount,
            confirmation_number=confirmation_number,
            customer_id=customer_id,
        )
        session.add(order)
        session.flush()
        return order.id

    def find_by_order_id(self, order_id: int) -> CustomerOrder:
        with Session(self.engine) as session:
            order = session.get(CustomerOrder, order_id)
        if not order:
            raise ResourceNotFound(f"Order {order_id} not found")
        return order
