from datetime import datetime
from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.exceptions import ResourceNotFound
from app.models.customer import Customer


class CustomerDao:
    def __init__(self, engine: Engine):
        self.engine = engine

    def create(
        self,
        session: Session,
        name: str,
        address: str,
        phone: str,
        email: str,
        cc_number: str,
        cc_expiry_date: datetime,
    ) -> int:
        """Add a customer inside ``session`` and return its generated id.

        The row is flushed, not committed.
        """
        customer = Customer(
            customer_name=name,
            address=address,
            phone=phone,
            email=email,
            cc_number=cc_number,
            cc_expiry_date=cc_expiry_date,
        )
        session.add(customer)
        session.flush()
        return customer.id

    def find_by_customer_id(self, customer_id: int) -> Customer:
        with Session(self.engine) as session:
            customer = session.get(Customer, customer_id)
        if not customer:
            raise ResourceNotFound(f"Customer {customer_id} not found")
        return customer
