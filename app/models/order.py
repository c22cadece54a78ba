from sqlalchemy import Column, DateTime
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class CustomerOrder(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    customer_id: int = Field(foreign_key="customer.id", index=True)

    amount: int  # cents, subtotal + surcharge
    confirmation_number: int

    date_created: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
    )
