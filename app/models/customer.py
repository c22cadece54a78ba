from sqlalchemy import Column, DateTime
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class Customer(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    customer_name: str
    address: str
    phone: str
    email: str
    cc_number: str
    # last day of the expiry month, local midnight (naive)
    cc_expiry_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
    )
