from sqlmodel import SQLModel, Field
from typing import Optional


class LineItem(SQLModel, table=True):
    # autoincrement id keeps the order the cart was submitted in
    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="customerorder.id", index=True)
    book_id: int = Field(foreign_key="book.id")
    quantity: int
