from pydantic import BaseModel
from typing import List

from app.models.book import Book
from app.models.customer import Customer
from app.models.line_item import LineItem
from app.models.order import CustomerOrder
from app.schemas.cart_schemas import ShoppingCart
from app.schemas.customer_schemas import CustomerForm


class OrderForm(BaseModel):
    customer_form: CustomerForm
    cart: ShoppingCart


class OrderDetails(BaseModel):
    order: CustomerOrder
    customer: Customer
    line_items: List[LineItem]
    books: List[Book]   # books[i] is the book of line_items[i]
