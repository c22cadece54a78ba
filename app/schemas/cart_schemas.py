from pydantic import BaseModel, Field
from typing import List, Optional

from app.config import settings


class BookForm(BaseModel):
    """The client's copy of a book at the time it was added to the cart."""
    book_id: int
    title: Optional[str] = None
    author: Optional[str] = None
    price: int          # cents
    category_id: int
    is_public: bool = True


class ShoppingCartItem(BaseModel):
    book_id: int
    quantity: int = 1
    book_form: BookForm


class ShoppingCart(BaseModel):
    items: List[ShoppingCartItem] = Field(default_factory=list)

    @property
    def computed_subtotal(self) -> int:
        return sum(item.book_form.price * item.quantity for item in self.items)

    @property
    def surcharge(self) -> int:
        return settings.cart_surcharge
