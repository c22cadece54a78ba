"""Server-side checks for a submitted customer form and shopping cart.

Both entry points raise ``InvalidParameter`` naming the first field that
failed. Prices and categories in the cart are compared against the catalog;
the client's copy is never trusted.
"""
import logging
import re
from datetime import date, datetime
from typing import List, Optional

from app.dao.book_dao import BookDao
from app.exceptions import InvalidParameter, ResourceNotFound
from app.models.book import Book
from app.schemas.cart_schemas import ShoppingCart
from app.schemas.customer_schemas import CustomerForm

logger = logging.getLogger(__name__)

SIMPLE_EMAIL_REGEX = re.compile(r"\S+@\S+", re.ASCII)
INTEGER_REGEX = re.compile(r"[+-]?[0-9]+")
NON_DIGITS = re.compile(r"[^0-9]")

MIN_TEXT_LENGTH = 4
MAX_TEXT_LENGTH = 45
PHONE_DIGITS = 10
MIN_CC_DIGITS = 14
MAX_CC_DIGITS = 16
MAX_QUANTITY = 99


def validate_customer(customer_form: CustomerForm, today: Optional[date] = None):
    today = today or date.today()

    if not name_is_valid(customer_form.name):
        _reject("Invalid name field")
    if not address_is_valid(customer_form.address):
        _reject("Invalid address field")
    if not phone_is_valid(customer_form.phone):
        _reject("Invalid phone field")
    if not email_is_valid(customer_form.email):
        _reject("Invalid email field")
    if not cc_number_is_valid(customer_form.cc_number):
        _reject("Invalid credit card number field")
    if not expiry_date_is_valid(customer_form.cc_expiry_month, customer_form.cc_expiry_year, today):
        _reject("Invalid expiry date")


def validate_cart(cart: ShoppingCart, book_dao: BookDao) -> List[Book]:
    """Check every cart item against the catalog.

    Returns the catalog books in cart order; order totals are priced from
    these, not from the client's ``book_form``.
    """
    if len(cart.items) <= 0:
        _reject("Cart is empty.")

    catalog_books = []
    for item in cart.items:
        if item.quantity < 1 or item.quantity > MAX_QUANTITY:
            _reject("Invalid quantity")
        try:
            database_book = book_dao.find_by_book_id(item.book_id)
        except ResourceNotFound:
            _reject("Invalid book")
        book_form = item.book_form
        if book_form.price != database_book.price:
            _reject("Invalid price")
        if book_form.category_id != database_book.category_id:
            _reject("Invalid category")
        catalog_books.append(database_book)
    return catalog_books


def name_is_valid(name: Optional[str]) -> bool:
    return _text_is_valid(name)


def address_is_valid(address: Optional[str]) -> bool:
    return _text_is_valid(address)


def phone_is_valid(phone: Optional[str]) -> bool:
    if not phone:
        return False
    # "(555) 123-4567" counts as 10 digits
    digits = NON_DIGITS.sub("", phone)
    return len(digits) == PHONE_DIGITS


def email_is_valid(email: Optional[str]) -> bool:
    if not email:
        return False
    if not SIMPLE_EMAIL_REGEX.fullmatch(email):
        return False
    return not email.endswith(".")


def cc_number_is_valid(cc_number: Optional[str]) -> bool:
    if not cc_number:
        return False
    digits = NON_DIGITS.sub("", cc_number)
    return MIN_CC_DIGITS <= len(digits) <= MAX_CC_DIGITS


def expiry_date_is_valid(month: Optional[str], year: Optional[str], today: date) -> bool:
    if not month or not year:
        return False
    input_month = _parse_int(month)
    input_year = _parse_int(year)
    if input_month is None or input_year is None:
        return False
    if input_month < 1 or input_month > 12:
        return False
    if input_year < 1 or input_year > datetime.max.year:
        return False
    if input_year < today.year:
        return False
    if input_year == today.year and input_month < today.month:
        return False
    return True


def _text_is_valid(value: Optional[str]) -> bool:
    if not value:
        return False
    return MIN_TEXT_LENGTH <= len(value) <= MAX_TEXT_LENGTH


def _parse_int(value: str) -> Optional[int]:
    if not INTEGER_REGEX.fullmatch(value):
        return None
    return int(value)


def _reject(message: str):
    logger.warning(f"Order rejected: {message}")
    raise InvalidParameter(message)
