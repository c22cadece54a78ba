import logging
from datetime import date, datetime
from typing import Callable, List, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.dao.book_dao import BookDao
from app.dao.customer_dao import CustomerDao
from app.dao.line_item_dao import LineItemDao
from app.dao.order_dao import OrderDao
from app.exceptions import PersistenceFailure, TransactionAborted
from app.models.book import Book
from app.schemas.cart_schemas import ShoppingCart
from app.schemas.customer_schemas import CustomerForm
from app.schemas.order_schemas import OrderDetails
from app.services.confirmation import ConfirmationNumberGenerator
from app.services.order_validation import validate_cart, validate_customer
from app.utils.dates import end_of_month

logger = logging.getLogger(__name__)


def catalog_subtotal(cart: ShoppingCart, catalog_books: List[Book]) -> int:
    """Sum of catalog price times quantity; ``catalog_books`` parallels ``cart.items``."""
    return sum(
        book.price * item.quantity
        for item, book in zip(cart.items, catalog_books)
    )


class OrderService(Protocol):
    def place_order(self, customer_form: CustomerForm, cart: ShoppingCart) -> int:
        ...

    def get_order_details(self, order_id: int) -> OrderDetails:
        ...


class DefaultOrderService:
    def __init__(
        self,
        *,
        book_dao: BookDao,
        customer_dao: CustomerDao,
        order_dao: OrderDao,
        line_item_dao: LineItemDao,
        session_factory: Callable[[], Session],
        confirmation_numbers: Optional[ConfirmationNumberGenerator] = None,
        today: Callable[[], date] = date.today,
    ):
        self.book_dao = book_dao
        self.customer_dao = customer_dao
        self.order_dao = order_dao
        self.line_item_dao = line_item_dao
        self.session_factory = session_factory
        self.confirmation_numbers = confirmation_numbers or ConfirmationNumberGenerator()
        self.today = today

    def get_order_details(self, order_id: int) -> OrderDetails:
        logger.info(f"Loading details for order {order_id}")
        order = self.order_dao.find_by_order_id(order_id)
        customer = self.customer_dao.find_by_customer_id(order.customer_id)
        line_items = self.line_item_dao.find_by_order_id(order_id)
        books = [
            self.book_dao.find_by_book_id(line_item.book_id)
            for line_item in line_items
        ]
        return OrderDetails(
            order=order,
            customer=customer,
            line_items=line_items,
            books=books,
        )

    def place_order(self, customer_form: CustomerForm, cart: ShoppingCart) -> int:
        """Validate the form and cart, then store customer, order and line items.

        Either every row is committed or none is. Returns the new order id.
        Raises ``InvalidParameter`` before touching the database,
        ``TransactionAborted`` when a write fails and was rolled back, and
        ``PersistenceFailure`` when rollback or releasing the session fails.
        """
        validate_customer(customer_form, today=self.today())
        catalog_books = validate_cart(cart, self.book_dao)
        amount = catalog_subtotal(cart, catalog_books) + cart.surcharge

        expiry_date = end_of_month(
            customer_form.cc_expiry_month,
            customer_form.cc_expiry_year,
        )
        logger.info(f"Placing order with {len(cart.items)} line items")

        try:
            with self.session_factory() as session:
                return self._perform_place_order_transaction(
                    session,
                    customer_form.name,
                    customer_form.address,
                    customer_form.phone,
                    customer_form.email,
                    customer_form.cc_number,
                    expiry_date,
                    amount,
                    cart,
                )
        except SQLAlchemyError as e:
            logger.error(f"Error during close connection for customer order: {e}")
            raise PersistenceFailure("Error during close connection for customer order") from e

    def _perform_place_order_transaction(
        self,
        session: Session,
        name: str,
        address: str,
        phone: str,
        email: str,
        cc_number: str,
        expiry_date: datetime,
        amount: int,
        cart: ShoppingCart,
    ) -> int:
        try:
            customer_id = self.customer_dao.create(
                session, name, address, phone, email, cc_number, expiry_date
            )
            order_id = self.order_dao.create(
                session,
                amount,
                self.confirmation_numbers.generate(),
                customer_id,
            )
            for item in cart.items:
                self.line_item_dao.create(session, order_id, item.book_id, item.quantity)
            session.commit()
        except Exception as e:
            logger.exception("Order transaction failed, rolling back")
            try:
                session.rollback()
            except SQLAlchemyError as rollback_error:
                logger.error(f"Failed to roll back transaction: {rollback_error}")
                raise PersistenceFailure("Failed to roll back transaction") from rollback_error
            raise TransactionAborted("Order was not placed") from e

        logger.info(f"Placed order {order_id} for customer {customer_id}")
        return order_id
