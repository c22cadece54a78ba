import random
from datetime import date

import pytest
from sqlalchemy import func
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from app.dao import BookDao, CustomerDao, LineItemDao, OrderDao
from app.database import create_db_and_tables, transaction_scope
from app.models import Book, Category
from app.schemas.cart_schemas import BookForm, ShoppingCart, ShoppingCartItem
from app.schemas.customer_schemas import CustomerForm
from app.services.confirmation import ConfirmationNumberGenerator
from app.services.order_service import DefaultOrderService

TODAY = date(2026, 10, 19)
CONFIRMATION_SEED = 7


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)

    yield engine

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def catalog(engine):
    """Two categories and three books; returns the books in insertion order."""
    with Session(engine, expire_on_commit=False) as session:
        fiction = Category(name="Fiction")
        poetry = Category(name="Poetry")
        session.add_all([fiction, poetry])
        session.commit()

        books = [
            Book(title="The Long Winter", author="L. Ingalls", price=1299, category_id=fiction.id),
            Book(title="Harbour Lights", author="M. Okafor", price=850, category_id=fiction.id),
            Book(title="Small Hours", author="R. Teague", price=1575, category_id=poetry.id),
        ]
        session.add_all(books)
        session.commit()
        for book in books:
            session.refresh(book)
    return books


@pytest.fixture
def make_order_service(engine):
    def _make(**overrides):
        kwargs = dict(
            book_dao=BookDao(engine),
            customer_dao=CustomerDao(engine),
            order_dao=OrderDao(engine),
            line_item_dao=LineItemDao(engine),
            session_factory=lambda: transaction_scope(engine),
            confirmation_numbers=ConfirmationNumberGenerator(random.Random(CONFIRMATION_SEED)),
            today=lambda: TODAY,
        )
        kwargs.update(overrides)
        return DefaultOrderService(**kwargs)

    return _make


@pytest.fixture
def order_service(make_order_service):
    return make_order_service()


@pytest.fixture
def customer_form():
    return CustomerForm(
        name="Ada Lovelace",
        address="12 Analytical Row",
        phone="(555) 123-4567",
        email="ada@example.com",
        cc_number="4111 1111 1111 111",
        cc_expiry_month="12",
        cc_expiry_year="2030",
    )


@pytest.fixture
def make_cart():
    def _make(*entries):
        """Build a cart from ``(book, quantity)`` pairs, trusting the book's fields."""
        return ShoppingCart(items=[
            ShoppingCartItem(
                book_id=book.id,
                quantity=quantity,
                book_form=BookForm(
                    book_id=book.id,
                    title=book.title,
                    price=book.price,
                    category_id=book.category_id,
                ),
            )
            for book, quantity in entries
        ])

    return _make


@pytest.fixture
def row_count(engine):
    def _count(model) -> int:
        with Session(engine) as session:
            return session.exec(select(func.count()).select_from(model)).one()

    return _count
