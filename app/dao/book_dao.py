from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.exceptions import ResourceNotFound
from app.models.book import Book


class BookDao:
    def __init__(self, engine: Engine):
        self.engine = engine

    def find_by_book_id(self, book_id: int) -> Book:
        with Session(self.engine) as session:
            book = session.get(Book, book_id)
        if not book:
            raise ResourceNotFound(f"Book {book_id} not found")
        return book
