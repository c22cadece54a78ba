from sqlmodel import SQLModel, Field , Relationship
from typing import Optional, TYPE_CHECKING, List

if TYPE_CHECKING:
    from .book import Book

class Category(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)

    books: List["Book"] = Relationship(back_populates="category")
