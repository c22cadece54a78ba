from sqlalchemy import Column, DateTime
from sqlmodel import SQLModel, Field ,Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime


if TYPE_CHECKING:
    from .category import Category

class Book(SQLModel, table=True):
    #main info
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    author: str
    description: Optional[str] = None

    #Shop Details
    price: int  # cents
    rating: Optional[int] = 0
    is_public: bool = True
    is_featured: bool = False

    #timestamps
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
    )

    #category
    category_id: int = Field(foreign_key="category.id")
    category: Optional["Category"] = Relationship(back_populates="books")
