from app.models.category import Category
from app.models.book import Book
from app.models.customer import Customer
from app.models.order import CustomerOrder
from app.models.line_item import LineItem

# add ALL models here
