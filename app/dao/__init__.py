from app.dao.book_dao import BookDao
from app.dao.customer_dao import CustomerDao
from app.dao.order_dao import OrderDao
from app.dao.line_item_dao import LineItemDao
