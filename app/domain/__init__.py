from .users.models import User
from .locations.models import Location
from .categories.models import Category
from .events.models import Event
from .tickets.models import Ticket
from .orders.models import Order, OrderDetail

__all__ = (
    "User", "Location", "Category", "Event", "Ticket", "Order", "OrderDetail"
)
