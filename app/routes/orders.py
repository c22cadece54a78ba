import logging
from fastapi import APIRouter, Depends, HTTPException

from app.dependencies.orders import get_order_service
from app.exceptions import (
    InvalidParameter,
    PersistenceFailure,
    ResourceNotFound,
    TransactionAborted,
)
from app.schemas.order_schemas import OrderDetails, OrderForm
from app.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter()

# card number stays in the database
PUBLIC_FIELDS = {"customer": {"cc_number"}}


def _public(details: OrderDetails) -> dict:
    return details.model_dump(exclude=PUBLIC_FIELDS)


# Place Order

@router.post("", status_code=201)
def place_order(
    form: OrderForm,
    order_service: OrderService = Depends(get_order_service),
):
    try:
        order_id = order_service.place_order(form.customer_form, form.cart)
    except InvalidParameter as e:
        raise HTTPException(400, str(e)) from e
    except (TransactionAborted, PersistenceFailure) as e:
        logger.error(f"Order placement failed: {e}")
        raise HTTPException(500, "Order could not be placed") from e

    return _public(order_service.get_order_details(order_id))


# Order Details

@router.get("/{order_id}")
def get_order(
    order_id: int,
    order_service: OrderService = Depends(get_order_service),
):
    try:
        details = order_service.get_order_details(order_id)
    except ResourceNotFound as e:
        raise HTTPException(404, str(e)) from e

    return _public(details)
