from pydantic import BaseModel
from typing import Optional


class CustomerForm(BaseModel):
    # raw values as submitted; checked by validate_customer
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    cc_number: Optional[str] = None
    cc_expiry_month: Optional[str] = None
    cc_expiry_year: Optional[str] = None
