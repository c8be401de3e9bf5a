# invoicing/models/customers.py

from pydantic import BaseModel


class CustomerCreate(BaseModel):
    name: str
    phone: str = ""
    email: str = ""
    service_address: str = ""
    notes: str = ""


class CustomerOut(BaseModel):
    id: str
    name: str
    phone: str = ""
    email: str = ""
    service_address: str = ""
    notes: str = ""
    created_at: str

    class Config:
        from_attributes = True
