# invoicing/models/common.py

from pydantic import BaseModel


class CreatedOut(BaseModel):
    id: str
