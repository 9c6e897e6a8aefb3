from datetime import datetime
from pydantic import BaseModel

class ColumnCreate(BaseModel):
    name: str | None = None

class ColumnUpdate(ColumnCreate):
    pass

class ColumnRef(BaseModel):
    model_config = {"from_attributes": True}
    id: str
    name: str

class ColumnRead(ColumnRef):
    created_at: datetime
    updated_at: datetime
