from datetime import datetime
from pydantic import BaseModel

class TagCreate(BaseModel):
    name: str | None = None
    color: str | None = None

class TagUpdate(TagCreate):
    pass

class TagRef(BaseModel):
    model_config = {"from_attributes": True}
    id: str
    name: str
    color: str

class TagRead(TagRef):
    created_at: datetime
    updated_at: datetime
