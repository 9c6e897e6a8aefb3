from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

class UserCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    name: str | None = None
    description: str | None = None
    image_url: str | None = Field(None, alias="imageURL")

class UserUpdate(UserCreate):
    pass

class UserRef(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
    id: str
    name: str
    description: str
    image_url: str = Field(alias="imageURL")

class UserRead(UserRef):
    created_at: datetime
    updated_at: datetime
