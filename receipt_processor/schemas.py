
from pydantic import BaseModel, ConfigDict, Field
from typing import List

# Wire names follow the public receipt JSON (camelCase); attributes are snake_case.
# Numeric/date/time fields stay as text: the rules parse them leniently.
class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    short_description: str = Field("", alias="shortDescription")
    price: str = ""

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    retailer: str = ""
    purchase_date: str = Field("", alias="purchaseDate")
    purchase_time: str = Field("", alias="purchaseTime")
    items: List[Item] = Field(default_factory=list)
    total: str = ""

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int

class ErrorResponse(BaseModel):
    detail: str
