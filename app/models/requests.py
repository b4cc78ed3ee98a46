from typing import Optional
from pydantic import BaseModel, Field

# request bodies, also used as agent tool input schemas


class AutoLocationRequest(BaseModel):
    pass


class LocationLookupRequest(BaseModel):
    address: Optional[str] = Field(
        default=None, description="Optional address to get coordinates for"
    )


class DirectionsRequest(BaseModel):
    origin: str = Field(..., min_length=1, description="Starting location address")
    destination: str = Field(..., min_length=1, description="Destination address")
