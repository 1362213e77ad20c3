from pydantic import BaseModel, Field

class PlacesQuery(BaseModel):
    """
    One nearby-search request as received from the client. Values are kept
    as sent and forwarded unchanged; the provider validates them.
    """
    lat: str
    lng: str
    keyword: str
    radius: str

    @property
    def location(self) -> str:
        # Provider expects "lat,lng"
        return f"{self.lat},{self.lng}"

    def log_params(self) -> dict:
        return {"query": self.keyword, "location": self.location, "radius": self.radius}

class ErrorResponse(BaseModel):
    error: str = Field(..., description="Generic failure indicator")
