from enum import Enum
from typing import List, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---
class MessageLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

# --- Domain Models ---
class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

class Place(BaseModel):
    """A single search hit, as returned by the provider's nearby search."""
    model_config = ConfigDict(frozen=True)

    place_id: str
    name: str
    lat: float
    lng: float
    vicinity: str = ""
    types: List[str] = Field(default_factory=list)
    rating: Optional[float] = None

    @classmethod
    def from_provider(cls, raw: dict) -> "Place":
        """
        Build a Place from one entry of the provider's `results` array.
        Raises ValueError (pydantic's ValidationError included) for entries
        without an identifier or coordinates.
        """
        # Older responses only carry the deprecated "id"
        place_id = raw.get("place_id") or raw.get("id")
        if not place_id:
            raise ValueError(f"Place without identifier: {raw.get('name', '<unnamed>')}")

        location = (raw.get("geometry") or {}).get("location") or {}
        return cls(
            place_id=place_id,
            name=raw.get("name", ""),
            lat=location.get("lat"),
            lng=location.get("lng"),
            vicinity=raw.get("vicinity") or "",
            types=raw.get("types") or [],
            rating=raw.get("rating"),
        )

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)

    @property
    def directions_url(self) -> str:
        return (
            "https://www.google.com/maps/search/?api=1"
            f"&query={self.lat},{self.lng}&query_place_id={quote(self.place_id, safe='')}"
        )

    @property
    def web_search_url(self) -> str:
        return f"https://www.google.com/search?q={quote(self.name, safe='')}"

# --- Search Result ---
class SearchOutcome(BaseModel):
    category: str
    center: Coordinate
    places: List[Place] = []
    message: Optional[str] = None
    message_level: Optional[MessageLevel] = None
    keywords_searched: int = 0
    keywords_failed: int = 0
