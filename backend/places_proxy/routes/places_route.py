from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from places_proxy.models.places_model import PlacesQuery, ErrorResponse
from places_proxy.services.Places_service import PlacesService, PlacesProviderError
from places_proxy.core.config import settings

router = APIRouter(prefix="/api")

GENERIC_FAILURE = "Failed to fetch places"

# --- Dependency Injection ---
def get_places_service() -> PlacesService:
    return PlacesService(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        base_url=settings.PLACES_API_URL,
        timeout=settings.PLACES_TIMEOUT_SECONDS,
    )

def get_places_query(
    lat: str = Query(...),
    lng: str = Query(...),
    keyword: str = Query(...),
    radius: str = Query(...),
) -> PlacesQuery:
    return PlacesQuery(lat=lat, lng=lng, keyword=keyword, radius=radius)

@router.get("/places", responses={500: {"model": ErrorResponse}})
async def get_places_endpoint(
    query: PlacesQuery = Depends(get_places_query),
    service: PlacesService = Depends(get_places_service)
):
    """
    Relays a nearby search to the provider with the server-held key.
    The provider body comes back verbatim; every failure collapses to one 500.
    """
    try:
        data = await service.nearby_search(query)
    except PlacesProviderError:
        return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE})
    return JSONResponse(content=data)
