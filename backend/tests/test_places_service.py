import httpx
import pytest

from places_proxy.models.places_model import PlacesQuery
from places_proxy.services.Places_service import PlacesService, PlacesProviderError


def service_for(handler):
    return PlacesService(
        api_key="k",
        base_url="https://places.example.test/json",
        transport=httpx.MockTransport(handler),
    )


def test_query_location_format():
    query = PlacesQuery(lat="37.7749", lng="-122.4194", keyword="soup kitchen", radius="50000")
    assert query.location == "37.7749,-122.4194"
    assert query.log_params() == {
        "query": "soup kitchen",
        "location": "37.7749,-122.4194",
        "radius": "50000",
    }


@pytest.mark.asyncio
async def test_nearby_search_returns_body():
    body = {"results": [{"place_id": "x"}], "status": "OK"}
    service = service_for(lambda request: httpx.Response(200, json=body))

    data = await service.nearby_search(PlacesQuery(lat="1", lng="2", keyword="meals", radius="10"))

    assert data == body


@pytest.mark.asyncio
async def test_nearby_search_makes_single_call_on_failure():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500)

    service = service_for(handler)

    with pytest.raises(PlacesProviderError):
        await service.nearby_search(PlacesQuery(lat="1", lng="2", keyword="meals", radius="10"))

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_nearby_search_wraps_transport_errors():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    service = service_for(handler)

    with pytest.raises(PlacesProviderError) as exc_info:
        await service.nearby_search(PlacesQuery(lat="1", lng="2", keyword="meals", radius="10"))

    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)


@pytest.mark.asyncio
async def test_nearby_search_accepts_null_results():
    body = {"results": None, "status": "INVALID_REQUEST"}
    service = service_for(lambda request: httpx.Response(200, json=body))

    data = await service.nearby_search(PlacesQuery(lat="1", lng="2", keyword="meals", radius="10"))

    assert data == body
