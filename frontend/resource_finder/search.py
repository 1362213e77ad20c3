"""
Fan-out search against the places proxy.

One request per keyword synonym of the chosen category runs concurrently;
once every request has settled the hits are merged, deduplicated by place
identifier, ranked by distance from the search center and cut down to the
display size. A failing keyword contributes zero results instead of failing
the whole search.
"""
import asyncio
import logging
import math
from typing import Optional

import httpx

from resource_finder.categories import MAX_RESULTS, SEARCH_RADIUS_M, keywords_for
from resource_finder.config import settings
from resource_finder.logger import logs
from resource_finder.models import Coordinate, MessageLevel, Place, SearchOutcome

FAILED_MESSAGE = "Failed to fetch resources. Please try again."
EMPTY_MESSAGE = "No resources found in this area. Please try a different location."


def proxy_client(
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Client for the places proxy. No timeout, matching the proxy's own outbound call."""
    return httpx.AsyncClient(
        base_url=base_url or settings.BACKEND_URL,
        transport=transport,
        timeout=None,
    )


def coordinate_distance(place: Place, center: Coordinate) -> float:
    # Straight line in degrees, only meant for ranking nearby hits
    return math.hypot(place.lat - center.lat, place.lng - center.lng)


def dedupe_places(places: list[Place]) -> list[Place]:
    """Keep the first occurrence of every place identifier."""
    seen: set[str] = set()
    unique = []
    for place in places:
        if place.place_id in seen:
            continue
        seen.add(place.place_id)
        unique.append(place)
    return unique


def rank_places(places: list[Place], center: Coordinate, limit: int = MAX_RESULTS) -> list[Place]:
    # sorted() is stable, so equidistant places keep their merge order
    return sorted(places, key=lambda p: coordinate_distance(p, center))[:limit]


def outcome_message(count: int, all_failed: bool, limit: int = MAX_RESULTS):
    if count == 0:
        return (FAILED_MESSAGE if all_failed else EMPTY_MESSAGE), MessageLevel.ERROR
    if count < limit:
        return f"Found {count} resources in this area.", MessageLevel.INFO
    return None, None


async def fetch_keyword(
    client: httpx.AsyncClient, keyword: str, center: Coordinate, radius: int
) -> list[dict]:
    """One proxied nearby search. Returns the provider's raw `results` list."""
    response = await client.get(
        "/api/places",
        params={"lat": center.lat, "lng": center.lng, "keyword": keyword, "radius": radius},
    )
    response.raise_for_status()
    data = response.json()
    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list):
        raise ValueError(f"Unexpected proxy response for \"{keyword}\"")
    return results


async def search_keyword(
    client: httpx.AsyncClient, keyword: str, center: Coordinate, radius: int
) -> Optional[list[Place]]:
    """
    Search a single keyword. Returns None when the request failed so the
    caller can tell a failed keyword from an empty one.
    """
    logs.log(logging.INFO, f"Searching for \"{keyword}\" with radius {radius}")
    try:
        raw_results = await fetch_keyword(client, keyword, center, radius)
    except (httpx.HTTPError, ValueError) as e:
        logs.log(logging.ERROR, f"Error searching for \"{keyword}\": {str(e)}")
        return None

    places = []
    for raw in raw_results:
        try:
            places.append(Place.from_provider(raw))
        except (ValueError, AttributeError) as e:
            logs.log(logging.WARNING, f"Skipping malformed result for \"{keyword}\": {str(e)}")

    logs.log(logging.INFO, f"Found {len(places)} results for \"{keyword}\"")
    return places


async def search_resources(
    category: str,
    center: Coordinate,
    *,
    client: httpx.AsyncClient,
    radius: int = SEARCH_RADIUS_M,
    limit: int = MAX_RESULTS,
) -> SearchOutcome:
    keywords = keywords_for(category)

    # All-complete barrier: every keyword settles before anything is merged
    per_keyword = await asyncio.gather(
        *(search_keyword(client, keyword, center, radius) for keyword in keywords)
    )

    failed = sum(1 for places in per_keyword if places is None)
    merged = [place for places in per_keyword if places for place in places]
    logs.log(logging.INFO, f"Total raw results: {len(merged)}")

    unique = dedupe_places(merged)
    logs.log(logging.INFO, f"Unique places: {len(unique)}")

    final_results = rank_places(unique, center, limit)
    logs.log(logging.INFO, f"Final results to display: {len(final_results)}")

    message, level = outcome_message(len(final_results), failed == len(keywords), limit)

    return SearchOutcome(
        category=category,
        center=center,
        places=final_results,
        message=message,
        message_level=level,
        keywords_searched=len(keywords),
        keywords_failed=failed,
    )
