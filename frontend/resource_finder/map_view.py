from html import escape
from typing import Optional

import folium

from resource_finder.config import settings
from resource_finder.models import Place
from resource_finder.state import AppState

FIT_PADDING_PX = (50, 50)
# Keeps a single result from zooming in to street level
FIT_MAX_ZOOM = 15


def result_bounds(places: list[Place]) -> Optional[list[list[float]]]:
    """South-west / north-east corners enclosing every result."""
    if not places:
        return None
    lats = [p.lat for p in places]
    lngs = [p.lng for p in places]
    return [[min(lats), min(lngs)], [max(lats), max(lngs)]]


def popup_html(place: Place) -> str:
    parts = [
        '<div class="info-window">',
        f"<h4>{escape(place.name)}</h4>",
        f"<p>{escape(place.vicinity)}</p>",
    ]
    if place.rating is not None:
        parts.append(f"<p>Rating: {place.rating} ⭐</p>")
    parts.append(
        f'<a href="{escape(place.directions_url)}" target="_blank">Get Directions</a>'
        " | "
        f'<a href="{escape(place.web_search_url)}" target="_blank">Search Online</a>'
    )
    parts.append("</div>")
    return "".join(parts)


def _tile_options(tiles: Optional[str], attribution: Optional[str]) -> dict:
    tiles = tiles or settings.tiles
    attribution = attribution or settings.MAP_TILES_ATTRIBUTION or None
    # folium requires an attribution for custom tile URLs
    if tiles.startswith("http") and not attribution:
        attribution = "Map tiles"
    options = {"tiles": tiles}
    if attribution:
        options["attr"] = attribution
    return options


def build_map(
    state: AppState,
    tiles: Optional[str] = None,
    attribution: Optional[str] = None,
) -> folium.Map:
    """
    Build the map from the user location and the result set only. Pan, zoom
    and selection are left out so reruns produce the same Leaflet script
    and the map component is not remounted.
    """
    m = folium.Map(
        location=[state.user_location.lat, state.user_location.lng],
        zoom_start=state.default_zoom,
        **_tile_options(tiles, attribution),
    )

    folium.Marker(
        [state.user_location.lat, state.user_location.lng],
        tooltip="Your Location",
        icon=folium.Icon(color="red", icon="user"),
    ).add_to(m)

    for place in state.places:
        folium.Marker(
            [place.lat, place.lng],
            tooltip=place.name,
            popup=folium.Popup(popup_html(place), max_width=300),
            icon=folium.Icon(color="blue"),
        ).add_to(m)

    bounds = result_bounds(state.places)
    if bounds:
        m.fit_bounds(bounds, padding=FIT_PADDING_PX, max_zoom=FIT_MAX_ZOOM)

    return m
