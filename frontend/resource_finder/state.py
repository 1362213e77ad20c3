"""
Page state and the controller that owns it.

Streamlit reruns the page script on every interaction, so the state object
lives in st.session_state and every change goes through one of the
FinderController handlers below.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

import httpx

from resource_finder.categories import keywords_for
from resource_finder.logger import logs
from resource_finder.models import Coordinate, MessageLevel, Place, SearchOutcome
from resource_finder.search import FAILED_MESSAGE, proxy_client, search_resources

LOCATION_WARNING = "Unable to get your location. Using default location."


@dataclass
class AppState:
    user_location: Coordinate
    map_center: Coordinate
    zoom: int
    # Zoom the map is built with; `zoom` follows the user's view
    default_zoom: int = 11
    location_settled: bool = False
    places: list[Place] = field(default_factory=list)
    selected_place_id: Optional[str] = None
    searching: bool = False
    message: Optional[str] = None
    message_level: Optional[MessageLevel] = None
    search_token: int = 0
    # Bumped whenever the markers are replaced; the map component is keyed on it
    map_generation: int = 0
    # Marker clicks already handled for the current map component
    handled_clicks: int = 0

    @classmethod
    def initial(cls, default_location: Coordinate, zoom: int = 11) -> "AppState":
        return cls(
            user_location=default_location,
            map_center=default_location,
            zoom=zoom,
            default_zoom=zoom,
        )

    @property
    def map_key(self) -> str:
        return f"resource_map_{self.map_generation}"

    @property
    def selected_place(self) -> Optional[Place]:
        for place in self.places:
            if place.place_id == self.selected_place_id:
                return place
        return None


class FinderController:
    def __init__(
        self,
        state: AppState,
        client_factory: Callable[[], httpx.AsyncClient] = proxy_client,
    ):
        self.state = state
        self.client_factory = client_factory

    # ===== Location =====

    def on_location_resolved(self, location: Coordinate) -> bool:
        """Apply the device location. Only the first report in a session counts."""
        if self.state.location_settled:
            return False
        self.state.location_settled = True
        self.state.user_location = location
        self.state.map_center = location
        self._new_map()
        logs.log(logging.INFO, f"Using device location {location.lat}, {location.lng}")
        return True

    def on_location_failed(self, reason: str = "") -> bool:
        if self.state.location_settled:
            return False
        self.state.location_settled = True
        self.state.message = LOCATION_WARNING
        self.state.message_level = MessageLevel.WARNING
        logs.log(logging.ERROR, f"Error getting location: {reason}")
        return True

    # ===== Map =====

    def on_map_moved(self, center: Coordinate, zoom: Optional[int] = None):
        self.state.map_center = center
        if zoom is not None:
            self.state.zoom = zoom

    def _new_map(self):
        # A fresh component starts its click counter at zero
        self.state.map_generation += 1
        self.state.handled_clicks = 0

    def on_marker_clicked(self, lat: float, lng: float, click_count: int) -> Optional[Place]:
        """
        Handle a click reported by the map component. The component keeps
        reporting its last click on every rerun, so only a higher click count
        is a new click.
        """
        if click_count <= self.state.handled_clicks:
            return None
        self.state.handled_clicks = click_count
        return self.select_at(lat, lng)

    # ===== Search =====

    async def search(self, category: str) -> Optional[SearchOutcome]:
        """
        Run one search around the current map center and replace the result set.
        Returns None when the search failed outright or was superseded by a
        newer one before it finished.
        """
        keywords_for(category)

        self.state.search_token += 1
        token = self.state.search_token
        center = self.state.map_center

        self.state.searching = True
        self.state.message = None
        self.state.message_level = None

        try:
            async with self.client_factory() as client:
                outcome = await search_resources(category, center, client=client)
        except Exception as e:
            logs.log(logging.ERROR, f"Search error: {str(e)}")
            if token == self.state.search_token:
                self.state.message = FAILED_MESSAGE
                self.state.message_level = MessageLevel.ERROR
                self.state.searching = False
            return None

        if token != self.state.search_token:
            logs.log(logging.INFO, f"Discarding superseded {category} search #{token}")
            return None

        self.state.places = list(outcome.places)
        self.state.selected_place_id = None
        self.state.message = outcome.message
        self.state.message_level = outcome.message_level
        self._new_map()
        self.state.searching = False
        return outcome

    # ===== Selection =====

    def select_place(self, place_id: str) -> Optional[Place]:
        self.state.selected_place_id = place_id
        place = self.state.selected_place
        if place is None:
            self.state.selected_place_id = None
        return place

    def select_at(self, lat: float, lng: float, tolerance: float = 1e-6) -> Optional[Place]:
        """Select the result whose marker sits at the clicked coordinate."""
        for place in self.state.places:
            if abs(place.lat - lat) <= tolerance and abs(place.lng - lng) <= tolerance:
                return self.select_place(place.place_id)
        return None

    def clear_selection(self):
        self.state.selected_place_id = None
