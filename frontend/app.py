import asyncio

import requests
import streamlit as st
from streamlit_folium import st_folium
from streamlit_js_eval import get_geolocation

from resource_finder.categories import CATEGORY_LABELS
from resource_finder.config import settings
from resource_finder.map_view import build_map
from resource_finder.models import Coordinate, MessageLevel
from resource_finder.state import AppState, FinderController

# Page configuration
st.set_page_config(
    page_title="Community Resource Finder",
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        color: #1E88E5;
        text-align: center;
        padding: 0.5rem 0;
        font-weight: bold;
    }
    .info-window h4 {
        margin: 0 0 0.25rem 0;
    }
    .stButton>button {
        width: 100%;
        background-color: #1E88E5;
        color: white;
        border-radius: 0.5rem;
        font-weight: bold;
    }
    .stButton>button:hover {
        background-color: #1565C0;
    }
</style>
""", unsafe_allow_html=True)

# Initialize session state
if "finder_state" not in st.session_state:
    st.session_state.finder_state = AppState.initial(
        Coordinate(lat=settings.DEFAULT_LAT, lng=settings.DEFAULT_LNG),
        zoom=settings.DEFAULT_ZOOM,
    )

controller = FinderController(st.session_state.finder_state)
state = controller.state

def check_backend_health() -> bool:
    """Check if the places proxy is running."""
    try:
        response = requests.get(f"{settings.BACKEND_URL}/health", timeout=2)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False

def resolve_device_location():
    """Feed the browser's geolocation answer to the controller, once."""
    if state.location_settled:
        return
    position = get_geolocation()
    if position is None:
        # Browser has not answered yet
        return
    coords = position.get("coords") if isinstance(position, dict) else None
    if coords:
        controller.on_location_resolved(
            Coordinate(lat=coords["latitude"], lng=coords["longitude"])
        )
    else:
        error = position.get("error", {}) if isinstance(position, dict) else {}
        controller.on_location_failed(str(error.get("message", error)))
    st.rerun()

def show_message():
    if not state.message:
        return
    if state.message_level == MessageLevel.ERROR:
        st.error(state.message)
    elif state.message_level == MessageLevel.WARNING:
        st.warning(state.message)
    else:
        st.info(state.message)

def show_selected_place():
    place = state.selected_place
    if place is None:
        return
    with st.container(border=True):
        st.subheader(place.name)
        st.write(place.vicinity)
        if place.rating is not None:
            st.write(f"Rating: {place.rating} ⭐")
        col1, col2, col3 = st.columns(3)
        with col1:
            st.link_button("Get Directions", place.directions_url, use_container_width=True)
        with col2:
            st.link_button("Search Online", place.web_search_url, use_container_width=True)
        with col3:
            if st.button("Close", key="close_selection"):
                controller.clear_selection()
                st.rerun()

# Header
st.markdown('<div class="main-header">Community Resource Finder</div>', unsafe_allow_html=True)

# Sidebar
with st.sidebar:
    st.header("⚙️ Status")
    if check_backend_health():
        st.success("✅ Proxy Connected")
    else:
        st.warning("⚠️ Proxy Disconnected")
        st.code("cd backend && python run.py", language="bash")

    st.divider()
    st.write(f"**Your location:** {state.user_location.lat:.4f}, {state.user_location.lng:.4f}")
    st.write(f"**Results shown:** {len(state.places)}")

resolve_device_location()

# Category buttons
columns = st.columns(len(CATEGORY_LABELS))
for column, (category, label) in zip(columns, CATEGORY_LABELS.items()):
    with column:
        if st.button(label, key=f"search_{category}", disabled=state.searching):
            with st.spinner("Searching for resources..."):
                asyncio.run(controller.search(category))

show_message()

map_data = st_folium(
    build_map(state),
    key=state.map_key,
    height=600,
    use_container_width=True,
    returned_objects=["center", "zoom", "last_object_clicked", "last_object_clicked_count"],
)

if map_data:
    center = map_data.get("center")
    if center:
        controller.on_map_moved(
            Coordinate(lat=center["lat"], lng=center["lng"]), map_data.get("zoom")
        )

    clicked = map_data.get("last_object_clicked")
    if clicked:
        click_count = map_data.get("last_object_clicked_count") or 0
        if controller.on_marker_clicked(clicked["lat"], clicked["lng"], click_count):
            st.rerun()

show_selected_place()

# Footer
st.divider()
st.markdown("""
<div style='text-align: center; color: #999; padding: 1rem;'>
    <small>Results from Google Places via the resource proxy | Map with folium & Streamlit</small>
</div>
""", unsafe_allow_html=True)
