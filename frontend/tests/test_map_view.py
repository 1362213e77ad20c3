from streamlit_folium import _get_map_string, generate_js_hash

from resource_finder.map_view import build_map, popup_html, result_bounds
from resource_finder.models import Coordinate, Place
from resource_finder.state import AppState, FinderController


def make_place(place_id, lat, lng, **kwargs):
    kwargs.setdefault("name", f"Place {place_id}")
    return Place(place_id=place_id, lat=lat, lng=lng, **kwargs)


def render(m):
    return m.get_root().render()


def test_result_bounds_cover_all_places():
    places = [make_place("a", 1.0, 5.0), make_place("b", -2.0, 3.0), make_place("c", 0.5, 7.0)]
    assert result_bounds(places) == [[-2.0, 3.0], [1.0, 7.0]]


def test_result_bounds_empty():
    assert result_bounds([]) is None


def test_popup_has_details_and_links():
    place = make_place("pid-1", 37.7, -122.4, name="Bread & Soup", vicinity="12 Oak St", rating=4.5)

    html = popup_html(place)

    assert "Bread &amp; Soup" in html
    assert "12 Oak St" in html
    assert "Rating: 4.5" in html
    assert "Get Directions" in html
    assert "Search Online" in html
    assert "query_place_id=pid-1" in html


def test_popup_without_rating():
    assert "Rating" not in popup_html(make_place("x", 1, 1))


def test_one_marker_per_result_plus_user():
    state = AppState.initial(Coordinate(lat=37.77, lng=-122.42))
    state.places = [make_place(str(i), 37.7 + i / 100, -122.4) for i in range(3)]

    html = render(build_map(state, tiles="OpenStreetMap"))

    assert html.count("L.marker(") == 4
    assert "Your Location" in html


def test_custom_tiles_get_attribution():
    state = AppState.initial(Coordinate(lat=0, lng=0))
    m = build_map(state, tiles="https://tiles.example.test/{z}/{x}/{y}.png?key=abc")
    assert "tiles.example.test" in render(m)


def test_viewport_fits_results_on_every_render():
    state = AppState.initial(Coordinate(lat=37.77, lng=-122.42))

    assert "fitBounds" not in render(build_map(state, tiles="OpenStreetMap"))

    state.places = [make_place("a", 37.8, -122.5), make_place("b", 37.6, -122.3)]
    assert "fitBounds" in render(build_map(state, tiles="OpenStreetMap"))
    assert "fitBounds" in render(build_map(state, tiles="OpenStreetMap"))


def component_key(state):
    return generate_js_hash(_get_map_string(build_map(state, tiles="OpenStreetMap")), state.map_key)


def test_component_key_stable_across_reruns():
    state = AppState.initial(Coordinate(lat=37.77, lng=-122.42))
    state.places = [make_place("a", 37.8, -122.5), make_place("b", 37.6, -122.3)]
    controller = FinderController(state)
    first = component_key(state)

    # Pan, zoom and selection happen between reruns without new results
    controller.on_map_moved(Coordinate(lat=37.9, lng=-122.6), zoom=14)
    controller.select_place("b")

    assert component_key(state) == first


def test_component_key_changes_with_new_results():
    state = AppState.initial(Coordinate(lat=37.77, lng=-122.42))
    state.places = [make_place("a", 37.8, -122.5)]
    first = component_key(state)

    state.places = [make_place("c", 37.7, -122.4)]

    assert component_key(state) != first
