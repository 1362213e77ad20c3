import pytest

from resource_finder.categories import CATEGORY_KEYWORDS, CATEGORY_LABELS, keywords_for
from resource_finder.models import Place

from finder_fakes import provider_place


def test_from_provider_reads_nearby_search_entry():
    place = Place.from_provider(provider_place("abc", 37.1, -122.2, name="Safe Harbor", rating=4.2))

    assert place.place_id == "abc"
    assert place.name == "Safe Harbor"
    assert (place.lat, place.lng) == (37.1, -122.2)
    assert place.vicinity == "abc Main St"
    assert place.types == ["point_of_interest"]
    assert place.rating == 4.2


def test_from_provider_falls_back_to_legacy_id():
    raw = provider_place("", 1.0, 2.0)
    raw["id"] = "legacy-id"
    assert Place.from_provider(raw).place_id == "legacy-id"


def test_from_provider_requires_identifier():
    with pytest.raises(ValueError):
        Place.from_provider({"name": "Nameless", "geometry": {"location": {"lat": 1, "lng": 2}}})


def test_place_is_immutable():
    place = Place.from_provider(provider_place("abc", 1.0, 2.0))
    with pytest.raises(Exception):
        place.name = "changed"


def test_outbound_links():
    place = Place(place_id="ChIJ123", name="St. Mary's Pantry", lat=40.5, lng=-79.9)

    assert place.directions_url == (
        "https://www.google.com/maps/search/?api=1&query=40.5,-79.9&query_place_id=ChIJ123"
    )
    assert place.web_search_url == "https://www.google.com/search?q=St.%20Mary%27s%20Pantry"


def test_every_category_has_four_keywords_and_a_label():
    assert set(CATEGORY_KEYWORDS) == {"shelter", "food", "clothing"}
    assert set(CATEGORY_LABELS) == set(CATEGORY_KEYWORDS)
    for keywords in CATEGORY_KEYWORDS.values():
        assert len(keywords) == 4


def test_keywords_for_returns_copy_in_order():
    keywords = keywords_for("food")
    assert keywords == ["food bank", "food pantry", "soup kitchen", "meals"]
    keywords.append("extra")
    assert "extra" not in CATEGORY_KEYWORDS["food"]


def test_keywords_for_unknown_category():
    with pytest.raises(ValueError):
        keywords_for("furniture")
