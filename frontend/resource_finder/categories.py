"""
Resource categories and the search terms used for each of them.
"""

# Fixed search radius sent with every keyword search (meters)
SEARCH_RADIUS_M = 50000

# Size of the result set shown on the map
MAX_RESULTS = 20

CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "shelter": [
        "homeless shelter",
        "emergency shelter",
        "women's shelter",
        "family shelter",
    ],
    "food": [
        "food bank",
        "food pantry",
        "soup kitchen",
        "meals",
    ],
    "clothing": [
        "goodwill",
        "salvation army",
        "thrift store",
        "donation center",
    ],
}

CATEGORY_LABELS: dict[str, str] = {
    "shelter": "Find Free Shelters",
    "food": "Find Free Food",
    "clothing": "Find Free Clothing",
}


def keywords_for(category: str) -> list[str]:
    try:
        return list(CATEGORY_KEYWORDS[category])
    except KeyError:
        raise ValueError(f"Unknown resource category: {category!r}") from None
