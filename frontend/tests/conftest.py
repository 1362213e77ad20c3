import pytest

from resource_finder.models import Coordinate

from finder_fakes import FakeProxy


@pytest.fixture
def center():
    return Coordinate(lat=37.7749, lng=-122.4194)


@pytest.fixture
def fake_proxy():
    return FakeProxy()
