import pytest

from route_corridor.coordinates import latlng_to_lnglat


@pytest.fixture
def short_route():
    """Two clicks in Ljubljana, (lon, lat) order."""
    return latlng_to_lnglat([(46.05, 14.50), (46.06, 14.51)])


@pytest.fixture
def zigzag_route():
    return latlng_to_lnglat([
        (46.050, 14.500),
        (46.055, 14.505),
        (46.050, 14.510),
        (46.055, 14.515),
    ])


@pytest.fixture
def loop_route():
    """Triangle returning about 27 m from its start."""
    return latlng_to_lnglat([
        (46.05, 14.50),
        (46.05, 14.52),
        (46.06, 14.51),
        (46.0502, 14.5002),
    ])


@pytest.fixture
def loop_centroid():
    return (14.51, 46.0533)
