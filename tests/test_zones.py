import pytest
from pytest import approx

from indiangrid.results import NO_ZONE, NoZoneFound
from indiangrid.zones import *


def test_catalog_order():
    assert [x.name for x in ZONES] == [
        'Zone 0', 'Zone I', 'Zone IIA', 'Zone IIB',
        'Zone IIIA', 'Zone IIIB', 'Zone IVA', 'Zone IVB',
    ]
    assert len({(x.origin_lat, x.origin_lon) for x in ZONES}) == len(ZONES)


def test_zone_immutable():
    with pytest.raises(AttributeError):
        ZONES[0].origin_lat = 0.


def test_zone_eq_hash():
    zone = GridZone('Zone IIA', 26.0, 74.0, 21.0, 29.0, 72.0, 78.0)
    assert zone == get_zone('IIA')
    assert hash(zone) == hash(get_zone('IIA'))
    assert zone != get_zone('IIB')
    assert zone != 'Zone IIA'


def test_zone_repr():
    assert repr(get_zone('IIA')) == '<GridZone Zone IIA>'


def test_zone_code_description():
    assert get_zone('Zone 0').code == '0'
    assert get_zone('Zone IIIB').code == 'IIIB'
    assert get_zone('I').description == 'Zone I (32.5°N, 68.0°E)'


def test_standard_parallels():
    phi1, phi2 = get_zone('I').standard_parallels
    assert phi1 == approx(28 + 8 / 6)
    assert phi2 == approx(36 - 8 / 6)

    phi1, phi2 = get_zone('0').standard_parallels
    assert phi1 == approx(35 + 7 / 6)
    assert phi2 == approx(42 - 7 / 6)


def test_zone_contains_inclusive():
    for zone in ZONES:
        mid_lat = (zone.min_lat + zone.max_lat) / 2
        mid_lon = (zone.min_lon + zone.max_lon) / 2
        assert zone.contains(zone.min_lat, mid_lon)
        assert zone.contains(zone.max_lat, mid_lon)
        assert zone.contains(mid_lat, zone.min_lon)
        assert zone.contains(mid_lat, zone.max_lon)
        assert zone.contains(zone.min_lat, zone.min_lon)
        assert not zone.contains(zone.max_lat + 1e-9, mid_lon)
        assert not zone.contains(mid_lat, zone.min_lon - 1e-9)
        assert not zone.contains(float('nan'), mid_lon)


def test_resolve_zone():
    assert resolve_zone(28.6139, 77.2090) == get_zone('IIA')
    assert resolve_zone(22.5726, 88.3639) == get_zone('IIIB')
    assert resolve_zone(13.0827, 80.2707) == get_zone('IVA')
    assert resolve_zone(40., 66.) == get_zone('0')


def test_resolve_zone_boundaries():
    # Edges only covered by a single zone
    assert resolve_zone(42.0, 68.0) == get_zone('0')
    assert resolve_zone(35.0, 68.0) == get_zone('0')
    assert resolve_zone(38.0, 64.0) == get_zone('0')
    assert resolve_zone(38.0, 72.0) == get_zone('0')
    assert resolve_zone(28.0, 68.0) == get_zone('I')
    assert resolve_zone(21.0, 72.0) == get_zone('IIA')
    assert resolve_zone(29.0, 78.0) == get_zone('IIA')
    assert resolve_zone(29.0, 88.0) == get_zone('IIB')
    assert resolve_zone(8.0, 76.0) == get_zone('IVA')
    assert resolve_zone(12.0, 90.0) == get_zone('IVB')
    assert resolve_zone(8.0, 88.0) == get_zone('IVB')


def test_resolve_zone_overlap_first_match():
    overlapping = [
        ((35.5, 68.0), 'Zone 0', 'Zone I'),
        ((36.0, 68.0), 'Zone 0', 'Zone I'),
        ((22.0, 77.0), 'Zone IIA', 'Zone IIIA'),
        ((22.0, 81.0), 'Zone IIB', 'Zone IIIA'),
        ((22.0, 85.0), 'Zone IIB', 'Zone IIIB'),
        ((19.0, 83.0), 'Zone IIIA', 'Zone IIIB'),
        ((15.5, 80.0), 'Zone IIIA', 'Zone IVA'),
        ((12.0, 83.0), 'Zone IVA', 'Zone IVB'),
    ]
    for (lat, lon), first, later in overlapping:
        assert get_zone(later).contains(lat, lon)
        for _ in range(3):
            assert resolve_zone(lat, lon).name == first


def test_resolve_zone_out_of_coverage():
    assert resolve_zone(-33.9249, 18.4241) is NO_ZONE
    assert isinstance(resolve_zone(0., 0.), NoZoneFound)

    # Gaps between zones
    assert resolve_zone(30., 75.) is NO_ZONE
    assert resolve_zone(26., 79.) is NO_ZONE


def test_get_zone():
    assert get_zone('IIA').name == 'Zone IIA'
    assert get_zone('zone iia').name == 'Zone IIA'
    assert get_zone(' Zone IIA ').name == 'Zone IIA'
    assert get_zone('0').name == 'Zone 0'

    with pytest.raises(KeyError):
        get_zone('V')


def test_zones_in_bounds():
    assert zones_in_bounds(20., 24., 76., 79.) == (get_zone('IIA'), get_zone('IIIA'))
    assert zones_in_bounds(-40., -30., 10., 20.) == ()

    # Touching edges count
    assert zones_in_bounds(42., 45., 60., 65.) == (get_zone('0'), )

    assert zones_in_bounds(0., 50., 60., 95.) == ZONES


def test_is_within_grid_bounds():
    assert is_within_grid_bounds(28.6139, 77.2090)
    assert not is_within_grid_bounds(0., 0.)
