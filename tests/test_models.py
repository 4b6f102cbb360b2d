import pytest

from route_tracer.core.models import Coordinate, RouteResult, parse_coordinate
from route_tracer.errors import InvalidCoordinate


@pytest.mark.parametrize(
    "lon,lat",
    [(-101.189, 20.126), (0.0, 0.0), (180.0, -90.0), (-180.0, 90.0), (12.3456789012, -45.000001)],
)
def test_query_text_round_trips(lon, lat):
    c = Coordinate(lon=lon, lat=lat)
    assert parse_coordinate(c.to_query()).as_tuple() == (lon, lat)


def test_parse_keeps_lon_lat_order():
    c = parse_coordinate("-101.189,20.126")
    assert c.lon == -101.189
    assert c.lat == 20.126
    assert c.as_lat_lon() == (20.126, -101.189)


def test_parse_tolerates_spaces():
    assert parse_coordinate(" -101.2 , 20.13 ").as_tuple() == (-101.2, 20.13)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        None,
        "-101.189 20.126",
        "-101.189;20.126",
        "-101.189,20.126,5",
        "abc,20.126",
        "-101.189,",
        "1_0,2",
        "\u0661,2",
        "0x1,2",
        "nan,20.0",
        "10.0,inf",
        "181,0",
        "-180.0001,0",
        "0,90.5",
        "0,-91",
    ],
)
def test_parse_rejects_bad_text(text):
    with pytest.raises(InvalidCoordinate) as exc:
        parse_coordinate(text, field="destination")
    assert exc.value.field == "destination"
    assert exc.value.text == text


def test_coordinate_model_enforces_range():
    with pytest.raises(ValueError):
        Coordinate(lon=200.0, lat=0.0)


def test_route_result_needs_two_points():
    with pytest.raises(ValueError):
        RouteResult(points=[Coordinate(lon=0, lat=0)], distance_m=0, duration_s=0)


def test_route_result_lat_lon_points():
    result = RouteResult(
        points=[Coordinate(lon=1.0, lat=2.0), Coordinate(lon=3.0, lat=4.0)],
        distance_m=10.0,
        duration_s=1.0,
    )
    assert result.lat_lon_points == [(2.0, 1.0), (4.0, 3.0)]
