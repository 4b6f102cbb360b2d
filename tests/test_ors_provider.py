import pytest
import requests

from route_tracer.core.service import RouteRequestService
from route_tracer.errors import InvalidCoordinate, MalformedResponse, NetworkError, RemoteError
from route_tracer.providers.mock import MockDirectionsProvider
from route_tracer.providers.ors import OpenRouteServiceProvider
from route_tracer.providers.registry import build_provider


@pytest.fixture
def service(mock_http):
    provider = OpenRouteServiceProvider(base_url="https://ors.test/", profile="driving-car", http=mock_http)
    return RouteRequestService(provider, default_api_key="")


def test_get_builds_directions_request(service, mock_http, make_response, example_body):
    mock_http.s.get.return_value = make_response(200, example_body)

    result = service.get_route("-101.189,20.126", "-101.200,20.130", "KEY")

    mock_http.s.get.assert_called_once_with(
        "https://ors.test/v2/directions/driving-car",
        params={"api_key": "KEY", "start": "-101.189,20.126", "end": "-101.2,20.13"},
        timeout=3,
    )
    assert [p.as_tuple() for p in result.points] == [(-101.189, 20.126), (-101.2, 20.13)]
    assert result.distance_m == 1500.0
    assert result.duration_s == 180.0


@pytest.mark.parametrize("status", [400, 403, 404, 429, 500, 503])
def test_non_2xx_is_remote_error(service, mock_http, make_response, status):
    body = '{"error":{"code":2010,"message":"Could not find routable point"}}'
    mock_http.s.get.return_value = make_response(status, {"error": {}}, text=body)

    with pytest.raises(RemoteError) as exc:
        service.get_route("-101.189,20.126", "-101.2,20.13", "KEY")

    assert exc.value.status_code == status
    assert exc.value.body == body
    assert mock_http.s.get.call_count == 1


def test_non_json_body_is_malformed(service, mock_http, make_response):
    mock_http.s.get.return_value = make_response(200, None, text="<html>gateway</html>")

    with pytest.raises(MalformedResponse):
        service.get_route("-101.189,20.126", "-101.2,20.13", "KEY")


def test_json_array_body_is_malformed(service, mock_http, make_response):
    mock_http.s.get.return_value = make_response(200, [1, 2, 3])

    with pytest.raises(MalformedResponse):
        service.get_route("-101.189,20.126", "-101.2,20.13", "KEY")


@pytest.mark.parametrize(
    "exc",
    [
        requests.exceptions.ConnectTimeout("timed out: /v2/directions/driving-car?api_key=KEY"),
        requests.exceptions.ReadTimeout("read timed out"),
        requests.exceptions.ConnectionError("Name or service not known"),
    ],
)
def test_transport_failure_is_network_error(service, mock_http, exc):
    mock_http.s.get.side_effect = exc

    with pytest.raises(NetworkError) as err:
        service.get_route("-101.189,20.126", "-101.2,20.13", "KEY")

    assert "KEY" not in str(err.value)
    assert err.value.__cause__ is exc
    # no automatic retry
    assert mock_http.s.get.call_count == 1


def test_invalid_input_skips_http(service, mock_http):
    with pytest.raises(InvalidCoordinate):
        service.get_route("1,2", "not a point", "KEY")
    mock_http.s.get.assert_not_called()


def test_mock_provider_draws_straight_line():
    service = RouteRequestService(MockDirectionsProvider(segments=4, speed_kmh=36.0), default_api_key="")

    result = service.get_route("-101.189,20.126", "-101.2,20.13", "")

    assert len(result.points) == 5
    assert result.points[0].as_tuple() == (-101.189, 20.126)
    assert result.points[-1].as_tuple() == (-101.2, 20.13)
    # roughly 1.2 km between the two points, priced at 10 m/s
    assert 1000 < result.distance_m < 1400
    assert result.duration_s == pytest.approx(result.distance_m / 10.0, abs=0.2)


def test_build_provider():
    assert isinstance(build_provider("mock"), MockDirectionsProvider)
    assert isinstance(build_provider("ORS"), OpenRouteServiceProvider)
    with pytest.raises(ValueError):
        build_provider("osrm")
