import pytest

from cityweather.exceptions import (
    InvalidInputError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
)
from cityweather.geocoding import Geocoder, Location, validate_city_query
from tests.conftest import FakeOpenMeteo


def make_geocoder(open_meteo: FakeOpenMeteo, **kwargs) -> Geocoder:
    return Geocoder(url=open_meteo.geocoding_url, **kwargs)


class TestValidateCityQuery:
    @pytest.mark.parametrize(
        "city_query",
        ["", "   ", "a", " b ", "Paris1", "Rio_de_Janeiro", "New York!", "Zürich;"],
    )
    def test_rejects_malformed_names(self, city_query):
        with pytest.raises(InvalidInputError):
            validate_city_query(city_query)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidInputError):
            validate_city_query(None)

    @pytest.mark.parametrize(
        "city_query, expected",
        [
            ("  São Paulo ", "São Paulo"),
            ("Aix-en-Provence", "Aix-en-Provence"),
            ("Ås", "Ås"),
            ("Zürich", "Zürich"),
        ],
    )
    def test_accepts_and_trims_valid_names(self, city_query, expected):
        assert validate_city_query(city_query) == expected


async def test_resolve_sao_paulo(open_meteo):
    location = await make_geocoder(open_meteo).resolve("São Paulo")

    assert location == Location(
        name="São Paulo",
        country="Brazil",
        latitude=-23.55,
        longitude=-46.63,
        region=None,
    )


async def test_resolve_sends_trimmed_name_and_single_result_query(open_meteo):
    await make_geocoder(open_meteo, language="pt").resolve("  São Paulo  ")

    [query] = open_meteo.queries_for(FakeOpenMeteo.GEOCODING_PATH)
    assert query == {
        "name": "São Paulo",
        "count": "1",
        "language": "pt",
        "format": "json",
    }


async def test_resolve_empty_query_makes_no_request(open_meteo):
    with pytest.raises(InvalidInputError):
        await make_geocoder(open_meteo).resolve("")

    assert open_meteo.requests == []


async def test_resolve_defaults_missing_country_and_keeps_region(open_meteo):
    open_meteo.geocoding_payload = {
        "results": [
            {"name": "Campinas", "latitude": -22.9, "longitude": -47.06, "admin1": "São Paulo"}
        ]
    }

    location = await make_geocoder(open_meteo).resolve("Campinas")

    assert location.country == Geocoder.UNKNOWN_COUNTRY
    assert location.region == "São Paulo"


@pytest.mark.parametrize("payload", [{}, {"results": []}, {"results": None}])
async def test_resolve_raises_not_found_without_candidates(open_meteo, payload):
    open_meteo.geocoding_payload = payload

    with pytest.raises(NotFoundError, match="Atlantis"):
        await make_geocoder(open_meteo).resolve("Atlantis")


@pytest.mark.parametrize(
    "candidate",
    [
        {"name": "Nowhere", "longitude": 10.0},
        {"name": "Nowhere", "latitude": "12.5", "longitude": 10.0},
        {"name": "Nowhere", "latitude": True, "longitude": 10.0},
        {"name": "Nowhere", "latitude": 12.5, "longitude": None},
        {"name": "Nowhere", "latitude": 120.0, "longitude": 10.0},
    ],
)
async def test_resolve_rejects_candidates_without_valid_coordinates(open_meteo, candidate):
    open_meteo.geocoding_payload = {"results": [candidate]}

    with pytest.raises(InvalidResponseError):
        await make_geocoder(open_meteo).resolve("Nowhere")


async def test_resolve_rejects_non_object_body(open_meteo):
    open_meteo.geocoding_payload = ["not", "an", "object"]

    with pytest.raises(InvalidResponseError):
        await make_geocoder(open_meteo).resolve("Paris")


async def test_resolve_rejects_non_json_body(open_meteo):
    open_meteo.raw_body = "<html>maintenance</html>"

    with pytest.raises(InvalidResponseError):
        await make_geocoder(open_meteo).resolve("Paris")


async def test_resolve_wraps_http_errors(open_meteo):
    open_meteo.geocoding_status = 503

    with pytest.raises(NetworkError, match="503"):
        await make_geocoder(open_meteo).resolve("Paris")


async def test_resolve_reports_timeouts(open_meteo):
    open_meteo.delay_seconds = 1.0

    with pytest.raises(NetworkError, match="timed out"):
        await make_geocoder(open_meteo, timeout=0.1).resolve("Paris")


async def test_resolve_reports_connection_failures(unused_tcp_port):
    geocoder = Geocoder(url=f"http://127.0.0.1:{unused_tcp_port}/v1/search")

    with pytest.raises(NetworkError, match="connection error"):
        await geocoder.resolve("Paris")


async def test_resolved_coordinates_stay_in_range(open_meteo):
    open_meteo.geocoding_payload = {
        "results": [{"name": "Longyearbyen", "country": "Norway", "latitude": 78.22, "longitude": 15.65}]
    }

    location = await make_geocoder(open_meteo).resolve("Longyearbyen")

    assert -90 <= location.latitude <= 90
    assert -180 <= location.longitude <= 180


@pytest.mark.parametrize(
    "candidate, field",
    [
        ({"latitude": 48.85, "longitude": 2.35}, "name"),
        ({"name": 42, "latitude": 48.85, "longitude": 2.35}, "name"),
        ({"name": "Nowhere", "latitude": 48.85, "longitude": "east"}, "longitude"),
    ],
)
async def test_resolve_names_invalid_candidate_fields(open_meteo, candidate, field):
    open_meteo.geocoding_payload = {"results": [candidate]}

    with pytest.raises(InvalidResponseError, match=f"Invalid geocoding candidate.*{field}"):
        await make_geocoder(open_meteo).resolve("Paris")


async def test_resolve_names_out_of_range_coordinate(open_meteo):
    open_meteo.geocoding_payload = {
        "results": [{"name": "Nowhere", "latitude": 12.0, "longitude": 200.0}]
    }

    with pytest.raises(InvalidResponseError, match=r"coordinate data.*\(longitude\)"):
        await make_geocoder(open_meteo).resolve("Paris")
