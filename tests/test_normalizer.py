import copy

import pytest

from edge_pages.services.normalizer import normalize_weather
from edge_pages.utils.exceptions import FetchFailedError, MalformedPayloadError


class TestNormalizer:
    """Test suite for the provider payload projection"""

    def test_projects_twelve_fields(self, upstream_payload, normalized_payload):
        """Test a full payload maps to exactly the expected object"""
        result = normalize_weather(upstream_payload)

        assert result.model_dump() == normalized_payload
        assert len(result.model_dump()) == 12

    def test_numbers_are_not_rounded_or_retyped(self, upstream_payload):
        """Test integers stay integers and floats stay floats"""
        result = normalize_weather(upstream_payload)

        assert type(result.temp_min) is int
        assert type(result.temperature) is float
        assert result.temperature == 18.47

    def test_uses_first_condition(self, upstream_payload):
        """Test only the first weather entry is used"""
        result = normalize_weather(upstream_payload)

        assert result.description == "broken clouds"
        assert result.icon == "04d"

    def test_empty_condition_list(self, upstream_payload):
        """Test an empty weather list is reported as malformed"""
        payload = copy.deepcopy(upstream_payload)
        payload["weather"] = []

        with pytest.raises(MalformedPayloadError) as exc_info:
            normalize_weather(payload)

        assert "weather" in exc_info.value.missing

    def test_missing_nested_field(self, upstream_payload):
        """Test a missing nested field is reported with its path"""
        payload = copy.deepcopy(upstream_payload)
        del payload["sys"]["sunset"]

        with pytest.raises(MalformedPayloadError) as exc_info:
            normalize_weather(payload)

        assert "sys.sunset" in exc_info.value.missing

    @pytest.mark.parametrize(
        "section, key, value",
        [
            ("main", "temp", "18.5"),
            ("main", "humidity", "64"),
            ("wind", "speed", None),
            ("sys", "sunrise", "1700465105"),
            ("sys", "country", 826),
        ],
    )
    def test_values_are_not_coerced(self, upstream_payload, section, key, value):
        """Test mistyped upstream values are rejected rather than converted"""
        payload = copy.deepcopy(upstream_payload)
        payload[section][key] = value

        with pytest.raises(MalformedPayloadError) as exc_info:
            normalize_weather(payload)

        assert any(path.startswith(f"{section}.{key}") for path in exc_info.value.missing)

    def test_malformed_payload_is_a_fetch_failure(self):
        """Test shape errors surface as the generic fetch failure"""
        with pytest.raises(FetchFailedError) as exc_info:
            normalize_weather({"cod": 200})

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Failed to fetch weather data"
