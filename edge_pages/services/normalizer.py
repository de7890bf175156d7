import logging
from typing import Any

from pydantic import ValidationError

from edge_pages.models.weather import NormalizedWeather, UpstreamWeather
from edge_pages.utils.exceptions import MalformedPayloadError

logger = logging.getLogger(__name__)


def normalize_weather(payload: dict[str, Any]) -> NormalizedWeather:
    """
    Project a provider payload onto the fields served to clients.

    Values are copied as received: no rounding and no unit conversion.
    Raises MalformedPayloadError when an expected field is absent, including
    an empty ``weather`` list.
    """
    try:
        upstream = UpstreamWeather.model_validate(payload)
    except ValidationError as e:
        missing = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        logger.error(f"Weather payload failed validation at: {', '.join(missing)}")
        raise MalformedPayloadError(
            f"Failed to parse weather data: {e.error_count()} error(s)", missing
        ) from e

    condition = upstream.weather[0]

    return NormalizedWeather(
        city=upstream.name,
        country=upstream.sys.country,
        temperature=upstream.main.temp,
        feels_like=upstream.main.feels_like,
        temp_min=upstream.main.temp_min,
        temp_max=upstream.main.temp_max,
        humidity=upstream.main.humidity,
        wind_speed=upstream.wind.speed,
        description=condition.description,
        icon=condition.icon,
        sunrise=upstream.sys.sunrise,
        sunset=upstream.sys.sunset,
    )
