import pytest


@pytest.fixture
def upstream_payload():
    """Full OpenWeatherMap current weather payload for London"""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [
            {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"},
            {"id": 701, "main": "Mist", "description": "mist", "icon": "50d"},
        ],
        "base": "stations",
        "main": {
            "temp": 18.47,
            "feels_like": 17.96,
            "temp_min": 17,
            "temp_max": 19.62,
            "pressure": 1016,
            "humidity": 64,
        },
        "visibility": 10000,
        "wind": {"speed": 4.12, "deg": 240},
        "clouds": {"all": 75},
        "dt": 1700492400,
        "sys": {
            "type": 2,
            "id": 2075535,
            "country": "GB",
            "sunrise": 1700465105,
            "sunset": 1700496437,
        },
        "timezone": 0,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def normalized_payload():
    """Expected client-facing projection of ``upstream_payload``"""
    return {
        "city": "London",
        "country": "GB",
        "temperature": 18.47,
        "feels_like": 17.96,
        "temp_min": 17,
        "temp_max": 19.62,
        "humidity": 64,
        "wind_speed": 4.12,
        "description": "broken clouds",
        "icon": "04d",
        "sunrise": 1700465105,
        "sunset": 1700496437,
    }
