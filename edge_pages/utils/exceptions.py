class WeatherAPIError(Exception):
    """Base exception for weather proxy errors, rendered as an error payload"""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CityNotProvidedError(WeatherAPIError):
    """Exception raised when the request carries no city"""

    def __init__(self):
        super().__init__("City not provided", 400)


class ConfigurationError(WeatherAPIError):
    """Exception raised when the provider API key is not configured"""

    def __init__(self, message: str = "API key not configured"):
        super().__init__(message, 500)


class UpstreamError(WeatherAPIError):
    """Exception raised when the weather provider answers with a non-200 status"""

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(message or "City not found", status_code)


class FetchFailedError(WeatherAPIError):
    """Exception raised when the weather data could not be fetched or parsed"""

    def __init__(self, reason: str | None = None):
        super().__init__("Failed to fetch weather data", 500)
        self.reason = reason


class MalformedPayloadError(FetchFailedError):
    """Exception raised when the provider payload lacks an expected field"""

    def __init__(self, reason: str, missing: list[str] | None = None):
        super().__init__(reason)
        self.missing = missing or []
