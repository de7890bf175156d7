from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

Number = int | float
# Upstream values are projected as received, never coerced.
StrictNumber = StrictInt | StrictFloat


class UpstreamMain(BaseModel):
    """Measurement block of the provider payload"""

    model_config = ConfigDict(extra="ignore")

    temp: StrictNumber
    feels_like: StrictNumber
    temp_min: StrictNumber
    temp_max: StrictNumber
    humidity: StrictNumber


class UpstreamSys(BaseModel):
    """Location and astronomical block of the provider payload"""

    model_config = ConfigDict(extra="ignore")

    country: StrictStr
    sunrise: StrictInt
    sunset: StrictInt


class UpstreamWind(BaseModel):
    model_config = ConfigDict(extra="ignore")

    speed: StrictNumber


class UpstreamCondition(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: StrictStr
    icon: StrictStr


class UpstreamWeather(BaseModel):
    """The subset of the OpenWeatherMap current weather payload we rely on"""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    main: UpstreamMain
    sys: UpstreamSys
    wind: UpstreamWind
    weather: list[UpstreamCondition] = Field(..., min_length=1)


class NormalizedWeather(BaseModel):
    """Weather data served to clients"""

    city: str = Field(..., description="City name")
    country: str = Field(..., description="ISO country code")
    temperature: Number = Field(..., description="Temperature in Celsius")
    feels_like: Number = Field(..., description="Perceived temperature in Celsius")
    temp_min: Number = Field(..., description="Minimum temperature in Celsius")
    temp_max: Number = Field(..., description="Maximum temperature in Celsius")
    humidity: Number = Field(..., description="Humidity percentage")
    wind_speed: Number = Field(..., description="Wind speed in m/s")
    description: str = Field(..., description="Weather description")
    icon: str = Field(..., description="Provider icon code")
    sunrise: int = Field(..., description="Sunrise as a UNIX timestamp")
    sunset: int = Field(..., description="Sunset as a UNIX timestamp")


class ErrorPayload(BaseModel):
    """Error body paired with a non-200 status"""

    error: str


class ProviderConfig(BaseModel):
    """Per-request configuration handed to the weather service"""

    provider_api_key: str | None = None


class UpstreamReply(BaseModel):
    """A successful provider reply"""

    status_code: int
    body: dict
