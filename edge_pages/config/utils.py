from .settings import Settings


def validate_configuration(settings: Settings) -> dict[str, list[str] | bool]:
    """Validate configuration and return validation results."""
    errors = []
    warnings = []

    if settings.site == "weather" and not settings.openweather_api_key:
        warnings.append(
            "OPENWEATHER_API_KEY is not set; /weather will answer 500 until it is"
        )

    if settings.weather_api_timeout is not None and settings.weather_api_timeout <= 0:
        errors.append("WEATHER_API_TIMEOUT must be a positive number")

    if settings.countdown_tick_seconds <= 0:
        errors.append("COUNTDOWN_TICK_SECONDS must be a positive number")

    if not (1 <= settings.port <= 65535):
        errors.append("PORT must be between 1 and 65535")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def get_config_summary(settings: Settings) -> dict[str, str | int | bool]:
    """Get a summary of current configuration for logging/debugging."""
    return {
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "site": settings.site,
        "debug": settings.debug,
        "log_level": settings.log_level,
        "api_endpoint": f"{settings.host}:{settings.port}",
        "weather_api_configured": bool(
            settings.openweather_api_key and settings.openweather_api_key.strip()
        ),
        "countdown_target": settings.countdown_target.isoformat(),
    }
