import html
from pathlib import Path

from edge_pages.config.settings import Settings

PAGES_DIR = Path(__file__).parent


def load_document(name: str) -> str:
    """Read a bundled HTML document by file stem."""
    return (PAGES_DIR / f"{name}.html").read_text(encoding="utf-8")


def weather_document() -> str:
    return load_document("weather")


def countdown_document(settings: Settings) -> str:
    """
    Build the countdown page for this deployment.

    The target instant, title, subtitle and final message are substituted
    once, so every request in a deployment receives the same bytes.
    """
    substitutions = {
        "__COUNTDOWN_TARGET__": settings.countdown_target.isoformat(),
        "__COUNTDOWN_TITLE__": settings.countdown_title,
        "__COUNTDOWN_SUBTITLE__": settings.countdown_subtitle,
        "__COUNTDOWN_FINAL_MESSAGE__": settings.countdown_final_message,
    }

    document = load_document("countdown")
    for placeholder, value in substitutions.items():
        document = document.replace(placeholder, html.escape(value, quote=True))
    return document
