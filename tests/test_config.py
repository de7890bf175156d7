from edge_pages.config.settings import Settings
from edge_pages.config.utils import get_config_summary, validate_configuration


class TestConfiguration:
    """Test suite for configuration helpers"""

    def test_missing_api_key_is_a_warning(self):
        """Test a missing key is reported without failing validation"""
        result = validate_configuration(Settings(openweather_api_key=None))

        assert result["valid"] is True
        assert any("OPENWEATHER_API_KEY" in w for w in result["warnings"])

    def test_countdown_site_does_not_need_key(self):
        result = validate_configuration(
            Settings(site="countdown", openweather_api_key=None)
        )

        assert result["warnings"] == []

    def test_invalid_values(self):
        """Test invalid numbers are reported as errors"""
        result = validate_configuration(
            Settings(
                openweather_api_key="key",
                weather_api_timeout=0,
                countdown_tick_seconds=-1,
                port=70000,
            )
        )

        assert result["valid"] is False
        assert len(result["errors"]) == 3

    def test_api_key_from_environment(self, monkeypatch):
        """Test the key is read from OPENWEATHER_API_KEY"""
        monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")

        assert Settings().openweather_api_key == "from-env"

    def test_summary_hides_key(self):
        """Test the summary reports key presence, not its value"""
        summary = get_config_summary(Settings(openweather_api_key="secret-value"))

        assert summary["weather_api_configured"] is True
        assert "secret-value" not in str(summary)
