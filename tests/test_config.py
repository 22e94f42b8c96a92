"""
Tests for environment based configuration
"""

import nuban.config as config_module
from nuban.config import NubanConfig, get_config, reload_config


class TestNubanConfig:
    """Test NubanConfig defaults and environment loading"""

    def test_defaults(self, monkeypatch):
        for name in ["NUBAN_API_KEY", "NUBAN_PAYMENT_PROVIDER", "NUBAN_REQUEST_TIMEOUT",
                     "NUBAN_CHECK_DIGIT_PRECHECK", "NUBAN_LOG_LEVEL", "NUBAN_LOG_FORMAT"]:
            monkeypatch.delenv(name, raising=False)

        config = NubanConfig(_env_file=None)

        assert config.api_key is None
        assert config.payment_provider == "PAYSTACK"
        assert config.request_timeout == 10.0
        assert config.check_digit_precheck is False
        assert config.log_level == "INFO"
        assert config.log_format == "json"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NUBAN_API_KEY", "sk_live_abc")
        monkeypatch.setenv("NUBAN_PAYMENT_PROVIDER", "FLUTTERWAVE")
        monkeypatch.setenv("NUBAN_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("NUBAN_CHECK_DIGIT_PRECHECK", "true")

        config = NubanConfig(_env_file=None)

        assert config.api_key == "sk_live_abc"
        assert config.payment_provider == "FLUTTERWAVE"
        assert config.request_timeout == 2.5
        assert config.check_digit_precheck is True

    def test_environment_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("nuban_log_level", "DEBUG")

        config = NubanConfig(_env_file=None)

        assert config.log_level == "DEBUG"

    def test_reload_config(self, monkeypatch):
        original = get_config()
        monkeypatch.setenv("NUBAN_API_KEY", "sk_test_reloaded")

        try:
            reloaded = reload_config()
            assert reloaded.api_key == "sk_test_reloaded"
            assert get_config() is reloaded
        finally:
            config_module.config = original
