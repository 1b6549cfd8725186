"""Unit tests for configuration management."""

import pytest
from decimal import Decimal
from pathlib import Path

from fx_exchange.bootstrap import load_config
from fx_exchange.config.defaults import get_default_config
from fx_exchange.config.loader import ConfigLoader
from fx_exchange.config.validation import ConfigValidator
from fx_exchange.errors import ConfigurationError


def write_settings(config_dir: Path, text: str) -> Path:
    config_dir.mkdir(parents=True, exist_ok=True)
    settings = config_dir / "settings.yaml"
    settings.write_text(text)
    return config_dir


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()

        assert config.rates.reference_currency == "DKK"
        assert config.rates.currencies["EUR"] == {"name": "Euro", "rate": "743.94"}
        assert config.display.amount_places == 2
        assert config.display.converted_places == 4
        assert config.console.prompt == "> "
        assert config.logging.level == "WARNING"

    def test_default_rates_order(self) -> None:
        """Test the default table keeps its listing order."""
        config = get_default_config()

        assert list(config.rates.currencies) == ["EUR", "USD", "GBP", "SEK", "NOK", "CHF", "JPY", "DKK"]

    def test_defaults_are_valid(self) -> None:
        """Test the built-in defaults pass validation."""
        loader = ConfigLoader.create(Path("/nonexistent"))

        assert ConfigValidator.validate_config(loader.merge_config()) == []


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()

        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_missing_settings_file(self, tmp_path: Path) -> None:
        """Test an absent settings file means no overrides."""
        loader = ConfigLoader.create(tmp_path)

        assert loader.load_settings_file() == {}

    def test_empty_settings_file(self, tmp_path: Path) -> None:
        """Test a comment-only settings file means no overrides."""
        write_settings(tmp_path, "# nothing here\n")

        assert ConfigLoader.create(tmp_path).load_settings_file() == {}

    def test_settings_file_overrides_defaults(self, tmp_path: Path) -> None:
        """Test settings.yaml values override defaults."""
        write_settings(tmp_path, "display:\n  converted_places: 2\nconsole:\n  prompt: 'fx> '\n")

        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["display"]["converted_places"] == 2
        assert config["display"]["amount_places"] == 2
        assert config["console"]["prompt"] == "fx> "

    def test_settings_file_adds_currency(self, tmp_path: Path) -> None:
        """Test new currencies merge into the default table."""
        write_settings(tmp_path, "rates:\n  currencies:\n    ISK: {name: Islandske kroner, rate: '5.05'}\n")

        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["rates"]["currencies"]["ISK"] == {"name": "Islandske kroner", "rate": "5.05"}
        assert "EUR" in config["rates"]["currencies"]

    def test_overrides_take_precedence(self, tmp_path: Path) -> None:
        """Test explicit overrides beat the settings file."""
        write_settings(tmp_path, "display:\n  converted_places: 2\n")

        config = ConfigLoader.create(tmp_path).merge_config({"display": {"converted_places": 6}})

        assert config["display"]["converted_places"] == 6

    def test_merge_does_not_mutate_defaults(self, tmp_path: Path) -> None:
        """Test merging leaves the default rate mapping untouched."""
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config({"rates": {"currencies": {"ISK": {"name": "Islandske kroner", "rate": 5}}}})
        config["rates"]["currencies"]["EUR"]["rate"] = "1"

        assert "ISK" not in loader.defaults.rates.currencies
        assert loader.defaults.rates.currencies["EUR"]["rate"] == "743.94"

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Test unparseable YAML is a configuration error."""
        write_settings(tmp_path, "display: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_settings_file()

        assert exc_info.value.context["path"].endswith("settings.yaml")

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        """Test a top-level list is rejected."""
        write_settings(tmp_path, "- display\n- console\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_settings_file()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_rate_params(self) -> None:
        """Test validation of valid rate parameters."""
        params = {
            "reference_currency": "DKK",
            "currencies": {
                "DKK": {"name": "Danske kroner", "rate": 100},
                "EUR": {"name": "Euro", "rate": 743.94},
            },
        }

        assert ConfigValidator.validate_rate_params(params) == []

    @pytest.mark.parametrize("rate", [0, -1, "abc", None, True, "NaN"])
    def test_invalid_rate(self, rate) -> None:
        """Test rates must be positive numbers."""
        params = {
            "reference_currency": "DKK",
            "currencies": {
                "DKK": {"name": "Danske kroner", "rate": 100},
                "EUR": {"name": "Euro", "rate": rate},
            },
        }

        errors = ConfigValidator.validate_rate_params(params)

        assert len(errors) == 1
        assert errors[0].field == "currencies.EUR.rate"

    def test_missing_name(self) -> None:
        """Test every currency needs a display name."""
        params = {
            "reference_currency": "DKK",
            "currencies": {"DKK": {"name": "", "rate": 100}},
        }

        errors = ConfigValidator.validate_rate_params(params)

        assert [e.field for e in errors] == ["currencies.DKK.name"]

    def test_reference_missing_from_rates(self) -> None:
        """Test the reference currency must be listed."""
        params = {
            "reference_currency": "DKK",
            "currencies": {"EUR": {"name": "Euro", "rate": 743.94}},
        }

        errors = ConfigValidator.validate_rate_params(params)

        assert [e.field for e in errors] == ["reference_currency"]

    def test_reference_rate_must_be_hundred(self) -> None:
        """Test the reference currency is quoted at 100."""
        params = {
            "reference_currency": "DKK",
            "currencies": {"DKK": {"name": "Danske kroner", "rate": "99.5"}},
        }

        errors = ConfigValidator.validate_rate_params(params)

        assert len(errors) == 1
        assert errors[0].value == Decimal("99.5")

    def test_duplicate_codes_after_normalization(self) -> None:
        """Test codes differing only by case are duplicates."""
        params = {
            "reference_currency": "DKK",
            "currencies": {
                "DKK": {"name": "Danske kroner", "rate": 100},
                "eur": {"name": "Euro", "rate": 743.94},
                "EUR": {"name": "Euro", "rate": 743.94},
            },
        }

        errors = ConfigValidator.validate_rate_params(params)

        assert [e.message for e in errors] == ["Duplicate currency code"]

    def test_empty_currencies(self) -> None:
        """Test the rate table cannot be empty."""
        errors = ConfigValidator.validate_rate_params({"reference_currency": "DKK", "currencies": {}})

        assert [e.field for e in errors] == ["currencies"]

    @pytest.mark.parametrize("value", [-1, 1.5, "2", True])
    def test_invalid_display_places(self, value) -> None:
        """Test decimal places must be non-negative integers."""
        errors = ConfigValidator.validate_display_params({"amount_places": value})

        assert len(errors) == 1
        assert errors[0].field == "amount_places"

    def test_invalid_prompt(self) -> None:
        """Test the prompt must be text."""
        errors = ConfigValidator.validate_console_params({"prompt": 5})

        assert errors[0].field == "prompt"

    def test_invalid_logging(self) -> None:
        """Test log level and format flag."""
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})

        assert [e.field for e in errors] == ["level", "format_json"]

    def test_lowercase_log_level_accepted(self) -> None:
        """Test log levels are case-insensitive."""
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []

    def test_unknown_section(self) -> None:
        """Test unknown sections are reported before anything else."""
        errors = ConfigValidator.validate_config({"metrics": {}, "display": {"amount_places": -1}})

        assert [e.field for e in errors] == ["metrics"]

    def test_unknown_field(self) -> None:
        """Test unknown fields inside a known section."""
        errors = ConfigValidator.validate_config({"display": {"decimals": 3}})

        assert [e.field for e in errors] == ["display.decimals"]

    def test_section_must_be_mapping(self) -> None:
        """Test sections are mappings."""
        errors = ConfigValidator.validate_config({"console": "> "})

        assert errors[0].message == "Must be a mapping"


class TestLoadConfig:
    """Test validated configuration loading."""

    def test_valid_configuration(self, tmp_path: Path) -> None:
        """Test a valid configuration is returned merged."""
        config = load_config(tmp_path, {"logging": {"level": "DEBUG"}})

        assert config["logging"]["level"] == "DEBUG"

    def test_invalid_configuration_raises(self, tmp_path: Path) -> None:
        """Test invalid settings stop startup with every error listed."""
        write_settings(tmp_path, "display:\n  amount_places: -1\nlogging:\n  level: LOUD\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.message.startswith("Invalid configuration: ")
        assert [e.field for e in exc_info.value.errors] == ["amount_places", "level"]
