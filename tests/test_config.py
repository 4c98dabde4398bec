"""Tests for settings and plugin option loading."""

import logging

import pytest
from pydantic import ValidationError

from checkout_eligibility.config import (
    ACCEPTED_METHODS_OPTION,
    Settings,
    configure_logging,
    load_plugin_configuration,
    parse_plugin_options,
)
from checkout_eligibility.engine.eligibility import is_enabled
from checkout_eligibility.engine.errors import ConfigurationMissing
from checkout_eligibility.methods.registry import get_descriptor


class TestParsePluginOptions:
    def test_full_options(self):
        config = parse_plugin_options({
            "enabled": "yes",
            ACCEPTED_METHODS_OPTION: ["card", "link"],
            "testmode": "yes",
            "capture": "no",
        })
        assert config.is_plugin_enabled
        assert config.accepted_methods == ("card", "link")
        assert config.test_mode is True
        assert config.is_manual_capture

    def test_defaults_for_unsaved_options(self):
        config = parse_plugin_options({})
        assert config.enabled == ""
        assert not config.is_plugin_enabled
        assert config.accepted_methods == ()
        assert config.test_mode is False
        assert config.capture == "yes"

    def test_accepted_methods_deduplicated_in_order(self):
        config = parse_plugin_options({ACCEPTED_METHODS_OPTION: ["link", "", "card", "link"]})
        assert config.accepted_methods == ("link", "card")

    def test_accepted_methods_with_removed_entries(self):
        config = parse_plugin_options({
            "enabled": "yes",
            ACCEPTED_METHODS_OPTION: {"0": "card", "2": "link"},
        })
        assert config.accepted_methods == ("card", "link")
        assert is_enabled(get_descriptor("link"), config)

    def test_unexpected_capture_value_means_immediate(self):
        assert parse_plugin_options({"capture": "sometimes"}).capture == "yes"

    def test_missing_options_raise(self):
        with pytest.raises(ConfigurationMissing):
            parse_plugin_options(None)

    def test_configuration_is_frozen(self):
        config = parse_plugin_options({"enabled": "yes"})
        with pytest.raises(ValidationError):
            config.enabled = "no"


class TestLoadPluginConfiguration:
    def test_missing_options_disable_plugin(self, caplog):
        with caplog.at_level(logging.WARNING, logger="checkout_eligibility.config"):
            config = load_plugin_configuration(None)

        assert not config.is_plugin_enabled
        assert not is_enabled(get_descriptor("card"), config)
        assert "treating plugin as disabled" in caplog.text

    def test_stored_options_pass_through(self):
        config = load_plugin_configuration({"enabled": "yes", ACCEPTED_METHODS_OPTION: ["card"]})
        assert is_enabled(get_descriptor("card"), config)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("LOG_LEVEL", "PLUGIN_ENABLED", "ACCEPTED_METHODS", "TEST_MODE", "CAPTURE"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.accepted_methods == ["card"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PLUGIN_ENABLED", "yes")
        monkeypatch.setenv("ACCEPTED_METHODS", '["card", "sepa_debit"]')
        monkeypatch.setenv("CAPTURE", "no")

        config = parse_plugin_options(Settings(_env_file=None).to_plugin_options())

        assert config.is_plugin_enabled
        assert config.accepted_methods == ("card", "sepa_debit")
        assert config.is_manual_capture


class TestConfigureLogging:
    def test_level_and_format(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("debug")

        assert calls[0]["level"] == logging.DEBUG
        assert "%(name)s" in calls[0]["format"]

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("chatty")

        assert calls[0]["level"] == logging.INFO
