"""Application configuration via environment variables, and plugin option loading."""

import logging
from typing import Any, Mapping, Optional

from pydantic_settings import BaseSettings

from checkout_eligibility.engine.errors import ConfigurationMissing
from checkout_eligibility.models.configuration import PluginConfiguration

logger = logging.getLogger("checkout_eligibility.config")

# Keys of the stored plugin options mapping.
ENABLED_OPTION = "enabled"
ACCEPTED_METHODS_OPTION = "upe_checkout_experience_accepted_payments"
TEST_MODE_OPTION = "testmode"
CAPTURE_OPTION = "capture"


class Settings(BaseSettings):
    log_level: str = "INFO"
    plugin_enabled: str = ""  # "yes" | "no" | "" (never saved)
    accepted_methods: list[str] = ["card"]
    test_mode: bool = False
    capture: str = "yes"  # "no" = authorize only, capture manually

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def to_plugin_options(self) -> dict[str, Any]:
        """Settings expressed as a stored plugin options mapping."""
        return {
            ENABLED_OPTION: self.plugin_enabled,
            ACCEPTED_METHODS_OPTION: list(self.accepted_methods),
            TEST_MODE_OPTION: "yes" if self.test_mode else "no",
            CAPTURE_OPTION: self.capture,
        }


settings = Settings()


def configure_logging(log_level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (log_level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _is_yes(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("yes", "true", "1")


def parse_plugin_options(options: Optional[Mapping[str, Any]]) -> PluginConfiguration:
    """
    Build a PluginConfiguration from the stored plugin options.

    Individual options that were never saved fall back to their defaults
    (plugin disabled, no accepted methods, live mode, immediate capture).

    Raises:
        ConfigurationMissing: If no options have been stored at all.
    """
    if options is None:
        raise ConfigurationMissing()

    accepted = options.get(ACCEPTED_METHODS_OPTION) or []
    if isinstance(accepted, str):
        accepted = [accepted]
    elif isinstance(accepted, Mapping):
        # Lists with removed entries are stored keyed by their old positions.
        accepted = list(accepted.values())

    return PluginConfiguration(
        enabled=str(options.get(ENABLED_OPTION) or ""),
        # Stored lists may have gaps or duplicates after methods were removed.
        accepted_methods=tuple(dict.fromkeys(m for m in accepted if m)),
        test_mode=_is_yes(options.get(TEST_MODE_OPTION, False)),
        capture="no" if str(options.get(CAPTURE_OPTION, "yes")).strip().lower() == "no" else "yes",
    )


def load_plugin_configuration(options: Optional[Mapping[str, Any]]) -> PluginConfiguration:
    """Like parse_plugin_options, but treats missing options as a disabled plugin."""
    try:
        return parse_plugin_options(options)
    except ConfigurationMissing as e:
        logger.warning("%s; treating plugin as disabled", e)
        return PluginConfiguration.disabled()
