"""Plugin configuration value passed into every enablement check."""

from typing import Literal

from pydantic import BaseModel


class PluginConfiguration(BaseModel):
    """
    Snapshot of the stored plugin options relevant to method enablement.

    Attributes:
        enabled: Raw "enabled" option. Only "yes" turns the plugin on;
            "no" and "" (never saved) both mean disabled.
        accepted_methods: Method ids the merchant accepts, in display order.
        test_mode: Whether the processor account runs in test mode.
        capture: "yes" captures charges immediately, "no" only authorizes
            them for a later manual capture.
    """

    enabled: str = ""
    accepted_methods: tuple[str, ...] = ()
    test_mode: bool = False
    capture: Literal["yes", "no"] = "yes"

    model_config = {"frozen": True}

    @property
    def is_plugin_enabled(self) -> bool:
        return self.enabled == "yes"

    @property
    def is_manual_capture(self) -> bool:
        return self.capture == "no"

    @classmethod
    def disabled(cls) -> "PluginConfiguration":
        """Configuration used when no options have been stored yet."""
        return cls(enabled="no")
