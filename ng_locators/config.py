import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SessionConfig:
    """Configuration for a browser session using the Angular locators."""
    headless: bool = True
    page_load_timeout: float = 10.0
    parse_delay: float = 0.0

    def __post_init__(self):
        if self.page_load_timeout <= 0:
            raise ValueError("page_load_timeout must be positive")
        if self.parse_delay < 0:
            raise ValueError("parse_delay must not be negative")

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Create configuration from environment variables."""
        try:
            return cls(
                headless=_env_flag("NG_LOCATORS_HEADLESS", True),
                page_load_timeout=float(os.environ.get("NG_LOCATORS_PAGE_LOAD_TIMEOUT", 10.0)),
                parse_delay=float(os.environ.get("NG_LOCATORS_PARSE_DELAY", 0.0)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid session configuration in environment: {e}") from e
