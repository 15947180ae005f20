"""Configuration management for the allocation API."""

import os

from dotenv import load_dotenv

# Load environment variables from .env if present (non-fatal when missing)
load_dotenv()

# Bounds for the alpha sweep grid size
MIN_SWEEP_STEPS = 2
MAX_SWEEP_STEPS = 101


class Settings:
    """Application settings sourced from environment variables."""

    def __init__(self) -> None:
        # Optimizer defaults
        self.default_alpha = min(max(self._get_float("DEFAULT_ALPHA", 0.5), 0.0), 1.0)
        self.sweep_steps = min(
            max(self._get_int("SWEEP_STEPS", 11), MIN_SWEEP_STEPS), MAX_SWEEP_STEPS
        )
        self.max_items = max(self._get_int("MAX_ITEMS", 500), 1)

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_file = os.getenv("LOG_FILE") or None

        # Flags
        self.debug = self._get_bool("DEBUG", False)

    @staticmethod
    def _get_bool(name: str, default: bool) -> bool:
        value = os.getenv(name)
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    @staticmethod
    def _get_float(name: str, default: float) -> float:
        value = os.getenv(name)
        if value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _get_int(name: str, default: int) -> int:
        value = os.getenv(name)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default


# Global settings instance
settings = Settings()
