"""
Stealth Address Kit Configuration

Dataclass configuration with environment overrides and JSON persistence.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from stealth_kit.constants import (
    DEFAULT_CURVE,
    ENV_CURVES,
    ENV_DEFAULT_CURVE,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
)
from stealth_kit.curves import available_curves

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers installed by setup_logging, replaced on the next call
_installed_handlers: List[logging.Handler] = []


# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    fmt: str = LOG_FORMAT,
) -> logging.Logger:
    """
    Configure package logging with optional file rotation.

    Repeated calls replace the handlers of the previous call.
    """
    root = logging.getLogger("stealth_kit")
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt, datefmt=LOG_DATE_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    # File handler (optional)
    if log_file:
        file_handler = RotatingFileHandler(
            log_file, maxBytes=50*1024*1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    return root


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = LOG_FORMAT

    def apply(self) -> logging.Logger:
        return setup_logging(self.level, self.file, self.format)


@dataclass
class StealthConfig:
    """
    Package configuration.

    Selects the default curve and which curves get boundary bindings.
    """
    default_curve: str = DEFAULT_CURVE
    enabled_curves: List[str] = field(default_factory=available_curves)
    log: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def from_env(cls) -> StealthConfig:
        """Build configuration from STEALTH_KIT_* environment variables."""
        config = cls()
        if os.getenv(ENV_DEFAULT_CURVE):
            config.default_curve = os.environ[ENV_DEFAULT_CURVE].strip().lower()
        if os.getenv(ENV_CURVES):
            config.enabled_curves = [
                c.strip().lower() for c in os.environ[ENV_CURVES].split(",") if c.strip()
            ]
        if os.getenv(ENV_LOG_LEVEL):
            config.log.level = os.environ[ENV_LOG_LEVEL].strip().upper()
        if os.getenv(ENV_LOG_FILE):
            config.log.file = os.environ[ENV_LOG_FILE]
        return config

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        known = available_curves()

        if self.default_curve not in known:
            errors.append(f"Unknown default curve: {self.default_curve}")

        if not self.enabled_curves:
            errors.append("enabled_curves cannot be empty")
        for curve in self.enabled_curves:
            if curve not in known:
                errors.append(f"Unknown curve: {curve}")

        if self.default_curve not in self.enabled_curves:
            errors.append(f"Default curve {self.default_curve} is not enabled")

        if self.log.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid log level: {self.log.level}")

        return errors

    def save(self, path: str) -> None:
        """Save configuration to file."""
        Path(path).write_text(json.dumps(asdict(self), indent=2))
        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> StealthConfig:
        """Load configuration from file."""
        data = json.loads(Path(path).read_text())
        return cls(
            default_curve=data.get("default_curve", DEFAULT_CURVE),
            enabled_curves=data.get("enabled_curves") or available_curves(),
            log=LogConfig(**data.get("log", {})),
        )


_active_config: Optional[StealthConfig] = None


def get_config() -> StealthConfig:
    """Get the active configuration, reading the environment on first use."""
    global _active_config
    if _active_config is None:
        _active_config = StealthConfig.from_env()
    return _active_config


def set_config(config: StealthConfig) -> None:
    """Replace the active configuration."""
    global _active_config
    _active_config = config
