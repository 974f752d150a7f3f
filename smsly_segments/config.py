"""
Segmenter Configuration
=======================
Default analysis options, optionally loaded from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .encoding import ENCODING_CHOICES
from .exceptions import ConfigurationError
from .line_breaks import LINE_BREAK_HINTS

ENV_PREFIX = "SMS_SEGMENTS_"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got '{value}'")


@dataclass(frozen=True)
class SegmenterConfig:
    """Defaults used by analyze() when an option is not passed explicitly."""
    smart_encoding: bool = False
    line_break_style: str = "auto"
    encoding: str = "auto"
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self):
        if self.line_break_style not in LINE_BREAK_HINTS:
            raise ConfigurationError(
                f"line_break_style must be one of {LINE_BREAK_HINTS}, got '{self.line_break_style}'"
            )
        if self.encoding not in ENCODING_CHOICES:
            raise ConfigurationError(
                f"encoding must be one of {ENCODING_CHOICES}, got '{self.encoding}'"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SegmenterConfig":
        """
        Load configuration from environment variables.

        Recognized variables (all optional):
            SMS_SEGMENTS_SMART_ENCODING, SMS_SEGMENTS_LINE_BREAK_STYLE,
            SMS_SEGMENTS_ENCODING, SMS_SEGMENTS_LOG_LEVEL, SMS_SEGMENTS_LOG_JSON
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(key: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{key}")

        smart_encoding = get("SMART_ENCODING")
        log_json = get("LOG_JSON")
        return cls(
            smart_encoding=(
                _parse_bool(f"{ENV_PREFIX}SMART_ENCODING", smart_encoding)
                if smart_encoding is not None else defaults.smart_encoding
            ),
            line_break_style=get("LINE_BREAK_STYLE") or defaults.line_break_style,
            encoding=get("ENCODING") or defaults.encoding,
            log_level=(get("LOG_LEVEL") or defaults.log_level).upper(),
            log_json=(
                _parse_bool(f"{ENV_PREFIX}LOG_JSON", log_json)
                if log_json is not None else defaults.log_json
            ),
        )


DEFAULT_CONFIG = SegmenterConfig()
