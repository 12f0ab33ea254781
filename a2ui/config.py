"""
Protocol configuration

Controls how the encoder frames and serializes messages. Values come from
defaults or from A2UI_* environment variables.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "v0.9"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

_cached_config: Optional["ProtocolConfig"] = None


def _parse_bool(name: str, raw: str, default: bool) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid boolean %s=%r, using %s", name, raw, default)
    return default


@dataclass(frozen=True)
class ProtocolConfig:
    """
    Encoder configuration

    - version: value of the "version" field stamped on every message
    - ensure_ascii: escape non-ASCII characters in the JSON output
    - warn_on_duplicate_ids: log a warning when a surface reuses a component id
    """
    version: str = PROTOCOL_VERSION
    ensure_ascii: bool = False
    warn_on_duplicate_ids: bool = True

    @classmethod
    def default(cls) -> "ProtocolConfig":
        return cls()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProtocolConfig":
        """
        Build a config from environment variables

        - A2UI_PROTOCOL_VERSION
        - A2UI_ENSURE_ASCII
        - A2UI_WARN_DUPLICATE_IDS
        """
        env = os.environ if environ is None else environ
        base = cls()

        version = env.get("A2UI_PROTOCOL_VERSION") or base.version
        ensure_ascii = base.ensure_ascii
        warn_on_duplicate_ids = base.warn_on_duplicate_ids

        if "A2UI_ENSURE_ASCII" in env:
            ensure_ascii = _parse_bool("A2UI_ENSURE_ASCII", env["A2UI_ENSURE_ASCII"], ensure_ascii)
        if "A2UI_WARN_DUPLICATE_IDS" in env:
            warn_on_duplicate_ids = _parse_bool(
                "A2UI_WARN_DUPLICATE_IDS", env["A2UI_WARN_DUPLICATE_IDS"], warn_on_duplicate_ids
            )

        return cls(
            version=version,
            ensure_ascii=ensure_ascii,
            warn_on_duplicate_ids=warn_on_duplicate_ids,
        )


def get_config() -> ProtocolConfig:
    """Process-wide config, read from the environment on first use"""
    global _cached_config
    if _cached_config is None:
        _cached_config = ProtocolConfig.from_env()
    return _cached_config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment"""
    global _cached_config
    _cached_config = None


__all__ = ["PROTOCOL_VERSION", "ProtocolConfig", "get_config", "reset_config"]
