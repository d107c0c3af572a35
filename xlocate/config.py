#!/usr/bin/env python3
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ["true", "1", "yes"]


@dataclass
class LocatorConfig:
    """Locator configuration"""
    # Quote-safe literals in built queries; false reproduces raw '...' wrapping
    escape_literals: bool = True
    # INFO line when a minimum-count locator sees too few matches
    log_under_threshold: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> 'LocatorConfig':
        """Create config from environment variables"""
        return cls(
            escape_literals=_env_flag("XLOCATE_ESCAPE_LITERALS", "true"),
            log_under_threshold=_env_flag("XLOCATE_LOG_UNDER_THRESHOLD", "true"),
            log_level=os.getenv("XLOCATE_LOG_LEVEL", "INFO").upper(),
        )


config = LocatorConfig.from_env()
