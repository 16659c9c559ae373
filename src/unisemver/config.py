# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserConfig:
    """Limits applied by :func:`unisemver.parse_version`.

    Attributes:
        max_core_digits: Digits allowed in each of major, minor and patch
        unicode_identifiers: Accept any Unicode letter or decimal digit in
            pre-release and build identifiers. When False only
            ``[0-9A-Za-z-]`` is accepted, as on semver.org, and major,
            minor and patch are restricted to ASCII ``[0-9]`` as well.
    """

    max_core_digits: int = 9
    unicode_identifiers: bool = True

    def __post_init__(self) -> None:
        if self.max_core_digits < 1:
            raise ValueError(f"max_core_digits must be at least 1, got {self.max_core_digits}")

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create configuration from environment variables."""
        kwargs = {}

        if max_digits := os.getenv("UNISEMVER_MAX_CORE_DIGITS"):
            kwargs["max_core_digits"] = int(max_digits)
            logger.debug("max_core_digits set to %s from environment", max_digits)

        if os.getenv("UNISEMVER_ASCII_ONLY", "").lower() == "true":
            kwargs["unicode_identifiers"] = False
            logger.debug("unicode identifiers disabled from environment")

        return cls(**kwargs)


DEFAULT_CONFIG = ParserConfig()
