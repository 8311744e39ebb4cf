#!/usr/bin/env python3
"""
Application bootstrap utilities.

Provides shared, UI-agnostic setup for logging.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from instantsearch_core.core.config import SearchConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: SearchConfig | None = None) -> int:
    """
    Configure root logging for a search session.

    Returns:
        The log level that was applied.

    """
    level = logging.DEBUG if config is not None and config.debug_logging else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
