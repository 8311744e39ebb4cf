#!/usr/bin/env python3
"""Search configuration settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from instantsearch_core.core.exceptions import ConfigurationError, ErrorCodes

logger = logging.getLogger(__name__)

ENV_INDEX = "INSTANTSEARCH_INDEX"
ENV_MODE = "INSTANTSEARCH_ENV"
ENV_DEBUG = "INSTANTSEARCH_DEBUG"

DEVELOPMENT_MODE = "development"


@dataclass
class SearchConfig:
    """Settings shared by every binding of one search session."""

    # Index used by widgets that are not nested under an IndexContext
    main_targeted_index: str = ""

    # Development mode turns on usage warnings for connector descriptions
    development_mode: bool = False
    debug_logging: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.main_targeted_index, str):
            msg = f"main_targeted_index must be a string, got {type(self.main_targeted_index).__name__}"
            logger.error(msg)
            raise ConfigurationError(msg, ErrorCodes.CONFIG_INVALID, {"main_targeted_index": self.main_targeted_index})

    @classmethod
    def from_env(cls) -> SearchConfig:
        """Build a configuration from INSTANTSEARCH_* environment variables."""
        return cls(
            main_targeted_index=os.getenv(ENV_INDEX, ""),
            development_mode=os.getenv(ENV_MODE, "").lower() == DEVELOPMENT_MODE,
            debug_logging=bool(os.getenv(ENV_DEBUG)),
        )
