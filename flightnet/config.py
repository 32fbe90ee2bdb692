"""Environment-driven settings for the command line and web front ends."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    data_file: Optional[Path]
    log_level: str


def load_settings() -> Settings:
    """Read ``FLIGHTNET_*`` variables from the environment."""

    data_file = os.environ.get("FLIGHTNET_DATA_FILE")
    return Settings(
        data_file=Path(data_file) if data_file else None,
        log_level=os.environ.get("FLIGHTNET_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or load_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=_LOG_FORMAT)
