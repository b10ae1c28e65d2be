"""
Logging setup driven by ``Settings``.

Records go to the console and, when ``settings.log_file`` is set, to
that file as well.  ``logging.basicConfig`` leaves an already
configured root logger alone, so repeated ``create_app`` calls (tests,
reloaders) do not stack handlers.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings.log_level`` and ``settings.log_file``."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8", delay=True))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
