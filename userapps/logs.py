#===============================================================================
#  UserApps_Pinboard | logs.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Logging setup. Full log goes to <state_dir>/logs/userapps.log, warnings and
#  errors also go to the console.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .config import AppConfig
from .constants import LOG_FILE_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def setup_logging(config: AppConfig) -> Path:
    """Install file + console handlers on the package logger. Safe to call twice."""
    global _configured

    log_path = config.logs_dir / LOG_FILE_NAME
    if _configured:
        return log_path

    config.logs_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, config.log_level, logging.INFO)

    logger = logging.getLogger("userapps")
    logger.setLevel(level)

    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(console_handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _configured = True
    logger.info("Logging initialized (%s)", log_path)
    return log_path
