#===============================================================================
#  UserApps_Pinboard | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Opens app links and the management page in the user's browser.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import webbrowser

log = logging.getLogger(__name__)


def open_link(url: str) -> bool:
    """Open `url` in the default browser. Empty links are ignored."""
    if not url:
        return False
    log.info("Opening %s", url)
    return bool(webbrowser.open(url))
