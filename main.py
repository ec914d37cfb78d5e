#===============================================================================
#  UserApps_Pinboard  |  Personal App Pinboard for the Site Header
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Adds a "My apps" menu to a portal site header. Users pin apps from a shared,
#  localized catalog, reorder them by drag & drop, and the order follows them
#  across pages.
#  Supports:
#    - SharePoint lists as catalog and per-user store (USERAPPS_SITE_URL)
#    - Local JSON catalog + store when no site is configured
#    - Mounting into a host that renders its header late (no polling)
#    - Collapsible ("shy") header copy gets its own mount
#
#  Folder Conventions
#  ------------------
#    ~/.userapps/
#      - catalog.json                      -> local catalog (demo data on first run)
#      - user_apps.json                    -> pinned ids per user
#      - logs/userapps.log                 -> rotating log
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#===============================================================================

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from userapps.config import get_config
from userapps.context import build_context
from userapps.demo_host import DemoHostWindow, ensure_demo_catalog
from userapps.extension import UserAppsExtension
from userapps.logs import setup_logging

log = logging.getLogger("userapps.main")


def main() -> int:
    config = get_config()
    log_file = setup_logging(config)
    log.info("Starting, log file %s", log_file)

    if not config.uses_sharepoint and config.catalog_file is None:
        ensure_demo_catalog(config.state_dir / "catalog.json")

    app = QApplication(sys.argv)
    ctx = build_context(config)

    host = DemoHostWindow()
    extension = UserAppsExtension(ctx, host, host.events, parent=host)
    extension.attach()

    host.resize(1000, 720)
    host.show()
    host.navigate()

    try:
        return app.exec()
    finally:
        extension.detach()


if __name__ == "__main__":
    sys.exit(main())
