#===============================================================================
#  UserApps_Pinboard | context.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  AppContext: everything a mounted widget tree needs (config, stores, writer,
#  user, language, strings), built once and passed down explicitly.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import getpass
import logging
from dataclasses import dataclass
from typing import Optional

from .config import AppConfig
from .models import LanguageInfo
from .persistence import PersistWorker
from .sharepoint import SharePointClient
from .store import CatalogSource, JsonCatalogSource, JsonUserAppStore, UserAppStore
from .strings import StringTable, builtin_strings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContext:
    config: AppConfig
    catalog_source: CatalogSource
    store: UserAppStore
    persister: PersistWorker
    user_id: str
    language: LanguageInfo
    strings: StringTable

    def text(self, key: str) -> str:
        return self.strings.get(key, self.language.dashed)


def resolve_user_id(config: AppConfig) -> str:
    """Login name for SharePoint, otherwise the configured or OS user."""
    if config.login_name:
        return config.login_name
    if config.user_id:
        return config.user_id
    try:
        return getpass.getuser()
    except Exception:
        return "local"


def build_context(
    config: AppConfig,
    strings: Optional[StringTable] = None,
    language: Optional[LanguageInfo] = None,
) -> AppContext:
    """SharePoint-backed when USERAPPS_SITE_URL is set, local JSON files otherwise."""
    if config.uses_sharepoint:
        client = SharePointClient(config)
        catalog_source: CatalogSource = client
        store: UserAppStore = client
        log.info("Using SharePoint site %s", config.site_url)
    else:
        catalog_path = config.catalog_file or (config.state_dir / "catalog.json")
        catalog_source = JsonCatalogSource(catalog_path)
        store = JsonUserAppStore(config.user_apps_file)
        log.info("Using local catalog %s", catalog_path)

    if language is None and config.uses_sharepoint and config.page_list_id and config.page_item_id:
        language = client.resolve_page_language(config.page_list_id, config.page_item_id, config.locale)

    user_id = resolve_user_id(config)
    return AppContext(
        config=config,
        catalog_source=catalog_source,
        store=store,
        persister=PersistWorker(store, user_id),
        user_id=user_id,
        language=language or LanguageInfo.from_code(config.locale),
        strings=strings or builtin_strings(),
    )
