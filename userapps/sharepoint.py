#===============================================================================
#  UserApps_Pinboard | sharepoint.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  SharePoint REST I/O: catalog list read, per-user record read/write and
#  page language lookup.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from .config import AppConfig
from .constants import (
    DEFAULT_LOCALE,
    FIELD_LANGUAGE,
    FIELD_USER,
    FIELD_USER_APPS,
    FIELD_USER_ID,
)
from .errors import StoreError
from .models import CatalogEntry, LanguageInfo, UserAppRecord, join_ids
from .store import CatalogSource, UserAppStore

log = logging.getLogger(__name__)

# NOTE:
# - This module only does HTTP. Ordering, dedup and repair live in catalog.py.
# - Calls are blocking; run them off the UI thread (see loader.py / persistence.py).


def _odata_quote(value: str) -> str:
    return (value or "").replace("'", "''")


def catalog_filter(locale: str) -> str:
    if locale:
        return f"{FIELD_LANGUAGE} eq '{_odata_quote(locale)}' or {FIELD_LANGUAGE} eq '{DEFAULT_LOCALE}'"
    return f"{FIELD_LANGUAGE} eq '{DEFAULT_LOCALE}'"


class SharePointClient(CatalogSource, UserAppStore):
    def __init__(self, config: AppConfig, session: Optional[requests.Session] = None):
        if not config.site_url:
            raise StoreError("USERAPPS_SITE_URL is not configured")
        self.config = config
        self.site_url = config.site_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json;odata=nometadata",
            "Content-Type": "application/json;odata=nometadata",
        })
        if config.access_token:
            self.session.headers["Authorization"] = f"Bearer {config.access_token}"
        self._user_ids: Dict[str, int] = {}

    # ----------------------------
    # HTTP helpers
    # ----------------------------
    def _list_api(self, list_url: str) -> str:
        return f"{self.site_url}/_api/web/GetList('{_odata_quote(list_url)}')"

    def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            r = self.session.request(method, url, timeout=self.config.request_timeout, **kwargs)
            r.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise StoreError(f"HTTP error: {e}") from e
        except requests.exceptions.RequestException as e:
            raise StoreError(f"Network error: {e}") from e
        if not r.content:
            return {}
        try:
            return r.json()
        except ValueError as e:
            raise StoreError(f"Invalid JSON from {url}") from e

    @staticmethod
    def _rows(data: Any) -> List[Dict[str, Any]]:
        if isinstance(data, dict):
            rows = data.get("value", [])
            return rows if isinstance(rows, list) else []
        return []

    # ----------------------------
    # Catalog
    # ----------------------------
    def fetch_catalog(self, locale: str) -> List[CatalogEntry]:
        data = self._request(
            "GET",
            f"{self._list_api(self.config.catalog_list_url)}/items",
            params={"$filter": catalog_filter(locale)},
        )
        entries = [CatalogEntry.from_list_item(row) for row in self._rows(data)]
        return [e for e in entries if e.id]

    # ----------------------------
    # User record
    # ----------------------------
    def ensure_user(self, login_name: str) -> int:
        """Resolve a login name to the site user id (cached per client)."""
        if login_name in self._user_ids:
            return self._user_ids[login_name]
        data = self._request(
            "POST",
            f"{self.site_url}/_api/web/ensureuser",
            json={"logonName": login_name},
        )
        user_id = data.get("Id") if isinstance(data, dict) else None
        if user_id is None:
            raise StoreError(f"ensureuser returned no id for {login_name}")
        self._user_ids[login_name] = int(user_id)
        return int(user_id)

    def _find_record(self, site_user_id: int) -> Optional[Dict[str, Any]]:
        data = self._request(
            "GET",
            f"{self._list_api(self.config.user_list_url)}/items",
            params={
                "$select": f"Id,{FIELD_USER_APPS}",
                "$filter": f"{FIELD_USER} eq '{site_user_id}'",
                "$top": "1",
            },
        )
        rows = self._rows(data)
        return rows[0] if len(rows) == 1 else None

    def read_record(self, user_id: str) -> UserAppRecord:
        site_user_id = self.ensure_user(user_id)
        row = self._find_record(site_user_id)
        if not row:
            return UserAppRecord(user_id=user_id)
        return UserAppRecord.parse(user_id, row.get(FIELD_USER_APPS))

    def write_ids(self, user_id: str, ordered_ids: Sequence[str]) -> None:
        site_user_id = self.ensure_user(user_id)
        row = self._find_record(site_user_id)
        items_url = f"{self._list_api(self.config.user_list_url)}/items"
        payload = {FIELD_USER_APPS: join_ids(ordered_ids)}

        if row:
            self._request(
                "POST",
                f"{items_url}({row['Id']})",
                json=payload,
                headers={"X-HTTP-Method": "MERGE", "IF-MATCH": "*"},
            )
            log.debug("Updated user record %s (%d ids)", row["Id"], len(ordered_ids))
            return

        payload[FIELD_USER_ID] = site_user_id
        self._request("POST", items_url, json=payload)
        log.debug("Created user record for %s", user_id)

    # ----------------------------
    # Page language
    # ----------------------------
    def resolve_page_language(self, list_id: str, item_id: int, default_locale: str) -> LanguageInfo:
        """Translation pages carry their own language; anything else uses the default."""
        try:
            data = self._request(
                "GET",
                f"{self.site_url}/_api/web/lists(guid'{_odata_quote(list_id)}')/items({int(item_id)})",
                params={"$select": "OData__SPIsTranslation,OData__SPTranslationLanguage"},
            )
        except StoreError as e:
            log.info("Page language lookup failed, using default locale: %s", e)
            return LanguageInfo.from_code(default_locale)

        if not data.get("OData__SPIsTranslation") or not data.get("OData__SPTranslationLanguage"):
            return LanguageInfo.from_code(default_locale)
        return LanguageInfo.from_code(data["OData__SPTranslationLanguage"])
