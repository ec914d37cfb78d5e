#===============================================================================
#  UserApps_Pinboard | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Immutable runtime configuration, built once from USERAPPS_* environment
#  variables. Components receive it through their constructors. Invalid values
#  raise a pydantic ValidationError at startup.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import constants as C

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class AppConfig(BaseSettings):
    """Pinboard settings. Field `foo` is read from `USERAPPS_FOO`."""

    site_url: str = Field(default="", description="Absolute URL of the config site; empty = local JSON mode")
    catalog_list: str = "AllApps"
    user_list: str = "UserApps"
    management_page: str = "ManageApps.aspx"
    access_token: str = ""
    locale: str = "en-US"
    user_id: str = ""
    login_name: str = ""
    page_list_id: str = Field(default="", description="Current page's list id, for translation lookup")
    page_item_id: int = Field(default=0, ge=0)
    state_dir: Path = Field(default_factory=lambda: Path.home() / C.STATE_DIR_NAME)
    catalog_file: Optional[Path] = None
    log_level: LogLevel = "INFO"
    request_timeout: float = Field(default=C.REQUEST_TIMEOUT, gt=0)
    pin_settle_ms: int = Field(default=C.PIN_SETTLE_MS, ge=0)
    unpin_settle_ms: int = Field(default=C.UNPIN_SETTLE_MS, ge=0)
    search_debounce_ms: int = Field(default=C.SEARCH_DEBOUNCE_MS, ge=0)
    color_primary: str = C.COLOR_PRIMARY
    color_widget_text: str = C.COLOR_WIDGET_TEXT
    font_family: str = C.FONT_FAMILY

    model_config = SettingsConfigDict(
        env_prefix="USERAPPS_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("site_url", mode="before")
    @classmethod
    def _strip_site_url(cls, v: Any) -> Any:
        return v.strip().rstrip("/") if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("state_dir", "catalog_file", mode="after")
    @classmethod
    def _expand_user(cls, v: Optional[Path]) -> Optional[Path]:
        return v.expanduser() if v is not None else None

    @property
    def site_path(self) -> str:
        """Server-relative path of the config site, e.g. /sites/apps."""
        if not self.site_url:
            return ""
        rest = self.site_url.split("://", 1)[-1]
        _, _, path = rest.partition("/")
        return "/" + path.strip("/") if path else ""

    @property
    def catalog_list_url(self) -> str:
        return f"{self.site_path}/Lists/{self.catalog_list}"

    @property
    def user_list_url(self) -> str:
        return f"{self.site_path}/Lists/{self.user_list}"

    @property
    def management_url(self) -> str:
        if not self.site_url:
            return ""
        return f"{self.site_url}/SitePages/{self.management_page}"

    @property
    def logs_dir(self) -> Path:
        return self.state_dir / "logs"

    @property
    def user_apps_file(self) -> Path:
        return self.state_dir / C.USER_APPS_FILE_NAME

    @property
    def uses_sharepoint(self) -> bool:
        return bool(self.site_url)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Process-wide configuration, built on first use and never mutated."""
    return AppConfig()
