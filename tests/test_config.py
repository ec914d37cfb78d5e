from pathlib import Path

import pytest
from pydantic import ValidationError

from userapps.config import AppConfig, get_config
from userapps.constants import PIN_SETTLE_MS, REQUEST_TIMEOUT, SEARCH_DEBOUNCE_MS


def test_defaults_without_environment():
    cfg = AppConfig()

    assert cfg.site_url == ""
    assert cfg.uses_sharepoint is False
    assert cfg.pin_settle_ms == PIN_SETTLE_MS
    assert cfg.search_debounce_ms == SEARCH_DEBOUNCE_MS
    assert cfg.request_timeout == REQUEST_TIMEOUT
    assert cfg.catalog_file is None
    assert cfg.management_url == ""
    assert cfg.log_level == "INFO"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("USERAPPS_SITE_URL", "https://contoso.sharepoint.com/sites/apps/")
    monkeypatch.setenv("USERAPPS_CATALOG_LIST", "Catalog")
    monkeypatch.setenv("USERAPPS_LOCALE", "de-DE")
    monkeypatch.setenv("USERAPPS_STATE_DIR", str(tmp_path))
    monkeypatch.setenv("USERAPPS_PIN_SETTLE_MS", "10")
    monkeypatch.setenv("USERAPPS_PAGE_ITEM_ID", "12")
    monkeypatch.setenv("USERAPPS_LOG_LEVEL", "debug")
    monkeypatch.setenv("USERAPPS_REQUEST_TIMEOUT", "3.5")

    cfg = AppConfig()

    assert cfg.site_url == "https://contoso.sharepoint.com/sites/apps"
    assert cfg.uses_sharepoint is True
    assert cfg.site_path == "/sites/apps"
    assert cfg.catalog_list_url == "/sites/apps/Lists/Catalog"
    assert cfg.user_list_url == "/sites/apps/Lists/UserApps"
    assert cfg.management_url == "https://contoso.sharepoint.com/sites/apps/SitePages/ManageApps.aspx"
    assert cfg.locale == "de-DE"
    assert cfg.state_dir == Path(tmp_path)
    assert cfg.logs_dir == Path(tmp_path) / "logs"
    assert cfg.pin_settle_ms == 10
    assert cfg.page_item_id == 12
    assert cfg.log_level == "DEBUG"
    assert cfg.request_timeout == 3.5


def test_empty_variables_keep_defaults(monkeypatch):
    monkeypatch.setenv("USERAPPS_PIN_SETTLE_MS", "")
    monkeypatch.setenv("USERAPPS_SITE_URL", "")

    cfg = AppConfig()

    assert cfg.pin_settle_ms == PIN_SETTLE_MS
    assert cfg.uses_sharepoint is False


# Bad values stop startup instead of silently falling back to defaults
@pytest.mark.parametrize("name,value", [
    ("USERAPPS_PIN_SETTLE_MS", "abc"),
    ("USERAPPS_REQUEST_TIMEOUT", "ten"),
    ("USERAPPS_REQUEST_TIMEOUT", "0"),
    ("USERAPPS_LOG_LEVEL", "LOUD"),
    ("USERAPPS_SEARCH_DEBOUNCE_MS", "-5"),
])
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        AppConfig()


def test_config_is_frozen():
    cfg = AppConfig()

    with pytest.raises(ValidationError):
        cfg.locale = "fr-FR"


def test_root_site_has_empty_path():
    cfg = AppConfig(site_url="https://contoso.sharepoint.com")

    assert cfg.site_path == ""
    assert cfg.catalog_list_url == "/Lists/AllApps"


def test_get_config_is_built_once(monkeypatch):
    get_config.cache_clear()
    monkeypatch.setenv("USERAPPS_LOCALE", "it-IT")
    try:
        first = get_config()
        monkeypatch.setenv("USERAPPS_LOCALE", "fr-FR")
        assert get_config() is first
        assert first.locale == "it-IT"
    finally:
        get_config.cache_clear()
