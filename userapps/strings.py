#===============================================================================
#  UserApps_Pinboard | strings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  UI strings keyed by locale with a declared default table.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Dict, Mapping

from .errors import MissingTranslationError

DEFAULT_TABLE = "default"

MY_APPLICATIONS_TITLE = "MyApplicationsTitle"
ALL_APPLICATIONS_TITLE = "AllApplicationsTitle"
MY_APPLICATIONS_BUTTON = "MyApplicationsButton"
MANAGE_USER_APPS = "ManageUserApps"
NO_APPLICATIONS_PINNED = "NoApplicationsPinned"
NO_APPLICATIONS_FOUND = "NoApplicationsFound"
NO_APPLICATIONS_AVAILABLE = "NoApplicationsAvailable"
SEARCH_BOX_PLACEHOLDER = "SearchBoxPlaceholder"
PIN_SCREENREADER_TEXT = "PinScreenreaderText"
UNPIN_SCREENREADER_TEXT = "UnpinScreenreaderText"

BUILTIN_STRINGS: Dict[str, Dict[str, str]] = {
    DEFAULT_TABLE: {
        MY_APPLICATIONS_TITLE: "My applications",
        ALL_APPLICATIONS_TITLE: "All applications",
        MY_APPLICATIONS_BUTTON: "My apps",
        MANAGE_USER_APPS: "Manage my applications",
        NO_APPLICATIONS_PINNED: "You have not pinned any applications yet.",
        NO_APPLICATIONS_FOUND: "No applications match your search.",
        NO_APPLICATIONS_AVAILABLE: "There are no applications available.",
        SEARCH_BOX_PLACEHOLDER: "Search applications",
        PIN_SCREENREADER_TEXT: "Pin application",
        UNPIN_SCREENREADER_TEXT: "Unpin application",
    },
    "de-de": {
        MY_APPLICATIONS_TITLE: "Meine Anwendungen",
        ALL_APPLICATIONS_TITLE: "Alle Anwendungen",
        MY_APPLICATIONS_BUTTON: "Meine Apps",
        MANAGE_USER_APPS: "Meine Anwendungen verwalten",
        NO_APPLICATIONS_PINNED: "Sie haben noch keine Anwendungen angeheftet.",
        NO_APPLICATIONS_FOUND: "Keine Anwendungen gefunden.",
        NO_APPLICATIONS_AVAILABLE: "Es sind keine Anwendungen verfügbar.",
        SEARCH_BOX_PLACEHOLDER: "Anwendungen suchen",
        PIN_SCREENREADER_TEXT: "Anwendung anheften",
        UNPIN_SCREENREADER_TEXT: "Anwendung loslösen",
    },
    "fr-fr": {
        MY_APPLICATIONS_TITLE: "Mes applications",
        ALL_APPLICATIONS_TITLE: "Toutes les applications",
        MY_APPLICATIONS_BUTTON: "Mes apps",
        MANAGE_USER_APPS: "Gérer mes applications",
        NO_APPLICATIONS_PINNED: "Vous n'avez encore épinglé aucune application.",
        NO_APPLICATIONS_FOUND: "Aucune application ne correspond à votre recherche.",
        NO_APPLICATIONS_AVAILABLE: "Aucune application n'est disponible.",
        SEARCH_BOX_PLACEHOLDER: "Rechercher des applications",
        PIN_SCREENREADER_TEXT: "Épingler l'application",
        UNPIN_SCREENREADER_TEXT: "Détacher l'application",
    },
    "it-it": {
        MY_APPLICATIONS_TITLE: "Le mie applicazioni",
        ALL_APPLICATIONS_TITLE: "Tutte le applicazioni",
        MY_APPLICATIONS_BUTTON: "Le mie app",
        MANAGE_USER_APPS: "Gestisci le mie applicazioni",
        NO_APPLICATIONS_PINNED: "Non hai ancora fissato nessuna applicazione.",
        NO_APPLICATIONS_FOUND: "Nessuna applicazione trovata.",
        NO_APPLICATIONS_AVAILABLE: "Nessuna applicazione disponibile.",
        SEARCH_BOX_PLACEHOLDER: "Cerca applicazioni",
        PIN_SCREENREADER_TEXT: "Fissa applicazione",
        UNPIN_SCREENREADER_TEXT: "Rimuovi applicazione",
    },
}


class StringTable:
    """Locale -> key -> text. Lookup order: exact locale, language prefix, default."""

    def __init__(self, tables: Mapping[str, Mapping[str, str]], default: str = DEFAULT_TABLE):
        if default not in tables:
            raise ValueError(f"String tables must declare a '{default}' entry")
        self._tables = {self._norm(k): dict(v) for k, v in tables.items()}
        self._default = self._norm(default)

    @staticmethod
    def _norm(locale: str) -> str:
        return (locale or "").strip().replace("_", "-").lower()

    def get(self, key: str, locale: str) -> str:
        loc = self._norm(locale)
        prefix = loc.split("-", 1)[0]
        candidates = [loc]
        if prefix:
            candidates += sorted(k for k in self._tables if k == prefix or k.startswith(prefix + "-"))
        candidates.append(self._default)

        for name in candidates:
            table = self._tables.get(name)
            if table and key in table:
                return table[key]
        raise MissingTranslationError(key, locale)

    def locales(self) -> list:
        return sorted(self._tables)


def builtin_strings() -> StringTable:
    return StringTable(BUILTIN_STRINGS)
