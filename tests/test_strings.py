import pytest

from userapps import strings as S
from userapps.errors import MissingTranslationError
from userapps.strings import StringTable, builtin_strings


def test_exact_locale_wins():
    table = builtin_strings()

    assert table.get(S.MY_APPLICATIONS_TITLE, "de-DE") == "Meine Anwendungen"
    assert table.get(S.MY_APPLICATIONS_TITLE, "fr_FR") == "Mes applications"


def test_language_prefix_then_default():
    table = builtin_strings()

    assert table.get(S.MY_APPLICATIONS_TITLE, "de-AT") == "Meine Anwendungen"
    assert table.get(S.MY_APPLICATIONS_TITLE, "ja-JP") == "My applications"
    assert table.get(S.MY_APPLICATIONS_TITLE, "") == "My applications"


def test_missing_key_in_locale_uses_default():
    table = StringTable({"default": {"a": "A", "b": "B"}, "nl-nl": {"a": "Een"}})

    assert table.get("a", "nl-NL") == "Een"
    assert table.get("b", "nl-NL") == "B"


def test_missing_everywhere_raises():
    table = StringTable({"default": {"a": "A"}})

    with pytest.raises(MissingTranslationError) as exc:
        table.get("zzz", "en-US")

    assert exc.value.key == "zzz"
    assert exc.value.locale == "en-US"


def test_default_table_is_required():
    with pytest.raises(ValueError):
        StringTable({"en-us": {"a": "A"}})


def test_builtin_tables_share_keys():
    default = set(S.BUILTIN_STRINGS[S.DEFAULT_TABLE])
    for locale, table in S.BUILTIN_STRINGS.items():
        assert set(table) == default, locale
