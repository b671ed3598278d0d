# languages.py
"""Supported display languages for country names.

The list mirrors the ``country_<lang>`` columns of the ``countries`` table.
Regional variants are folded onto the closest column we actually store.
"""

from __future__ import annotations

from types import MappingProxyType

from errors import InvalidArgument

SUPPORTED_LANGUAGES: frozenset[str] = frozenset({
    "ar",
    "cs",
    "da",
    "de",
    "en",
    "es",
    "fr",
    "he",
    "it",
    "ja",
    "nl",
    "pt",
    "ru",
    "sk",
    "zh-cn",
    "zh-hk",
})

# Traditional script regions share the zh-hk column, simplified ones zh-cn.
LANGUAGE_ALIASES = MappingProxyType({
    "zh-tw": "zh-hk",
    "zh-mo": "zh-hk",
    "zh-sg": "zh-cn",
    "zh": "zh-cn",
})

COLUMN_PREFIX = "country_"
REFERENCE_NAME_COLUMN = "country_iso"


def normalise_language_code(tag: str) -> str:
    """Turn ``en_GB`` into ``en-gb``."""
    return tag.lower().replace("_", "-")


def validate_language(tag: str | None) -> str:
    """Return the supported language tag that *tag* resolves to.

    Lookup order: exact match after normalisation and alias remap, then the
    two-letter primary subtag. Anything else raises ``InvalidArgument``.
    """

    if not isinstance(tag, str):
        raise InvalidArgument("lang", tag)
    lang = normalise_language_code(tag)
    lang = LANGUAGE_ALIASES.get(lang, lang)
    if lang in SUPPORTED_LANGUAGES:
        return lang
    primary = lang[:2]
    if primary in SUPPORTED_LANGUAGES:
        return primary
    raise InvalidArgument("lang", tag)


def language_column(lang: str) -> str:
    """Column holding names in the already validated language *lang*."""
    return COLUMN_PREFIX + lang.replace("-", "_")


LANGUAGE_COLUMNS: tuple[str, ...] = tuple(language_column(lang) for lang in sorted(SUPPORTED_LANGUAGES))
