"""Console preparation for localized messages.

The UI culture is the process locale reduced to its console form. When the
console cannot display that culture's text, because its output encoding is
neither UTF-8 nor the culture's own encoding, messages fall back to en_US.
"""

import codecs
import locale
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

logger = logging.getLogger(__name__)

FALLBACK_CULTURE = "en_US"
UTF8 = "utf-8"

_NEUTRAL_LOCALES = frozenset({"", "C", "POSIX"})


@dataclass(frozen=True, slots=True)
class ConsoleCulture:
    """UI culture selected for console output.

    Attributes:
        name: Culture name, e.g. "de_DE".
        encoding: Normalized console output encoding, e.g. "utf-8".
        fallback: True if the process culture was replaced by en_US.
    """

    name: str
    encoding: str
    fallback: bool = False


_ui_culture: ConsoleCulture | None = None


def _normalize_encoding(name: str | None) -> str | None:
    """Return the canonical codec name, or None if unknown."""
    if not name:
        return None
    try:
        return codecs.lookup(name).name
    except LookupError:
        return None


def _current_locale_name() -> str | None:
    lang, encoding = locale.getlocale()
    if lang and encoding:
        return f"{lang}.{encoding}"
    return lang


def console_fallback_culture(locale_name: str | None) -> str:
    """Reduce a locale name to the culture used for console output.

    Args:
        locale_name: Locale such as "de_DE.ISO8859-1" or "fr_FR@euro".

    Returns:
        Culture name without encoding or modifier; en_US for the C locale.
    """
    if not locale_name:
        return FALLBACK_CULTURE
    name = locale_name.split("@", 1)[0].split(".", 1)[0]
    if name in _NEUTRAL_LOCALES:
        return FALLBACK_CULTURE
    return name


def culture_encoding(locale_name: str | None) -> str | None:
    """Return the normalized encoding a culture's text is written in.

    Uses the encoding suffix of the locale name when present, otherwise
    the process's preferred encoding.
    """
    if locale_name and "." in locale_name:
        suffix = locale_name.split(".", 1)[1].split("@", 1)[0]
        return _normalize_encoding(suffix)
    return _normalize_encoding(locale.getpreferredencoding(False))


def prepare_console_for_localization(
    stream: TextIO | None = None,
    locale_name: str | None = None,
) -> ConsoleCulture:
    """Select the UI culture for console messages.

    Args:
        stream: Console output stream. If None, uses sys.stdout.
        locale_name: Locale to start from. If None, uses the process locale.

    Returns:
        The selected ConsoleCulture, also available from get_ui_culture().
    """
    global _ui_culture

    out = stream if stream is not None else sys.stdout
    if locale_name is None:
        locale_name = _current_locale_name()

    culture = console_fallback_culture(locale_name)
    # In-memory streams carry no encoding and accept any text
    output_encoding = _normalize_encoding(getattr(out, "encoding", None)) or UTF8

    if output_encoding not in (UTF8, culture_encoding(locale_name)):
        logger.debug(
            "Console encoding %s cannot show %s text, using %s",
            output_encoding,
            culture,
            FALLBACK_CULTURE,
        )
        _ui_culture = ConsoleCulture(
            name=FALLBACK_CULTURE, encoding=output_encoding, fallback=True
        )
    else:
        _ui_culture = ConsoleCulture(name=culture, encoding=output_encoding)

    return _ui_culture


def get_ui_culture() -> ConsoleCulture | None:
    """Return the culture chosen by the last prepare_console_for_localization() call."""
    return _ui_culture
