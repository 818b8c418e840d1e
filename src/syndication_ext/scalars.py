"""
Best-effort parsing of scalar values found inside syndication elements.

Every parser returns ``None`` for values it cannot interpret and logs a
warning; a malformed field never escalates past the field itself.
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from syndication_ext.logger import get_logger

logger = get_logger(__name__)

_LANGUAGE_TAG_RE = re.compile(r"^[A-Za-z]{1,8}(?:-[A-Za-z0-9]{1,8})*$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def normalize_language_tag(tag: Optional[str]) -> Optional[str]:
    """Normalize a language tag to its canonical casing.

    Primary subtags are lower-cased, four-letter script subtags title-cased
    and two-letter region subtags upper-cased ("en-us" -> "en-US",
    "zh-hant-tw" -> "zh-Hant-TW").

    Args:
        tag: Raw language tag

    Returns:
        Normalized tag, or None if the tag is empty or malformed
    """
    if not tag:
        return None

    tag = tag.strip().replace("_", "-")
    if not _LANGUAGE_TAG_RE.match(tag):
        return None

    subtags = tag.split("-")
    normalized = [subtags[0].lower()]
    for subtag in subtags[1:]:
        if len(subtag) == 4 and subtag.isalpha():
            normalized.append(subtag.title())
        elif len(subtag) == 2 and subtag.isalpha():
            normalized.append(subtag.upper())
        else:
            normalized.append(subtag.lower())
    return "-".join(normalized)


def parse_language(value: Optional[str], field: str = "language") -> Optional[str]:
    """Parse a language tag attribute, logging when it is malformed."""
    if not value or not value.strip():
        return None

    language = normalize_language_tag(value)
    if language is None:
        logger.warning(f"Unable to determine language for {field} with a name of {value!r}")
    return language


def parse_uri(value: Optional[str], field: str = "uri") -> Optional[str]:
    """Parse an absolute or relative URI reference.

    Args:
        value: Raw attribute or element text
        field: Field name used in diagnostics

    Returns:
        The trimmed URI, or None if empty or malformed
    """
    if not value:
        return None

    value = value.strip()
    if not value:
        return None

    if any(ch.isspace() for ch in value):
        logger.warning(f"Invalid URI for {field}: {value!r}")
        return None

    try:
        urlsplit(value)
    except ValueError as e:
        logger.warning(f"Invalid URI for {field}: {value!r} ({e})")
        return None

    return value


def parse_int(value: Optional[str], field: str = "value") -> Optional[int]:
    """Parse an invariant-culture integer."""
    if not value or not value.strip():
        return None

    value = value.strip()
    if not _INTEGER_RE.match(value):
        logger.warning(f"Invalid integer for {field}: {value!r}")
        return None
    return int(value)


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse an XML Schema boolean ("true", "false", "1", "0")."""
    if value is None:
        return None

    value = value.strip().lower()
    if value in ("true", "1"):
        return True
    if value in ("false", "0"):
        return False
    return None
