"""VAT identification number normalization and format checks.

Pure Python, no network. A VAT number is a 2-letter country prefix followed
by a country-specific body:

  DE 123456789
  ^^ ^^^^^^^^^
  |  body, checked against the pattern for the prefix
  country code

Only the syntax is checked here. Whether a number is actually registered is
answered by the eVatR service.

Pattern table adapted from https://github.com/dannyvankooten/vat (numbers.go).
"""

from __future__ import annotations

import re
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

GERMAN_COUNTRY_CODE = "DE"

_GERMAN_BODY_PATTERN = re.compile(r"[0-9]{9}")

# Body patterns per country code, matched against everything after the prefix.
COUNTRY_PATTERNS: MappingProxyType[str, re.Pattern[str]] = MappingProxyType({
    code: re.compile(pattern)
    for code, pattern in {
        "AT": r"U[A-Z0-9]{8}",
        "BE": r"(0[0-9]{9}|[0-9]{10})",
        "BG": r"[0-9]{9,10}",
        "CH": r"(?:E(?:-| )[0-9]{3}(?:\.| )[0-9]{3}(?:\.| )[0-9]{3}( MWST)?|E[0-9]{9}(?:MWST)?)",
        "CY": r"[0-9]{8}[A-Z]",
        "CZ": r"[0-9]{8,10}",
        "DK": r"[0-9]{8}",
        "EE": r"[0-9]{9}",
        "EL": r"[0-9]{9}",
        "ES": r"[A-Z][0-9]{7}[A-Z]|[0-9]{8}[A-Z]|[A-Z][0-9]{8}",
        "FI": r"[0-9]{8}",
        "FR": r"([A-Z]{2}|[0-9]{2})[0-9]{9}",
        "GB": r"[0-9]{9}|[0-9]{12}|(GD|HA)[0-9]{3}",
        "HR": r"[0-9]{11}",
        "HU": r"[0-9]{8}",
        "IE": r"[A-Z0-9]{7}[A-Z]|[A-Z0-9]{7}[A-W][A-I]",
        "IT": r"[0-9]{11}",
        "LT": r"([0-9]{9}|[0-9]{12})",
        "LU": r"[0-9]{8}",
        "LV": r"[0-9]{11}",
        "MT": r"[0-9]{8}",
        "NL": r"[0-9]{9}B[0-9]{2}",
        "PL": r"[0-9]{10}",
        "PT": r"[0-9]{9}",
        "RO": r"[0-9]{2,10}",
        "SE": r"[0-9]{12}",
        "SI": r"[0-9]{8}",
        "SK": r"[0-9]{10}",
    }.items()
})


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_vat_number(value: str) -> str:
    """Remove every whitespace character, keeping all others in order."""
    return "".join(ch for ch in value if not ch.isspace())


def supported_country_codes() -> frozenset[str]:
    """Country prefixes accepted by validate_foreign_vat_number."""
    return frozenset(COUNTRY_PATTERNS)


def split_vat_number(value: str) -> tuple[str, str]:
    """Split an already normalized number into (country code, body), upper-cased."""
    upper = value.upper()
    return upper[:2], upper[2:]


def validate_german_vat_number(value: str) -> bool:
    """Check that a normalized number is 'DE' followed by exactly nine digits."""
    if len(value) < 3:
        return False
    country, body = split_vat_number(value)
    if country != GERMAN_COUNTRY_CODE:
        return False
    return _GERMAN_BODY_PATTERN.fullmatch(body) is not None


def validate_foreign_vat_number(value: str) -> bool:
    """Check a normalized number against the pattern for its country prefix.

    Args:
        value: VAT number with whitespace already removed.

    Returns:
        False when the prefix is not in COUNTRY_PATTERNS or the body does not
        fully match the country's pattern.
    """
    if len(value) < 3:
        return False
    country, body = split_vat_number(value)
    pattern = COUNTRY_PATTERNS.get(country)
    if pattern is None:
        return False
    return pattern.fullmatch(body) is not None
