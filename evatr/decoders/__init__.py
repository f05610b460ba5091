"""Deterministic VAT number checks: normalization and country formats."""

from evatr.decoders.vat_number import (
    COUNTRY_PATTERNS,
    normalize_vat_number,
    supported_country_codes,
    validate_foreign_vat_number,
    validate_german_vat_number,
)

__all__ = [
    "COUNTRY_PATTERNS",
    "normalize_vat_number",
    "supported_country_codes",
    "validate_foreign_vat_number",
    "validate_german_vat_number",
]
