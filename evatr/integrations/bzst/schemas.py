"""Pydantic schemas for the BZSt eVatR confirmation service."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from evatr.integrations.bzst.codes import describe_error_code


class MatchStatus(str, Enum):
    """Qualified-check outcome for one address field (service codes A–D)."""

    MATCHED = "matched"  # A
    NOT_MATCHED = "not_matched"  # B
    NOT_QUERIED = "not_queried"  # C
    UNKNOWN = "unknown"  # D: not held by the member state's database
    INVALID = "invalid"  # missing or unrecognized code


class SimpleCheckRequest(BaseModel):
    """Input for a simple confirmation. Raw user input, normalized by the service."""

    own_vat_number: str = Field(description="Requester's German VAT number (UstId_1)")
    foreign_vat_number: str = Field(description="Foreign VAT number to confirm (UstId_2)")


class QualifiedCheckRequest(SimpleCheckRequest):
    """Input for a qualified confirmation, adding the company data to compare."""

    company_name: str = ""
    city: str = ""
    postal_code: str = ""
    street: str = ""
    print_confirmation: bool = False  # official letter by post ("Druck")


class _CheckResultBase(BaseModel):
    own_vat_number: str
    validated_vat_number: str
    error_code: int
    valid_from: str | None = None  # Gueltig_ab
    valid_until: str | None = None  # Gueltig_bis
    request_date: str | None = None  # Datum
    request_time: str | None = None  # Uhrzeit

    @property
    def message(self) -> str | None:
        """Human-readable description of error_code."""
        return describe_error_code(self.error_code)


class SimpleCheckResult(_CheckResultBase):
    """Result of a simple confirmation."""

    is_valid: bool


class QualifiedCheckResult(_CheckResultBase):
    """Result of a qualified confirmation.

    Validity is expressed by error_code and the per-field match statuses only.
    """

    name_match: MatchStatus = MatchStatus.INVALID
    city_match: MatchStatus = MatchStatus.INVALID
    postal_code_match: MatchStatus = MatchStatus.INVALID
    street_match: MatchStatus = MatchStatus.INVALID
