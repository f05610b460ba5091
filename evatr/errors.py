"""Exception hierarchy for eVatR confirmation requests.

Input errors are raised before any network call. Connectivity and decoding
errors abort the request; a well-formed "not valid" answer is never an error.
"""

from __future__ import annotations


class EvatrError(Exception):
    """Base class for all eVatR client errors."""


class InvalidVatNumberError(EvatrError):
    """Raised when a VAT number fails syntactic pre-validation."""

    def __init__(self, message: str, vat_number: str) -> None:
        super().__init__(message)
        self.vat_number = vat_number


class InvalidGermanVatError(InvalidVatNumberError):
    """The requester's own (German) VAT number is malformed."""

    def __init__(self, vat_number: str) -> None:
        super().__init__("input: the German VAT number is invalid", vat_number)


class InvalidForeignVatError(InvalidVatNumberError):
    """The VAT number to confirm has an unknown country code or a malformed body."""

    def __init__(self, vat_number: str) -> None:
        super().__init__("input: the foreign VAT number is invalid", vat_number)


class ServiceUnreachableError(EvatrError):
    """Raised when the eVatR service cannot be reached or times out."""


class ResponseDecodeError(EvatrError):
    """Raised when the service answer is not parseable XML."""

    def __init__(self, message: str, raw_output: bytes) -> None:
        super().__init__(message)
        self.raw_output = raw_output
