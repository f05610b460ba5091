"""eVatR confirmation service: orchestrates format checks, client and decoding.

Both checks follow the same steps:
1. Normalize and validate the own German number, then the foreign number
   (no network call if either is malformed)
2. Call the eVatR endpoint exactly once
3. Decode the XML answer and extract the named fields
"""

from __future__ import annotations

import logging

from evatr.decoders.vat_number import (
    normalize_vat_number,
    validate_foreign_vat_number,
    validate_german_vat_number,
)
from evatr.errors import InvalidForeignVatError, InvalidGermanVatError
from evatr.integrations.bzst.client import EvatrClient, evatr_client
from evatr.integrations.bzst.codes import is_success
from evatr.integrations.bzst.response import (
    ResponseDocument,
    get_field,
    get_optional_field,
    parse_error_code,
    parse_response,
    translate_match_status,
)
from evatr.integrations.bzst.schemas import (
    QualifiedCheckRequest,
    QualifiedCheckResult,
    SimpleCheckRequest,
    SimpleCheckResult,
)

logger = logging.getLogger(__name__)

# Request parameter names
_PARAM_OWN = "UstId_1"
_PARAM_FOREIGN = "UstId_2"
_PARAM_NAME = "Firmenname"
_PARAM_CITY = "Ort"
_PARAM_POSTAL_CODE = "PLZ"
_PARAM_STREET = "Strasse"
_PARAM_PRINT = "Druck"

# Response field names
_FIELD_ERROR_CODE = "ErrorCode"
_FIELD_OWN = "UstId_1"
_FIELD_FOREIGN = "UstId_2"
_FIELD_VALID_FROM = "Gueltig_ab"
_FIELD_VALID_UNTIL = "Gueltig_bis"
_FIELD_DATE = "Datum"
_FIELD_TIME = "Uhrzeit"
_FIELD_MATCH_NAME = "Erg_Name"
_FIELD_MATCH_CITY = "Erg_Ort"
_FIELD_MATCH_POSTAL_CODE = "Erg_PLZ"
_FIELD_MATCH_STREET = "Erg_Str"


def _mask(vat_number: str) -> str:
    return vat_number[:4] + "X" * max(len(vat_number) - 4, 0)


def _prepare_numbers(own: str, foreign: str) -> tuple[str, str]:
    """Normalize both numbers, failing fast on the first malformed one."""
    own_vat = normalize_vat_number(own).upper()
    if not validate_german_vat_number(own_vat):
        logger.info("Rejected German VAT number %s before request", _mask(own_vat))
        raise InvalidGermanVatError(own_vat)

    foreign_vat = normalize_vat_number(foreign).upper()
    if not validate_foreign_vat_number(foreign_vat):
        logger.info("Rejected foreign VAT number %s before request", _mask(foreign_vat))
        raise InvalidForeignVatError(foreign_vat)

    return own_vat, foreign_vat


def _request(params: dict[str, str], client: EvatrClient | None) -> ResponseDocument:
    raw = (client or evatr_client).fetch(params)
    return parse_response(raw)


def check_simple(request: SimpleCheckRequest, client: EvatrClient | None = None) -> SimpleCheckResult:
    """Run a simple confirmation request.

    Args:
        request: Own German VAT number and the foreign number to confirm.
        client: Transport to use; defaults to the module-level evatr_client.

    Returns:
        SimpleCheckResult; is_valid is True only for result code 200.

    Raises:
        InvalidGermanVatError: Own number malformed (no request sent).
        InvalidForeignVatError: Foreign number malformed (no request sent).
        ServiceUnreachableError: The service could not be reached.
        ResponseDecodeError: The answer was not well-formed XML.
    """
    own_vat, foreign_vat = _prepare_numbers(request.own_vat_number, request.foreign_vat_number)

    document = _request({_PARAM_OWN: own_vat, _PARAM_FOREIGN: foreign_vat}, client)

    error_code = parse_error_code(get_field(document, _FIELD_ERROR_CODE))
    result = SimpleCheckResult(
        own_vat_number=get_field(document, _FIELD_OWN),
        validated_vat_number=get_field(document, _FIELD_FOREIGN),
        error_code=error_code,
        is_valid=is_success(error_code),
        valid_from=get_optional_field(document, _FIELD_VALID_FROM),
        valid_until=get_optional_field(document, _FIELD_VALID_UNTIL),
        request_date=get_optional_field(document, _FIELD_DATE),
        request_time=get_optional_field(document, _FIELD_TIME),
    )
    logger.info("Simple check for %s returned code %d", _mask(foreign_vat), error_code)
    return result


def check_qualified(
    request: QualifiedCheckRequest,
    client: EvatrClient | None = None,
) -> QualifiedCheckResult:
    """Run a qualified confirmation request (VAT number plus company data).

    The street is only sent when given. Raises the same errors as check_simple().
    """
    own_vat, foreign_vat = _prepare_numbers(request.own_vat_number, request.foreign_vat_number)

    params = {
        _PARAM_OWN: own_vat,
        _PARAM_FOREIGN: foreign_vat,
        _PARAM_NAME: request.company_name,
        _PARAM_CITY: request.city,
        _PARAM_POSTAL_CODE: request.postal_code,
        _PARAM_PRINT: "ja" if request.print_confirmation else "nein",
    }
    if request.street:
        params[_PARAM_STREET] = request.street

    document = _request(params, client)

    error_code = parse_error_code(get_field(document, _FIELD_ERROR_CODE))
    result = QualifiedCheckResult(
        own_vat_number=get_field(document, _FIELD_OWN),
        validated_vat_number=get_field(document, _FIELD_FOREIGN),
        error_code=error_code,
        name_match=translate_match_status(get_field(document, _FIELD_MATCH_NAME)),
        city_match=translate_match_status(get_field(document, _FIELD_MATCH_CITY)),
        postal_code_match=translate_match_status(get_field(document, _FIELD_MATCH_POSTAL_CODE)),
        street_match=translate_match_status(get_field(document, _FIELD_MATCH_STREET)),
        valid_from=get_optional_field(document, _FIELD_VALID_FROM),
        valid_until=get_optional_field(document, _FIELD_VALID_UNTIL),
        request_date=get_optional_field(document, _FIELD_DATE),
        request_time=get_optional_field(document, _FIELD_TIME),
    )
    logger.info(
        "Qualified check for %s returned code %d (name=%s, city=%s)",
        _mask(foreign_vat),
        error_code,
        result.name_match.value,
        result.city_match.value,
    )
    return result
