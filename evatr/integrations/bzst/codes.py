"""eVatR result codes.

Reference: https://evatr.bff-online.de/eVatR/xmlrpc/codes
"""

from __future__ import annotations

SUCCESS_CODE = 200
# Own German VAT number rejected by the service; the foreign number is not checked.
OWN_NUMBER_INVALID_CODE = 206

ERROR_CODE_MESSAGES: dict[int, str] = {
    200: "The requested VAT number is valid.",
    201: "The requested VAT number is invalid.",
    202: "The requested VAT number is invalid: it is not registered in the member state's business register.",
    203: "The requested VAT number is invalid: it is only valid from the date in 'Gueltig_ab'.",
    204: "The requested VAT number is invalid: it was valid between 'Gueltig_ab' and 'Gueltig_bis'.",
    205: "The member state cannot answer the request at the moment. Please try again later.",
    206: "Your German VAT number is invalid. A confirmation request is not possible.",
    207: "Your German VAT number was issued for intra-community acquisitions only. A confirmation request is not possible.",
    208: "Another user is currently querying this VAT number. Please try again later.",
    209: "The requested VAT number is invalid: it does not follow the format of its member state.",
    210: "The requested VAT number is invalid: it fails the member state's check digit rules.",
    211: "The requested VAT number contains invalid characters.",
    212: "The requested VAT number contains an invalid country code.",
    213: "You are not allowed to query a German VAT number.",
    214: "Your German VAT number is malformed: it must be 'DE' followed by 9 digits.",
    215: "The request is missing data required for a simple confirmation.",
    216: "The request is missing data required for a qualified confirmation.",
    217: "An error occurred while processing the data from the member state.",
    218: "A qualified confirmation is not possible at the moment; a simple confirmation found the number valid.",
    219: "An error occurred during the qualified confirmation request.",
    221: "The request contains missing parameters or an invalid data type.",
    223: "The requested VAT number is valid. The print function is no longer available.",
    999: "The request cannot be processed at the moment. Please try again later.",
}


def describe_error_code(code: int) -> str | None:
    """Return the English description of an eVatR result code, if known."""
    return ERROR_CODE_MESSAGES.get(code)


def is_success(code: int) -> bool:
    """Only SUCCESS_CODE counts as a confirmed valid number."""
    return code == SUCCESS_CODE
