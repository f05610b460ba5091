"""Decoding of eVatR XML-RPC answers.

The service does not return a struct. Every field arrives as its own
``param`` holding a two-entry string array, name first, value second:

    <params>
      <param>
        <value><array><data>
          <value><string>ErrorCode</string></value>
          <value><string>200</string></value>
        </data></array></value>
      </param>
      ...
    </params>

parse_response() turns the payload into a ResponseDocument and get_field()
recovers a value by name. Callers never index into the arrays themselves.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from evatr.errors import ResponseDecodeError
from evatr.integrations.bzst.schemas import MatchStatus

logger = logging.getLogger(__name__)

# Position of the value inside a [name, value] array
_VALUE_INDEX = 1

_MATCH_CODES: dict[str, MatchStatus] = {
    "A": MatchStatus.MATCHED,
    "B": MatchStatus.NOT_MATCHED,
    "C": MatchStatus.NOT_QUERIED,
    "D": MatchStatus.UNKNOWN,
}


@dataclass(frozen=True)
class ResponseParam:
    """The string entries of one ``param`` array, in document order."""

    values: tuple[str, ...]


@dataclass(frozen=True)
class ResponseDocument:
    """Generic form of an eVatR answer."""

    params: tuple[ResponseParam, ...]


def parse_response(raw: bytes) -> ResponseDocument:
    """Parse raw XML bytes into a ResponseDocument.

    Each direct ``param`` child of the root element becomes one ResponseParam.
    A ``value`` without a ``string`` child yields an empty entry.

    Raises:
        ResponseDecodeError: If the payload is not well-formed XML.
    """
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as exc:
        raise ResponseDecodeError(str(exc), raw_output=raw) from exc

    params = []
    for param in root.findall("param"):
        data = param.find("value/array/data")
        if data is None:
            params.append(ResponseParam(values=()))
            continue
        values = tuple(value.findtext("string", default="") for value in data.findall("value"))
        params.append(ResponseParam(values=values))

    return ResponseDocument(params=tuple(params))


def get_field(document: ResponseDocument, name: str) -> str:
    """Return the value stored under ``name``, or "" if the name is absent.

    The value is always read from the second slot of the array that contains
    the name, wherever in that array the name was found.
    """
    for param in document.params:
        if name not in param.values:
            continue
        if len(param.values) <= _VALUE_INDEX:
            logger.warning("eVatR field %s has no value entry (%d entries)", name, len(param.values))
            return ""
        return param.values[_VALUE_INDEX]
    return ""


def get_optional_field(document: ResponseDocument, name: str) -> str | None:
    """Like get_field(), but an empty value becomes None."""
    return get_field(document, name) or None


def parse_error_code(raw: str) -> int:
    """Parse the ErrorCode field; empty or non-numeric text counts as 0."""
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        logger.debug("Could not parse eVatR error code: %r", raw)
        return 0


def translate_match_status(code: str) -> MatchStatus:
    """Map a single-letter service code to MatchStatus. Unknown codes are INVALID."""
    return _MATCH_CODES.get(code, MatchStatus.INVALID)
