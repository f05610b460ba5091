"""Client for the German BZSt eVatR VAT number confirmation service."""

from evatr.errors import (
    EvatrError,
    InvalidForeignVatError,
    InvalidGermanVatError,
    InvalidVatNumberError,
    ResponseDecodeError,
    ServiceUnreachableError,
)
from evatr.integrations.bzst.schemas import (
    MatchStatus,
    QualifiedCheckRequest,
    QualifiedCheckResult,
    SimpleCheckRequest,
    SimpleCheckResult,
)
from evatr.integrations.bzst.service import check_qualified, check_simple

__version__ = "0.1.0"

__all__ = [
    "EvatrError",
    "InvalidForeignVatError",
    "InvalidGermanVatError",
    "InvalidVatNumberError",
    "MatchStatus",
    "QualifiedCheckRequest",
    "QualifiedCheckResult",
    "ResponseDecodeError",
    "ServiceUnreachableError",
    "SimpleCheckRequest",
    "SimpleCheckResult",
    "check_qualified",
    "check_simple",
]
