from .error import (
    DETAIL_ENUM_VALUES,
    DETAIL_EXCEPTION_CLASS,
    DETAIL_EXCEPTION_INSTANCE,
    DETAIL_GROUP_NAME,
    DETAIL_GROUP_OPTIONS,
    DETAIL_HTTP_CODE,
    DETAIL_HTTP_REDIRECT,
    DETAIL_HTTP_TEXT,
    DETAIL_VALUE,
    CustomCode,
    ErrorCode,
    StandardCode,
    VerificationError,
    VerificationErrorBuilder,
    error_code,
)
from .request_config import VerificationConfig, VerifierRef, VerifierSettings
from .result import Result, ResultBuilder
from .scope import Scope, Status
from .verifier import ComponentVerifier, VerifierNotFoundError, VerifierRegistry

__all__ = [
    "Scope",
    "Status",
    "ErrorCode",
    "StandardCode",
    "CustomCode",
    "error_code",
    "VerificationError",
    "VerificationErrorBuilder",
    "Result",
    "ResultBuilder",
    "VerificationConfig",
    "VerifierRef",
    "VerifierSettings",
    "ComponentVerifier",
    "VerifierRegistry",
    "VerifierNotFoundError",
    "DETAIL_VALUE",
    "DETAIL_ENUM_VALUES",
    "DETAIL_EXCEPTION_CLASS",
    "DETAIL_EXCEPTION_INSTANCE",
    "DETAIL_HTTP_CODE",
    "DETAIL_HTTP_TEXT",
    "DETAIL_HTTP_REDIRECT",
    "DETAIL_GROUP_NAME",
    "DETAIL_GROUP_OPTIONS",
]
