from .service_contracts import (
    CatalogOutcome,
    CatalogService,
    ConversionError,
    NameNotBoundError,
    ObjectRegistry,
    UnknownSchemeError,
    ValueConverter,
    VerifierRuntime,
)
from .verification_contracts import (
    DETAIL_ENUM_VALUES,
    DETAIL_EXCEPTION_CLASS,
    DETAIL_EXCEPTION_INSTANCE,
    DETAIL_VALUE,
    ComponentVerifier,
    CustomCode,
    ErrorCode,
    Result,
    ResultBuilder,
    Scope,
    StandardCode,
    Status,
    VerificationError,
    VerificationConfig,
    VerificationErrorBuilder,
    VerifierNotFoundError,
    VerifierRef,
    VerifierRegistry,
    VerifierSettings,
    error_code,
)

__all__ = [
    "Scope",
    "Status",
    "Result",
    "ResultBuilder",
    "ComponentVerifier",
    "VerifierRegistry",
    "VerifierNotFoundError",
    "VerificationConfig",
    "VerifierRef",
    "VerifierSettings",
    "ErrorCode",
    "StandardCode",
    "CustomCode",
    "error_code",
    "VerificationError",
    "VerificationErrorBuilder",
    "DETAIL_VALUE",
    "DETAIL_ENUM_VALUES",
    "DETAIL_EXCEPTION_CLASS",
    "DETAIL_EXCEPTION_INSTANCE",
    "CatalogOutcome",
    "CatalogService",
    "UnknownSchemeError",
    "ConversionError",
    "ValueConverter",
    "NameNotBoundError",
    "ObjectRegistry",
    "VerifierRuntime",
]
