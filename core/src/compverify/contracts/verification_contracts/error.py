from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from .scope import Scope

DETAIL_VALUE = "value"
DETAIL_ENUM_VALUES = "enum.values"
DETAIL_EXCEPTION_CLASS = "exception.class"
DETAIL_EXCEPTION_INSTANCE = "exception.instance"
DETAIL_HTTP_CODE = "http.code"
DETAIL_HTTP_TEXT = "http.text"
DETAIL_HTTP_REDIRECT = "http.redirect"
DETAIL_GROUP_NAME = "group.name"
DETAIL_GROUP_OPTIONS = "group.options"


@runtime_checkable
class ErrorCode(Protocol):
    """
    Anything with a `name` can be used as an error code.

    Connectivity checks extend the standard taxonomy with their own codes
    (see `error_code`).
    """

    @property
    def name(self) -> str: ...


class StandardCode(str, Enum):
    INTERNAL = "INTERNAL"
    UNKNOWN_OPTION = "UNKNOWN_OPTION"
    MISSING_OPTION = "MISSING_OPTION"
    ILLEGAL_OPTION = "ILLEGAL_OPTION"
    NO_SUCH_OPTION = "NO_SUCH_OPTION"
    AUTHENTICATION = "AUTHENTICATION"
    EXCEPTION = "EXCEPTION"
    GENERIC = "GENERIC"
    UNSUPPORTED = "UNSUPPORTED"
    UNSUPPORTED_SCOPE = "UNSUPPORTED_SCOPE"
    UNSUPPORTED_COMPONENT = "UNSUPPORTED_COMPONENT"
    ILLEGAL_PARAMETER_GROUP_COMBINATION = "ILLEGAL_PARAMETER_GROUP_COMBINATION"
    INCOMPLETE_PARAMETER_GROUP = "INCOMPLETE_PARAMETER_GROUP"


@dataclass(frozen=True, slots=True)
class CustomCode:
    name: str

    def __str__(self) -> str:
        return self.name


def error_code(name: str) -> ErrorCode:
    """Return the standard code called `name`, or a custom one."""
    try:
        return StandardCode[name]
    except KeyError:
        return CustomCode(name)


@dataclass(frozen=True, slots=True)
class VerificationError:
    """
    One classified configuration defect.

    `details` is read-only; use `VerificationErrorBuilder` to build instances.
    """

    code: ErrorCode
    description: str | None = None
    parameter_keys: frozenset[str] = frozenset()
    details: Mapping[str, Any] = field(default_factory=dict)

    def detail(self, key: str) -> Any:
        return self.details.get(key)


class VerificationErrorBuilder:
    def __init__(self) -> None:
        self._code: ErrorCode | None = None
        self._description: str | None = None
        self._parameter_keys: list[str] = []
        self._details: dict[str, Any] = {}

    # Factories

    @classmethod
    def with_code(cls, code: ErrorCode) -> VerificationErrorBuilder:
        return cls().code(code)

    @classmethod
    def with_code_and_description(
        cls, code: ErrorCode, description: str
    ) -> VerificationErrorBuilder:
        return cls().code(code).description(description)

    @classmethod
    def with_unknown_option(cls, key: str) -> VerificationErrorBuilder:
        return (
            cls()
            .code(StandardCode.UNKNOWN_OPTION)
            .description(f"Unknown option {key}")
            .parameter_key(key)
        )

    @classmethod
    def with_missing_option(cls, key: str) -> VerificationErrorBuilder:
        return (
            cls()
            .code(StandardCode.MISSING_OPTION)
            .description(f"{key} should be set")
            .parameter_key(key)
        )

    @classmethod
    def with_illegal_option(cls, key: str, value: Any = None) -> VerificationErrorBuilder:
        builder = cls().code(StandardCode.ILLEGAL_OPTION).parameter_key(key)
        if value is None:
            return builder.description(f"Illegal option {key}")
        return builder.description(f"{key} has wrong value ({value})").detail(DETAIL_VALUE, value)

    @classmethod
    def with_no_such_option(cls, key: str) -> VerificationErrorBuilder:
        return (
            cls()
            .code(StandardCode.NO_SUCH_OPTION)
            .description(f"No such option: {key}")
            .parameter_key(key)
        )

    @classmethod
    def with_exception(cls, exc: BaseException) -> VerificationErrorBuilder:
        return (
            cls()
            .code(StandardCode.EXCEPTION)
            .description(str(exc) or type(exc).__name__)
            .detail(DETAIL_EXCEPTION_CLASS, f"{type(exc).__module__}.{type(exc).__qualname__}")
            .detail(DETAIL_EXCEPTION_INSTANCE, exc)
        )

    @classmethod
    def with_http_code(cls, http_code: int, text: str | None = None) -> VerificationErrorBuilder:
        builder = (
            cls()
            .code(_http_error_code(http_code))
            .description(text or f"HTTP status {http_code}")
            .detail(DETAIL_HTTP_CODE, http_code)
        )
        if text is not None:
            builder.detail(DETAIL_HTTP_TEXT, text)
        return builder

    @classmethod
    def with_unsupported_component(cls, component: str) -> VerificationErrorBuilder:
        return (
            cls()
            .code(StandardCode.UNSUPPORTED_COMPONENT)
            .description(f"Unsupported component: {component}")
        )

    @classmethod
    def with_unsupported_scope(cls, scope: Scope | str) -> VerificationErrorBuilder:
        name = scope.value if isinstance(scope, Scope) else str(scope)
        return (
            cls()
            .code(StandardCode.UNSUPPORTED_SCOPE)
            .description(f"Unsupported scope: {name}")
        )

    # Fluent setters

    def code(self, code: ErrorCode) -> VerificationErrorBuilder:
        self._code = code
        return self

    def description(self, description: str) -> VerificationErrorBuilder:
        self._description = description
        return self

    def parameter_key(self, key: str) -> VerificationErrorBuilder:
        if key not in self._parameter_keys:
            self._parameter_keys.append(key)
        return self

    def parameter_keys(self, keys: Iterable[str]) -> VerificationErrorBuilder:
        for key in keys:
            self.parameter_key(key)
        return self

    def detail(self, key: str, value: Any) -> VerificationErrorBuilder:
        self._details[key] = value
        return self

    def build(self) -> VerificationError:
        if self._code is None:
            raise ValueError("VerificationError requires a code")
        return VerificationError(
            code=self._code,
            description=self._description,
            parameter_keys=frozenset(self._parameter_keys),
            details=MappingProxyType(dict(self._details)),
        )


def _http_error_code(http_code: int) -> ErrorCode:
    if http_code in (401, 403):
        return StandardCode.AUTHENTICATION
    return CustomCode("HTTP")
