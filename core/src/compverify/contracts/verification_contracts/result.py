from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .error import VerificationError, VerificationErrorBuilder
from .scope import Scope, Status


@dataclass(frozen=True, slots=True)
class Result:
    """
    Outcome of a single verify() call.

    Keep this stable: callers render it, verifiers only build it.
    """

    status: Status
    scope: Scope
    errors: tuple[VerificationError, ...] = ()

    def __post_init__(self) -> None:
        if (self.status is Status.ERROR) != bool(self.errors):
            raise ValueError(
                f"Result status {self.status.value} does not match {len(self.errors)} error(s)"
            )

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


class ResultBuilder:
    def __init__(self) -> None:
        self._status: Status | None = None
        self._scope: Scope | None = None
        self._errors: list[VerificationError] = []

    @classmethod
    def with_status(cls, status: Status) -> ResultBuilder:
        return cls().status(status)

    @classmethod
    def with_scope(cls, scope: Scope) -> ResultBuilder:
        return cls().scope(scope)

    @classmethod
    def with_status_and_scope(cls, status: Status, scope: Scope) -> ResultBuilder:
        return cls().status(status).scope(scope)

    @classmethod
    def unsupported(cls) -> ResultBuilder:
        return cls().status(Status.UNSUPPORTED)

    @classmethod
    def unsupported_scope(cls, scope: Scope) -> ResultBuilder:
        return (
            cls()
            .status(Status.UNSUPPORTED)
            .scope(scope)
            .error(VerificationErrorBuilder.with_unsupported_scope(scope).build())
        )

    def status(self, status: Status) -> ResultBuilder:
        self._status = status
        return self

    def scope(self, scope: Scope) -> ResultBuilder:
        self._scope = scope
        return self

    def error(self, error: VerificationError | None) -> ResultBuilder:
        if error is not None:
            self._errors.append(error)
        return self

    def errors(self, errors: Iterable[VerificationError]) -> ResultBuilder:
        for error in errors:
            self.error(error)
        return self

    def error_if(
        self, condition: bool, factory: Callable[[], VerificationError]
    ) -> ResultBuilder:
        if condition:
            self.error(factory())
        return self

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def build(self) -> Result:
        status = self._status if self._status is not None else Status.UNSUPPORTED
        if self._errors:
            # Any recorded error wins over an explicitly set status.
            status = Status.ERROR
        elif status is Status.ERROR:
            raise ValueError("An ERROR result requires at least one error")
        return Result(
            status=status,
            scope=self._scope if self._scope is not None else Scope.PARAMETERS,
            errors=tuple(self._errors),
        )
