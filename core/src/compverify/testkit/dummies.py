from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from compverify.contracts import (
    CatalogOutcome,
    CatalogService,
    Result,
    ResultBuilder,
    Scope,
    Status,
    UnknownSchemeError,
    VerificationErrorBuilder,
)
from compverify.verifier import DefaultComponentVerifier, NoSuchOptionError


@dataclass(frozen=True, slots=True)
class CatalogCall:
    """Record of a catalog call for assertions in tests."""

    scheme: str
    params: dict[str, str]


class StaticCatalog(CatalogService):
    """
    CatalogService returning canned outcomes per scheme.

    Schemes without an outcome raise UnknownSchemeError.
    """

    def __init__(self, outcomes: Mapping[str, CatalogOutcome]) -> None:
        self._outcomes = dict(outcomes)
        self._calls: list[CatalogCall] = []

    @property
    def calls(self) -> list[CatalogCall]:
        return list(self._calls)

    def validate(self, scheme: str, params: Mapping[str, str]) -> CatalogOutcome:
        self._calls.append(CatalogCall(scheme=scheme, params=dict(params)))
        try:
            return self._outcomes[scheme]
        except KeyError as e:
            raise UnknownSchemeError(scheme) from e


class DummyConnectivityVerifier(DefaultComponentVerifier):
    """Connectivity check that only requires a `host` option."""

    def verify_connectivity(self, parameters: Mapping[str, Any]) -> Result:
        builder = ResultBuilder.with_status_and_scope(Status.OK, Scope.CONNECTIVITY)
        try:
            self.get_mandatory_option(parameters, "host", str)
        except NoSuchOptionError as exc:
            builder.error(VerificationErrorBuilder.with_no_such_option(exc.key).build())
        return builder.build()
