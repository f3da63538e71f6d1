from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from compverify import binding
from compverify.contracts import (
    DETAIL_ENUM_VALUES,
    CatalogOutcome,
    ComponentVerifier,
    ConversionError,
    Result,
    ResultBuilder,
    Scope,
    StandardCode,
    Status,
    UnknownSchemeError,
    VerificationErrorBuilder,
    VerifierRuntime,
)

T = TypeVar("T")

SCHEME_KEY = "scheme"

logger = logging.getLogger("compverify.verifier")


class UnsupportedScopeError(RuntimeError):
    """
    verify() was called with something that is not a Scope.

    This is a caller defect; it is never turned into a Result.
    """


class NoSuchOptionError(KeyError):
    code = StandardCode.NO_SUCH_OPTION

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No such option: {self.key}"


class DefaultComponentVerifier(ComponentVerifier):
    """
    Catalog-backed verifier.

    PARAMETERS checks options against the catalog entry for the scheme.
    CONNECTIVITY is unsupported here; subclasses override
    `verify_connectivity` and use the option helpers to read typed values.
    """

    def __init__(
        self,
        default_scheme: str,
        runtime: VerifierRuntime | None,
        *,
        reference_marker: str = binding.DEFAULT_REFERENCE_MARKER,
    ) -> None:
        self._default_scheme = default_scheme
        self._runtime = runtime
        self._reference_marker = reference_marker

    @property
    def default_scheme(self) -> str:
        return self._default_scheme

    @property
    def runtime(self) -> VerifierRuntime | None:
        return self._runtime

    def verify(self, scope: Scope, parameters: Mapping[str, Any]) -> Result:
        if self._runtime is None:
            return (
                ResultBuilder.with_status_and_scope(Status.ERROR, scope)
                .error(
                    VerificationErrorBuilder.with_code_and_description(
                        StandardCode.INTERNAL, "Missing verifier runtime"
                    ).build()
                )
                .build()
            )

        if scope is Scope.PARAMETERS:
            return self.verify_parameters(parameters)
        if scope is Scope.CONNECTIVITY:
            return self.verify_connectivity(parameters)

        raise UnsupportedScopeError(f"Unsupported verifier scope: {scope!r}")

    def verify_connectivity(self, parameters: Mapping[str, Any]) -> Result:
        return ResultBuilder.with_status_and_scope(Status.UNSUPPORTED, Scope.CONNECTIVITY).build()

    def verify_parameters(self, parameters: Mapping[str, Any]) -> Result:
        builder = ResultBuilder.with_status_and_scope(Status.OK, Scope.PARAMETERS)
        self.verify_parameters_against_catalog(builder, parameters)
        return builder.build()

    # Parameters validation

    def verify_parameters_against_catalog(
        self, builder: ResultBuilder, parameters: Mapping[str, Any]
    ) -> None:
        runtime = self._require_runtime()
        converter = runtime.converter

        coerced: dict[str, str] = {}
        for key, value in parameters.items():
            try:
                coerced[key] = converter.to_string(value)
            except ConversionError as exc:
                logger.warning("Option '%s' cannot be converted to a string", key, exc_info=True)
                builder.error(
                    VerificationErrorBuilder.with_exception(exc)
                    .code(StandardCode.INTERNAL)
                    .parameter_key(key)
                    .build()
                )

        # A partially coerced map would surface bogus missing-option errors.
        if builder.has_errors:
            return

        scheme = coerced.get(SCHEME_KEY, self._default_scheme)
        logger.debug("Verifying %d option(s) against catalog scheme '%s'", len(coerced), scheme)

        try:
            outcome = runtime.catalog.validate(scheme, coerced)
        except UnknownSchemeError:
            builder.error(VerificationErrorBuilder.with_unsupported_component(scheme).build())
            return

        if not outcome.success:
            _translate_outcome(builder, outcome)

    # Option helpers

    def get_option(
        self,
        parameters: Mapping[str, Any],
        key: str,
        type_: type[T],
        default_supplier: Callable[[], T] | None = None,
    ) -> T | None:
        """
        Return option `key` converted to `type_`.

        Absent (or None) options yield None, or `default_supplier()` when
        given. Conversion failures propagate as ConversionError.
        """
        value = parameters.get(key)
        if value is None:
            return default_supplier() if default_supplier is not None else None
        return self._require_runtime().converter.convert(type_, value)

    def get_mandatory_option(self, parameters: Mapping[str, Any], key: str, type_: type[T]) -> T:
        value = self.get_option(parameters, key, type_)
        if value is None:
            raise NoSuchOptionError(key)
        return value

    def set_properties(
        self,
        instance: T,
        properties: Mapping[str, Any],
        *,
        prefix: str | None = None,
    ) -> T:
        """
        Assign known options onto `instance` through its registered bindings.

        Literal values are converted; reference values (e.g. "#pool") are
        looked up in the registry after all literals are bound.
        """
        runtime = self._require_runtime()
        return binding.set_properties(
            instance,
            properties,
            converter=runtime.converter,
            registry=runtime.registry,
            prefix=prefix,
            marker=self._reference_marker,
        )

    def _require_runtime(self) -> VerifierRuntime:
        if self._runtime is None:
            raise RuntimeError("Verifier runtime is not set")
        return self._runtime


def _translate_outcome(builder: ResultBuilder, outcome: CatalogOutcome) -> None:
    # Category order is part of the output contract.
    for name in outcome.unknown:
        builder.error(VerificationErrorBuilder.with_unknown_option(name).build())
    for name in outcome.required:
        builder.error(VerificationErrorBuilder.with_missing_option(name).build())
    for invalid in (outcome.invalid_boolean, outcome.invalid_integer, outcome.invalid_number):
        for name, value in invalid.items():
            builder.error(VerificationErrorBuilder.with_illegal_option(name, value).build())
    for name, value in outcome.invalid_enum.items():
        builder.error(
            VerificationErrorBuilder.with_illegal_option(name, value)
            .detail(DETAIL_ENUM_VALUES, outcome.enum_choices_for(name))
            .build()
        )

