from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from compverify.catalog import ComponentSchema, InMemoryCatalog
from compverify.configuration import load_verification_config
from compverify.contracts import (
    Result,
    ResultBuilder,
    Scope,
    Status,
    VerificationConfig,
    VerificationErrorBuilder,
    VerifierNotFoundError,
    VerifierRegistry,
    VerifierRuntime,
    VerifierSettings,
)
from compverify.conversion import DefaultValueConverter
from compverify.orchestration.registry import DictObjectRegistry

logger = logging.getLogger("compverify.api")


def build_runtime(
    settings: VerifierSettings | None = None,
    *,
    schemas: Iterable[ComponentSchema] = (),
    objects: Mapping[str, Any] | None = None,
) -> VerifierRuntime:
    """Wire the default catalog, converter and registry for the given settings."""
    settings = settings or VerifierSettings()
    catalog = InMemoryCatalog(
        schemas,
        reference_marker=settings.reference_marker,
        placeholder_prefix=settings.placeholder_prefix,
        placeholder_suffix=settings.placeholder_suffix,
    )
    return VerifierRuntime(
        catalog=catalog,
        converter=DefaultValueConverter(),
        registry=DictObjectRegistry(objects=dict(objects or {})),
    )


def run_verification(
    scheme: str,
    scope: Scope,
    parameters: Mapping[str, Any],
    *,
    verifiers: VerifierRegistry,
) -> Result:
    """Look up the verifier for scheme and run it."""
    try:
        verifier = verifiers.get(scheme)
    except VerifierNotFoundError:
        logger.debug("No verifier registered for scheme '%s'", scheme)
        return (
            ResultBuilder.with_status_and_scope(Status.ERROR, scope)
            .error(VerificationErrorBuilder.with_unsupported_component(scheme).build())
            .build()
        )
    return verifier.verify(scope, parameters)


def run_verification_config(
    config: VerificationConfig, *, verifiers: VerifierRegistry
) -> Result:
    return run_verification(
        config.verifier.scheme,
        config.verifier.scope,
        config.parameters,
        verifiers=verifiers,
    )


def verify_from_yaml(path: str | Path, *, verifiers: VerifierRegistry) -> Result:
    config = load_verification_config(path)
    return run_verification_config(config, verifiers=verifiers)
