from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from compverify.api import build_runtime, run_verification_config
from compverify.configuration import ConfigError, load_verification_config
from compverify.contracts import Result, Status, VerifierSettings
from compverify.orchestration.registry import DictVerifierRegistry
from plugins.tcp_endpoint import TCP_SCHEMA, TcpEndpointVerifier


def build_registry(settings: VerifierSettings) -> DictVerifierRegistry:
    runtime = build_runtime(settings, schemas=[TCP_SCHEMA])
    verifiers = {
        TCP_SCHEMA.scheme: TcpEndpointVerifier(
            runtime, reference_marker=settings.reference_marker
        ),
    }
    return DictVerifierRegistry(verifiers=verifiers)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Verify component options from a YAML file.")
    parser.add_argument("config_yaml", type=Path, help="Path to verification YAML")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def format_result(result: Result) -> str:
    lines = [f"{result.scope.value}: {result.status.value}"]
    for error in result.errors:
        keys = ",".join(sorted(error.parameter_keys))
        suffix = f" [{keys}]" if keys else ""
        lines.append(f"  - {error.code.name}{suffix}: {error.description or ''}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_verification_config(args.config_yaml)
    except ConfigError as exc:
        print(f"Invalid verification config: {exc}", file=sys.stderr)
        return 1
    registry = build_registry(config.settings)
    result = run_verification_config(config, verifiers=registry)

    print(format_result(result))
    return 1 if result.status is Status.ERROR else 0


if __name__ == "__main__":
    sys.exit(main())
