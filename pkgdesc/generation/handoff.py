"""Gated handoff of an assembled package to a generator.

The pipeline is strictly linear:

    readiness gate -> prepare_output -> generate

The readiness gate is evaluated exactly once. Nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from pkgdesc.errors import EnvironmentNotReady, GenerationFailed
from pkgdesc.generation.protocols import Environment, Generator
from pkgdesc.model.package import Package

logger = logging.getLogger("pkgdesc.generation.handoff")

STEP_PREPARE = "prepare_output"
STEP_GENERATE = "generate"


@dataclass
class GenerationResult:
    """Outcome of a successful handoff."""

    package_name: str
    generator_name: str
    steps: List[str] = field(default_factory=list)
    artifacts: List[str] = field(default_factory=list)


def run(package: Package, environment: Environment, generator: Generator) -> GenerationResult:
    """Hand an assembled package to a generator.

    Args:
        package: Fully resolved root package.
        environment: Readiness check, consulted once.
        generator: Generator receiving the package.

    Returns:
        GenerationResult: Completed steps and any artifact paths the
        generator reports in ``Generator.artifacts``.

    Raises:
        EnvironmentNotReady: If the readiness gate fails. No generator
            call is made.
        GenerationFailed: If ``prepare_output`` or ``generate`` raises.
            The original exception is chained as the cause.
    """
    if not environment.is_ready():
        logger.warning(
            "Environment not ready; skipping generation of '%s'", package.name
        )
        raise EnvironmentNotReady(
            f"Generator environment is not ready for package '{package.name}'"
        )

    result = GenerationResult(package_name=package.name, generator_name=generator.name)

    for step, call in (
        (STEP_PREPARE, generator.prepare_output),
        (STEP_GENERATE, generator.generate),
    ):
        logger.info("Running %s.%s for '%s'", generator.name, step, package.name)
        try:
            call(package)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error(
                "%s.%s failed for '%s': %s", generator.name, step, package.name, e
            )
            raise GenerationFailed(package.name, step, e) from e
        result.steps.append(step)

    result.artifacts = [str(p) for p in generator.artifacts]
    logger.info(
        "Generated '%s' with %s (%d artifact(s))",
        package.name,
        generator.name,
        len(result.artifacts),
    )
    return result
