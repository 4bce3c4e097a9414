"""CLI command to resolve a package and hand it to the manifest generator."""

from __future__ import annotations

import logging

from pkgdesc.config.loader import load_generator_config
from pkgdesc.errors import EnvironmentNotReady, PkgDescError
from pkgdesc.generation.handoff import run
from pkgdesc.generation.manifest import ManifestGenerator, WorkspaceEnvironment
from pkgdesc.resolver.provider import ProviderRegistry

logger = logging.getLogger("pkgdesc.cli.generate")

EXIT_NOT_READY = 2


def generate_command(args) -> int:
    """Execute the generate command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: 0 on success, 2 when the environment is not ready, 1 otherwise.
    """
    try:
        config = load_generator_config(getattr(args, "config", None))
        output_dir = getattr(args, "output", None)
        if output_dir:
            config = config.model_copy(update={"output_dir": output_dir})

        registry = ProviderRegistry.get_instance()
        package = registry.resolve(args.package)

        environment = WorkspaceEnvironment(config).initialize()
        result = run(package, environment, ManifestGenerator(config))

        for artifact in result.artifacts:
            logger.info("Wrote %s", artifact)
        return 0

    except EnvironmentNotReady as e:
        logger.error("%s", e)
        return EXIT_NOT_READY
    except PkgDescError as e:
        logger.error("Generate command failed: %s", e, exc_info=logger.isEnabledFor(logging.DEBUG))
        return 1
