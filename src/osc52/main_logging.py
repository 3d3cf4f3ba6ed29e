"""Logging configuration for the osc52 CLI."""
import logging

# Parent logger of every osc52 module logger.
PACKAGE_LOGGER: str = "osc52"


def configure_logging(verbose: bool) -> None:
    """Configure logging for a single osc52 invocation.

    Args:
        verbose: If True, osc52's own loggers emit DEBUG records; otherwise
            only warnings and errors.

    The root logger stays at WARNING so --verbose never turns on DEBUG
    output from third-party libraries. Records go to stderr and are
    prefixed with the logger name, keeping them apart from a sequence
    written to stdout.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
