"""Console entry point.

Usage:
    python -m healthmetrics
"""

import sys

import structlog

from .application.metrics import EvaluateMetricsQueryHandler
from .cli import MenuApp, Prompter
from .domain.calculation import BMRCalculator
from .domain.core.exceptions.domain_errors import InvalidConfigurationError
from .infrastructure.config import load_settings
from .infrastructure.logging_config import configure_logging


def main() -> int:
    try:
        settings = load_settings()
    except InvalidConfigurationError as e:
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings)
    logger = structlog.get_logger(__name__)
    logger.debug("Starting", bmr_formula=settings.bmr_formula.value)

    handler = EvaluateMetricsQueryHandler(
        bmr_calculator=BMRCalculator(formula=settings.bmr_formula)
    )
    return MenuApp(handler, Prompter()).run()


if __name__ == "__main__":
    sys.exit(main())
