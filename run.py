"""Entry point for the Sahasranama text pipeline."""

import logging
import sys

from sahasranama.config import load_config
from sahasranama.pipeline import Pipeline


def main() -> int:
    """Load configuration, run the pipeline and report the outcome."""
    config = load_config()
    logging.basicConfig(level=config.logging.level, format=config.logging.format)
    logger = logging.getLogger("sahasranama")

    try:
        result = Pipeline(config).run()
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Pipeline failed: %s", exc)
        return 1

    logger.info(
        "Done: %d annotated words, %d names, %d missing commentary",
        len(result.annotations),
        len(result.entries),
        len(result.report.missing),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
