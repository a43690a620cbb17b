"""Reporter: prints the summary report of a training to stdout.

Usage:
    python -m reporter

Set TRAINING_CATALOG_PATH to report on a JSON catalog instead of the
built-in Kotlin sample.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from training_catalog.exceptions import CatalogError
from training_catalog.models.training import Training
from training_catalog.report import try_build_training_summary
from training_catalog.sample_data import SAMPLE_USERS, build_kotlin_training
from training_catalog.serialization import load_catalog

from reporter.config import CATALOG_PATH, LOG_LEVEL

logger = logging.getLogger(__name__)


def _load_training(catalog_path: Path | None) -> Training:
    """Load the catalog file, or build the sample training with its users."""
    if catalog_path is not None:
        return load_catalog(catalog_path)
    training = build_kotlin_training()
    training.enroll(SAMPLE_USERS)
    return training


def main(catalog_path: Path | None = CATALOG_PATH) -> int:
    """Render one training report. Returns the process exit code."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        training = _load_training(catalog_path)
    except FileNotFoundError:
        logger.error("Catalog not found at %s", catalog_path)
        return 1
    except CatalogError as exc:
        logger.error("Invalid catalog at %s: %s", catalog_path, exc)
        return 1

    result = try_build_training_summary(training)
    if not result.ok:
        return 1

    print(result.report)
    logger.info("Report printed for %s", training.name)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
