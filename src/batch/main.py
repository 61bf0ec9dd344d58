"""
main.py
Around Post Dump — Entry point and orchestrator.

Thin wiring layer: loads the configuration, builds the pipeline, runs it
once and stops Spark. Contains zero business logic.

Usage (after `pip install .`, connector packages from SPARK_JARS_PACKAGES):
  around-post-dump
  python -m src.batch.main
"""

import sys

from src.batch.config import load_config
from src.batch.pipeline import build_pipeline
from src.batch.spark_session import create_spark_session
from src.common.errors import ConfigError, PostDumpError
from src.common.logger import get_logger

log = get_logger("around.post_dump")


def main() -> int:
    try:
        config = load_config()
    except ConfigError as exc:
        log.error("Invalid configuration: %s", exc)
        return 2

    pipeline = build_pipeline(config)
    spark = create_spark_session(config.spark)
    try:
        pipeline.run(spark)
    except PostDumpError:
        log.exception("Post dump failed; destination %s must be reloaded by a full rerun",
                      config.destination.table_spec)
        return 1
    finally:
        spark.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
