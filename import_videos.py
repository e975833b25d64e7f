#!/usr/bin/env python3
"""
YouTube to Contentful Video Import Tool

Reads a CSV of YouTube URLs, looks the videos up on the YouTube Data API
and creates a published Contentful entry for each embeddable one.
Supports configuration via config.yaml, .env and environment variables.
"""

import logging
import sys

from video_import.config import Config, ConfigError, ImportSettings
from video_import.contentful_publisher import ContentfulPublisher
from video_import.logger_config import setup_logging
from video_import.pipeline import VideoImportPipeline
from video_import.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def main():
    try:
        config = Config()
    except ConfigError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        sys.exit(1)

    log_file = config.get('logging.log_file', '')
    setup_logging(
        log_level=config.get('logging.level', 'INFO'),
        log_file=log_file if log_file else None,
        verbose=config.get_bool('logging.verbose', False),
    )

    settings = ImportSettings.from_config(config)
    try:
        settings.validate()
    except ConfigError as exc:
        logger.error(f"❌ {exc}")
        logger.error("   Set them in the environment, a .env file or config.yaml")
        sys.exit(1)

    logger.info("=" * 80)
    logger.info("🎬 YouTube to Contentful Video Import")
    logger.info("=" * 80)
    if settings.dry_run:
        logger.info("🧪 DRY RUN MODE")
    logger.info(f"Input file: {settings.csv_file} (column: {settings.url_column})")
    logger.info(f"Contentful: space {settings.contentful_space_id or '-'}, environment {settings.contentful_environment}")
    logger.info(f"Content type: {settings.content_type} ({settings.locale})")
    logger.info("=" * 80)

    youtube_client = YouTubeClient(
        api_key=settings.youtube_api_key,
        api_url=settings.youtube_api_url,
        timeout=settings.timeout,
    )
    publisher = ContentfulPublisher(
        management_token=settings.contentful_token,
        space_id=settings.contentful_space_id,
        environment=settings.contentful_environment,
        locale=settings.locale,
        api_url=settings.contentful_api_url,
        timeout=settings.timeout,
        dry_run=settings.dry_run,
    )

    try:
        pipeline = VideoImportPipeline(settings, youtube_client, publisher)
        summary = pipeline.process_file(settings.csv_file)
    except KeyboardInterrupt:
        logger.warning("\n\n⚠️  Interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"\n❌ Fatal error: {e}", exc_info=True)
        sys.exit(1)

    logger.info("Finished!")
    if summary.failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
