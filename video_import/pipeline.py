"""Import pipeline: CSV rows -> YouTube metadata -> Contentful entries"""

import logging
from typing import List, Sequence

from .config import ImportSettings
from .csv_reader import load_rows
from .duration import normalize_duration
from .models import ImportSummary, InputRow, PublishableRecord, VideoMetadata
from .url_parser import ExtractionError, extract_video_id, watch_url

logger = logging.getLogger(__name__)


class VideoImportPipeline:
    def __init__(self, settings: ImportSettings, youtube_client, publisher):
        self.settings = settings
        self.youtube_client = youtube_client
        self.publisher = publisher

    def extract_ids(self, rows: Sequence[InputRow]) -> List[str]:
        video_ids = []
        for row in rows:
            try:
                video_ids.append(extract_video_id(row.source_url))
            except ExtractionError as exc:
                raise ExtractionError(row.source_url, line_number=row.line_number) from exc
        logger.info(f"Video IDs: {video_ids}")
        return video_ids

    def build_records(self, videos: Sequence[VideoMetadata], summary: ImportSummary) -> List[PublishableRecord]:
        records = []
        for video in videos:
            if not video.embeddable:
                logger.info(f"⏭️  This video isn't embeddable: {video.title} ({video.video_id})")
                summary.skipped += 1
                continue

            records.append(PublishableRecord(
                title=video.title,
                url=watch_url(video.video_id),
                length=normalize_duration(video.duration),
            ))
        return records

    def publish_records(self, records: Sequence[PublishableRecord], summary: ImportSummary):
        for idx, record in enumerate(records, 1):
            logger.info(f"[{idx}/{len(records)}] Uploading {record.title}")
            try:
                self.publisher.create_and_publish(self.settings.content_type, record.to_fields())
                summary.published += 1
            except Exception as e:
                summary.failed += 1
                logger.error(f"✗ Failed to publish {record.url}: {e}")

    def run(self, rows: Sequence[InputRow]) -> ImportSummary:
        """
        Import the given rows.

        Any unrecognized URL aborts the run before YouTube is contacted.
        Non-embeddable videos are skipped. A failed publish is logged and
        the remaining records are still attempted.
        """
        summary = ImportSummary()

        logger.info(f"\n🚀 Starting import: {len(rows)} videos\n")
        video_ids = self.extract_ids(rows)
        if not video_ids:
            logger.warning("⚠️  No videos to import")
            return summary

        videos = self.youtube_client.fetch_videos(video_ids)

        returned_ids = {video.video_id for video in videos}
        not_found = [video_id for video_id in video_ids if video_id not in returned_ids]
        if not_found:
            summary.missing = len(not_found)
            logger.warning(f"⚠️  YouTube returned no data for: {', '.join(not_found)}")

        records = self.build_records(videos, summary)
        logger.info("Youtube API data parsed for uploading to Contentful:")
        for record in records:
            logger.info(f"   {record.title} | {record.url} | {record.length}")

        logger.info("Uploading to Contentful...")
        self.publish_records(records, summary)

        self._print_summary(summary)
        return summary

    def process_file(self, file_path: str) -> ImportSummary:
        rows = load_rows(file_path, url_column=self.settings.url_column)
        return self.run(rows)

    @staticmethod
    def _print_summary(summary: ImportSummary):
        logger.info("\n" + "=" * 80)
        logger.info("📊 IMPORT SUMMARY")
        logger.info("=" * 80)
        logger.info(f"✅ Published: {summary.published}")
        logger.info(f"⏭️  Skipped (not embeddable): {summary.skipped}")
        logger.info(f"🔍 Not found on YouTube: {summary.missing}")
        logger.info(f"❌ Failed: {summary.failed}")
        logger.info("=" * 80)
