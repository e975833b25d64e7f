"""
YouTube to Contentful Video Import Tool

Structure:
    - csv_reader.py: Read video URLs from the input CSV
    - url_parser.py: Extract video IDs from YouTube URLs
    - youtube_client.py: Fetch title/duration/embeddable via the YouTube Data API
    - duration.py: Format YouTube durations as (HH:)MM:SS
    - contentful_publisher.py: Create and publish Contentful entries
    - pipeline.py: Run the whole import
"""
