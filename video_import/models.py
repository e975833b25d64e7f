"""Records passed between the pipeline stages"""

import re
from dataclasses import dataclass
from typing import Any, Dict

LENGTH_RE = re.compile(r"^\d{2,}:\d{2}(:\d{2})?$")


@dataclass(frozen=True)
class InputRow:
    source_url: str
    line_number: int = 0


@dataclass(frozen=True)
class VideoMetadata:
    video_id: str
    title: str
    duration: str
    embeddable: bool

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]) -> "VideoMetadata":
        snippet = item.get('snippet') or {}
        content_details = item.get('contentDetails') or {}
        status = item.get('status') or {}
        return cls(
            video_id=item.get('id', ''),
            title=snippet.get('title', ''),
            duration=content_details.get('duration', ''),
            embeddable=bool(status.get('embeddable', False)),
        )


@dataclass(frozen=True)
class PublishableRecord:
    title: str
    url: str
    length: str

    def __post_init__(self):
        for name in ('title', 'url', 'length'):
            if not getattr(self, name):
                raise ValueError(f"PublishableRecord.{name} must not be empty")
        if not LENGTH_RE.match(self.length):
            raise ValueError(f"Invalid length {self.length!r}, expected (HH:)MM:SS")

    def to_fields(self) -> Dict[str, str]:
        return {
            'title': self.title,
            'url': self.url,
            'length': self.length,
        }


@dataclass
class ImportSummary:
    published: int = 0
    skipped: int = 0
    failed: int = 0
    missing: int = 0
