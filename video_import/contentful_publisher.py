"""Entry creation and publishing via the Contentful Management API"""

import logging
from typing import Any, Dict

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.contentful.com"
CONTENT_TYPE = "application/vnd.contentful.management.v1+json"


class PublishError(Exception):
    pass


class ContentfulPublisher:
    def __init__(
        self,
        management_token: str,
        space_id: str,
        environment: str = 'master',
        locale: str = 'en-US',
        api_url: str = DEFAULT_API_URL,
        timeout: float = 60,
        dry_run: bool = False,
    ):
        self.management_token = management_token
        self.locale = locale
        self.entries_url = f"{api_url.rstrip('/')}/spaces/{space_id}/environments/{environment}/entries"
        self.timeout = timeout
        self.dry_run = dry_run

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers = {
            'Authorization': f"Bearer {self.management_token}",
            'Content-Type': CONTENT_TYPE,
        }
        headers.update(extra)
        return headers

    def _localize(self, fields: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
        return {name: {self.locale: value} for name, value in fields.items()}

    def create_and_publish(self, content_type: str, fields: Dict[str, Any]) -> Dict:
        """
        Create an entry of the given content type, then publish it.

        Args:
            content_type: Contentful content type ID (e.g. 'video')
            fields: Plain field values, wrapped in the configured locale here

        Returns:
            The published entry as returned by Contentful

        Raises:
            PublishError: if either the create or the publish call fails
        """
        payload = {'fields': self._localize(fields)}

        if self.dry_run:
            logger.info(f"🧪 DRY RUN: Would create & publish '{content_type}' entry (NO actual API call)")
            logger.info(f"   Fields: {payload['fields']}")
            return {'sys': {'id': 'dry-run-entry-id', 'version': 1}, 'fields': payload['fields']}

        entry = self._request(
            'post',
            self.entries_url,
            'create',
            json=payload,
            headers=self._headers(**{'X-Contentful-Content-Type': content_type}),
        )

        sys_info = entry.get('sys', {})
        entry_id = sys_info.get('id')
        if not entry_id:
            raise PublishError("Create entry response has no sys.id")

        published = self._request(
            'put',
            f"{self.entries_url}/{entry_id}/published",
            'publish',
            headers=self._headers(**{'X-Contentful-Version': str(sys_info.get('version', 1))}),
        )

        title = published.get('fields', {}).get('title', {}).get(self.locale, fields.get('title'))
        logger.info(f"✅ Entry {entry_id} ({title}) created & published.")
        return published

    def _request(self, method: str, url: str, step: str, **kwargs) -> Dict:
        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise PublishError(f"Contentful {step} error: {exc}") from exc

        if response.status_code not in (200, 201):
            raise PublishError(
                f"Contentful {step} failed: HTTP {response.status_code}: {self._extract_error(response)}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise PublishError(f"Contentful {step} returned invalid JSON: {exc}") from exc

    @staticmethod
    def _extract_error(response: requests.Response) -> str:
        try:
            data = response.json()
            return data.get('message') or response.text
        except (ValueError, AttributeError):
            return response.text[:200]
