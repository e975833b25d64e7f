import pytest

from video_import import contentful_publisher
from video_import.contentful_publisher import ContentfulPublisher, PublishError

ENTRIES_URL = 'https://api.contentful.com/spaces/space123/environments/master/entries'
FIELDS = {'title': 'Test', 'url': 'https://www.youtube.com/watch?v=BBB222', 'length': '03:00'}
LOCALIZED = {
    'title': {'en-US': 'Test'},
    'url': {'en-US': 'https://www.youtube.com/watch?v=BBB222'},
    'length': {'en-US': '03:00'},
}


@pytest.fixture
def patch_http(monkeypatch, recording_http):
    def _patch(*responses):
        http = recording_http(*responses)
        monkeypatch.setattr(contentful_publisher.requests, 'request', http.request)
        return http
    return _patch


def _publisher(**kwargs):
    return ContentfulPublisher(management_token='cf-token', space_id='space123', timeout=7, **kwargs)


def test_create_then_publish(patch_http, fake_response):
    created = {'sys': {'id': 'entry1', 'version': 1}, 'fields': LOCALIZED}
    published = {'sys': {'id': 'entry1', 'version': 2, 'publishedVersion': 1}, 'fields': LOCALIZED}
    http = patch_http(fake_response(201, created), fake_response(200, published))

    result = _publisher().create_and_publish('video', FIELDS)

    assert result == published
    create, publish = http.calls
    assert create['method'] == 'post'
    assert create['url'] == ENTRIES_URL
    assert create['json'] == {'fields': LOCALIZED}
    assert create['headers']['Authorization'] == 'Bearer cf-token'
    assert create['headers']['Content-Type'] == 'application/vnd.contentful.management.v1+json'
    assert create['headers']['X-Contentful-Content-Type'] == 'video'
    assert create['timeout'] == 7

    assert publish['method'] == 'put'
    assert publish['url'] == f"{ENTRIES_URL}/entry1/published"
    assert publish['headers']['X-Contentful-Version'] == '1'
    assert 'X-Contentful-Content-Type' not in publish['headers']


def test_custom_environment_and_locale(patch_http, fake_response):
    http = patch_http(
        fake_response(201, {'sys': {'id': 'e', 'version': 3}}),
        fake_response(200, {'sys': {'id': 'e'}}),
    )
    publisher = _publisher(environment='staging', locale='de-DE', api_url='https://cma.example/')
    publisher.create_and_publish('clip', {'title': 'Hallo'})

    assert http.calls[0]['url'] == 'https://cma.example/spaces/space123/environments/staging/entries'
    assert http.calls[0]['json'] == {'fields': {'title': {'de-DE': 'Hallo'}}}
    assert http.calls[1]['headers']['X-Contentful-Version'] == '3'


def test_create_failure(patch_http, fake_response):
    http = patch_http(fake_response(422, {'message': 'Validation error'}))
    with pytest.raises(PublishError, match='create failed: HTTP 422: Validation error'):
        _publisher().create_and_publish('video', FIELDS)
    assert len(http.calls) == 1


def test_publish_failure(patch_http, fake_response):
    patch_http(
        fake_response(201, {'sys': {'id': 'entry1', 'version': 1}}),
        fake_response(409, {'message': 'VersionMismatch'}),
    )
    with pytest.raises(PublishError, match='publish failed: HTTP 409'):
        _publisher().create_and_publish('video', FIELDS)


def test_network_error(patch_http, connection_error):
    patch_http(connection_error)
    with pytest.raises(PublishError, match='create error'):
        _publisher().create_and_publish('video', FIELDS)


def test_create_response_without_id(patch_http, fake_response):
    patch_http(fake_response(201, {'sys': {}}))
    with pytest.raises(PublishError, match='sys.id'):
        _publisher().create_and_publish('video', FIELDS)


def test_dry_run_makes_no_calls(patch_http):
    http = patch_http()
    result = _publisher(dry_run=True).create_and_publish('video', FIELDS)
    assert http.calls == []
    assert result['fields'] == LOCALIZED
