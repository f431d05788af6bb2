"""
Tests for the YouTube Data API client using a mocked HTTP transport.
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import httpx
import pytest

from tools.youtube_tools import (
    EmptyResultError,
    NoResultsError,
    YouTubeAPIClient,
    YouTubeAPIError,
    YouTubeChannelNotFoundError,
    YouTubeQuotaExceededError
)


SEARCH_RESPONSE = {
    "items": [
        {"id": {"kind": "youtube#video", "videoId": "vid1"}},
        {"id": {"kind": "youtube#channel", "channelId": "UC-other"}},
        {"id": {"kind": "youtube#video", "videoId": "vid2"}},
    ]
}


def make_client(settings, handler):
    """Build an API client whose requests are answered by ``handler``."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YouTubeAPIClient(settings, http_client=http_client)


class TestSearch:
    """Step one: recent video ids for the channel."""

    async def test_search_request_parameters(self, settings):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=SEARCH_RESPONSE)

        client = make_client(settings, handler)
        video_ids = await client.search_channel_video_ids(settings.channel_id, 50)

        assert video_ids == ["vid1", "vid2"]
        request = seen[0]
        assert request.url.path == "/v3/search"
        assert request.url.params["key"] == "test-key"
        assert request.url.params["channelId"] == settings.channel_id
        assert request.url.params["part"] == "snippet,id"
        assert request.url.params["order"] == "date"
        assert request.url.params["maxResults"] == "50"
        assert request.url.params["type"] == "video"

    async def test_missing_items_raises_no_results(self, settings):
        client = make_client(settings, lambda request: httpx.Response(200, json={}))

        with pytest.raises(NoResultsError):
            await client.search_channel_video_ids(settings.channel_id, 50)

    async def test_empty_items_raises_no_results(self, settings):
        client = make_client(settings, lambda request: httpx.Response(200, json={"items": []}))

        with pytest.raises(EmptyResultError):
            await client.search_channel_video_ids(settings.channel_id, 50)

    async def test_items_without_video_ids_raise_no_results(self, settings):
        body = {"items": [{"id": {"kind": "youtube#playlist", "playlistId": "PL1"}}]}
        client = make_client(settings, lambda request: httpx.Response(200, json=body))

        with pytest.raises(NoResultsError):
            await client.search_channel_video_ids(settings.channel_id, 50)

    async def test_odd_search_items_are_skipped(self, settings):
        body = {"items": ["junk", None, {"id": {"videoId": "vid1"}}, {"id": {"videoId": 123}}]}
        client = make_client(settings, lambda request: httpx.Response(200, json=body))

        video_ids = await client.search_channel_video_ids(settings.channel_id, 50)

        assert video_ids == ["vid1"]


class TestDetails:
    """Step two: batched details for exactly the searched ids."""

    async def test_details_request_joins_ids(self, settings, make_item):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"items": [make_item("vid1"), make_item("vid2")]})

        client = make_client(settings, handler)
        items = await client.get_video_details(["vid1", "vid2"])

        assert len(items) == 2
        assert len(seen) == 1
        assert seen[0].url.path == "/v3/videos"
        assert seen[0].url.params["id"] == "vid1,vid2"
        assert seen[0].url.params["part"] == "contentDetails,snippet"
        assert seen[0].url.params["key"] == "test-key"

    async def test_no_detail_items_raises_no_results(self, settings):
        client = make_client(settings, lambda request: httpx.Response(200, json={"items": []}))

        with pytest.raises(NoResultsError):
            await client.get_video_details(["vid1"])


class TestFetchChannelVideos:
    """Both steps together."""

    async def test_requests_are_sequential_and_chained(self, settings, make_item):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            if request.url.path.endswith("/search"):
                return httpx.Response(200, json=SEARCH_RESPONSE)
            assert request.url.params["id"] == "vid1,vid2"
            return httpx.Response(200, json={"items": [make_item("vid1"), make_item("vid2")]})

        client = make_client(settings, handler)
        items = await client.fetch_channel_videos(settings.channel_id, settings.max_results)

        assert [item["id"] for item in items] == ["vid1", "vid2"]
        assert paths == ["/v3/search", "/v3/videos"]
        assert client.request_count == 2

    async def test_empty_search_skips_details_call(self, settings):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, json={"items": []})

        client = make_client(settings, handler)

        with pytest.raises(NoResultsError):
            await client.fetch_channel_videos(settings.channel_id, settings.max_results)
        assert paths == ["/v3/search"]


class TestErrorMapping:
    """HTTP failures become YouTube API errors without retrying."""

    async def test_quota_exceeded(self, settings):
        body = {"error": {"code": 403, "errors": [{"reason": "quotaExceeded"}]}}
        client = make_client(settings, lambda request: httpx.Response(403, json=body))

        with pytest.raises(YouTubeQuotaExceededError):
            await client.search_channel_video_ids(settings.channel_id, 50)

    async def test_other_forbidden(self, settings):
        body = {"error": {"code": 403, "errors": [{"reason": "forbidden"}]}}
        client = make_client(settings, lambda request: httpx.Response(403, json=body))

        with pytest.raises(YouTubeAPIError) as exc_info:
            await client.search_channel_video_ids(settings.channel_id, 50)
        assert not isinstance(exc_info.value, YouTubeQuotaExceededError)
        assert "forbidden" in str(exc_info.value)

    async def test_not_found(self, settings):
        client = make_client(settings, lambda request: httpx.Response(404, json={}))

        with pytest.raises(YouTubeChannelNotFoundError):
            await client.search_channel_video_ids(settings.channel_id, 50)

    async def test_rate_limit_is_not_retried(self, settings):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(429, json={"error": {"message": "Too many requests"}})

        client = make_client(settings, handler)

        with pytest.raises(YouTubeAPIError):
            await client.search_channel_video_ids(settings.channel_id, 50)
        assert len(calls) == 1

    async def test_bad_request_key(self, settings):
        body = {"error": {"code": 400, "errors": [{"reason": "keyInvalid"}]}}
        client = make_client(settings, lambda request: httpx.Response(400, json=body))

        with pytest.raises(YouTubeAPIError, match="keyInvalid"):
            await client.search_channel_video_ids(settings.channel_id, 50)

    async def test_transport_error(self, settings):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(settings, handler)

        with pytest.raises(YouTubeAPIError, match="Request failed"):
            await client.search_channel_video_ids(settings.channel_id, 50)

    async def test_invalid_json(self, settings):
        client = make_client(settings, lambda request: httpx.Response(200, content=b"<html>"))

        with pytest.raises(YouTubeAPIError, match="Invalid JSON"):
            await client.search_channel_video_ids(settings.channel_id, 50)
