"""Tests for downloading snippet bodies over HTTP."""

import httpx
import pytest

from snippets.cli.download import DownloadError, fetch_snippet_body


def make_transport(handler):
    return httpx.MockTransport(handler)


class TestFetchSnippetBody:
    """Test fetch_snippet_body with a mocked transport."""

    def test_returns_body_text(self):
        def handler(request):
            assert request.method == "GET"
            assert str(request.url) == "https://example.com/snippet.py"
            return httpx.Response(200, text="print('hello')\n")

        body = fetch_snippet_body(
            "https://example.com/snippet.py", transport=make_transport(handler)
        )

        assert body == "print('hello')\n"

    def test_follows_redirects(self):
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(
                    302, headers={"Location": "https://example.com/new"}
                )
            return httpx.Response(200, text="moved")

        body = fetch_snippet_body(
            "https://example.com/old", transport=make_transport(handler)
        )

        assert body == "moved"

    def test_decodes_utf8(self):
        def handler(request):
            return httpx.Response(
                200,
                content="# αβγ".encode(),
                headers={"Content-Type": "text/plain; charset=utf-8"},
            )

        body = fetch_snippet_body(
            "https://example.com/u", transport=make_transport(handler)
        )

        assert body == "# αβγ"

    @pytest.mark.parametrize("status", [404, 500])
    def test_error_status(self, status):
        def handler(request):
            return httpx.Response(status, text="nope")

        with pytest.raises(DownloadError) as exc_info:
            fetch_snippet_body(
                "https://example.com/missing", transport=make_transport(handler)
            )

        assert f"HTTP {status}" in str(exc_info.value)
        assert exc_info.value.url == "https://example.com/missing"

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DownloadError, match="connection refused") as exc_info:
            fetch_snippet_body(
                "https://example.com/a", transport=make_transport(handler)
            )

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_unsupported_scheme(self):
        with pytest.raises(DownloadError):
            fetch_snippet_body("ftp://example.com/a")
