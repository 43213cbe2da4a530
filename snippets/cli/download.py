"""Fetching snippet bodies over HTTP."""

import httpx

DEFAULT_TIMEOUT = 30.0


class DownloadError(Exception):
    """Raised when a snippet body cannot be downloaded."""

    def __init__(self, url: str, details: str):
        """Initialize with URL and failure details."""
        self.url = url
        super().__init__(f"Failed to download {url}: {details}")


def fetch_snippet_body(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """GET ``url`` and return the response body as text.

    Redirects are followed. Any transport failure or non-success status
    is raised as DownloadError.
    """
    try:
        with httpx.Client(
            timeout=timeout, follow_redirects=True, transport=transport
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.text
    except httpx.HTTPStatusError as e:
        raise DownloadError(url, f"HTTP {e.response.status_code}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise DownloadError(url, str(e) or type(e).__name__) from e
