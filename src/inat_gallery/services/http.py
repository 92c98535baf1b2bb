"""
Shared HTTP client for outbound API calls.

Provides a pre-configured ``requests.Session`` that makes exactly one attempt
per request.  Failed lookups are handled by the caller's fallback policy, not
by transport-level retries, so the adapter is mounted with ``total=0``.

Usage::

    from inat_gallery.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from inat_gallery import __version__
from inat_gallery.config import get_settings

#: Single attempt, no backoff.
DEFAULT_RETRY = Retry(
    total=0,
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

#: None means the requests default (wait indefinitely).
DEFAULT_TIMEOUT: float | None = None

USER_AGENT = f"inat-gallery/{__version__} (+https://www.inaturalist.org/pages/api+reference)"


def create_session(
    retry: Retry | None = None,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the single-attempt adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request. ``None`` keeps
            the requests default.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    if timeout is None:
        return s

    # Inject the default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session(timeout=get_settings().request_timeout)
