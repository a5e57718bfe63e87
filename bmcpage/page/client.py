"""HTTP dispatcher for the management console pages."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Optional, Union

import requests

from bmcpage.config import BMC_BASE_URL, BMC_USER_AGENT

from .constants import DEFAULT_TIMEOUT, TRANSPORT_ERROR_MESSAGE, URL_ERROR_SENTINEL
from .errors import PageError, TransportError
from .notification import NotificationStore
from .protocol import parse_get_envelope, parse_mutation_outcome
from .renderers import FeatureTag, RendererRegistry

logger = logging.getLogger(__name__)


def _log_alert(message: str) -> None:
    logger.error("%s", message)


class Dispatcher:
    """Issues console requests and routes their results.

    ``fetch`` loads page data in the background and hands it to the renderer
    registered for a tag. ``submit`` saves settings and blocks the caller until
    the device answers or the timeout expires; its outcome goes to the
    notification store for the next page load to show.
    """

    def __init__(
        self,
        notifications: NotificationStore,
        renderers: Optional[RendererRegistry] = None,
        *,
        base_url: str = BMC_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        on_transport_error: Callable[[str], None] = _log_alert,
        on_before_send: Optional[Callable[[str, str], None]] = None,
    ) -> None:
        self.notifications = notifications
        self.renderers = renderers if renderers is not None else RendererRegistry()
        self.base_url = base_url
        self.timeout = timeout
        self.on_transport_error = on_transport_error
        self.on_before_send = on_before_send
        if session is None:
            session = requests.Session()
            session.headers.update({'User-Agent': BMC_USER_AGENT})
        self.session = session
        self._submit_lock = threading.Lock()

    def resolve(self, url: str) -> str:
        if url.startswith("http://") or url.startswith("https://"):
            return url
        return self.base_url.rstrip("/") + "/" + url.lstrip("/")

    def _request(self, method: str, url: str, body: Any = None) -> str:
        url = self.resolve(url)
        if self.on_before_send:
            self.on_before_send(method, url)
        # Browser-style cache busting: a fresh timestamp on every bodiless call
        params = {"_": str(int(time.time() * 1000))} if method == "GET" else None
        headers = {"Cache-Control": "no-cache", "Pragma": "no-cache"}
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        logger.debug("%s %s -> %s (%d bytes)", method, url, response.status_code, len(response.content))
        return response.text

    def load(self, url: str, tag: Union[FeatureTag, str]) -> bool:
        """Synchronous body of ``fetch``. Returns True if a renderer consumed the payload."""
        try:
            text = self._request("GET", url)
        except TransportError as exc:
            logger.error("GET for %r failed: %s", tag, exc)
            self.on_transport_error(TRANSPORT_ERROR_MESSAGE)
            return False

        try:
            payload = parse_get_envelope(text)
        except PageError as exc:
            logger.error("Unusable response from %s for %r: %s", url, tag, exc)
            raise
        return self.renderers.dispatch(tag, payload)

    def fetch(self, url: str, tag: Union[FeatureTag, str]) -> threading.Thread:
        """Start a background GET; the renderer runs on the worker thread."""
        worker = threading.Thread(target=self.load, args=(url, tag), daemon=True)
        worker.start()
        return worker

    def submit(self, url: str, body: Any = None) -> str:
        """POST ``body`` and record the outcome. Blocks until done; one submit at a time."""
        with self._submit_lock:
            try:
                raw = self._request("POST", url, body)
            except TransportError as exc:
                logger.warning("ajax post error: %s", exc)
                raw = URL_ERROR_SENTINEL
            outcome = parse_mutation_outcome(raw)
            self.notifications.record_outcome(outcome)
            return outcome
