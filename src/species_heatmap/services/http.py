"""
Shared HTTP client and fixed-delay retry wrapper.

Provides a pre-configured ``requests.Session`` (User-Agent, default timeout)
and ``fetch_json_with_retry``, which owns the retry budget for every API call:
a fixed number of attempts with a constant pause between them.  The session's
own adapter does not retry, so a failed request is never retried twice over.

Usage::

    from species_heatmap.services.http import fetch_json_with_retry

    data = fetch_json_with_retry(url, params, subject="Vanessa cardui")
"""

from __future__ import annotations

import time
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from species_heatmap.services.log import get_log

#: Transport-level retries are off; ``fetch_json_with_retry`` decides.
NO_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_ATTEMPTS = 5
DEFAULT_DELAY = 5.0  # seconds, constant between attempts


class RetryExhaustedError(RuntimeError):
    """Every attempt at a request failed."""

    def __init__(self, subject: str, attempts: int, last_error: BaseException | None) -> None:
        self.subject = subject
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"All {attempts} fetch attempts failed for {subject}: {last_error}")


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with an adapter mounted.

    Args:
        retry: Transport retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = "species-heatmap/0.1 (GBIF occurrence sampler)"

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session()


def fetch_json_with_retry(
    url: str,
    params: dict[str, Any] | None = None,
    *,
    subject: str,
    max_attempts: int = DEFAULT_ATTEMPTS,
    delay: float = DEFAULT_DELAY,
    http: requests.Session | None = None,
) -> dict[str, Any]:
    """
    GET ``url`` and decode its JSON body, retrying on failure.

    Non-2xx responses, transport errors, undecodable bodies and bodies that
    aren't a JSON object all count as a failed attempt.  Attempts are
    separated by a constant ``delay``; there is no pause after the last one.

    Args:
        url: Endpoint URL.
        params: Query parameters (URL-encoded by requests).
        subject: What is being fetched, used in log lines and the error
            (e.g. ``"Vanessa cardui (2010s)"``).
        max_attempts: Total attempts, including the first.
        delay: Seconds to wait between attempts.
        http: Session to use (defaults to the module-level ``session``).

    Raises:
        RetryExhaustedError: After ``max_attempts`` failures, chained from
            the last underlying error.
    """
    log = get_log(__name__)
    client = http or session
    last_error: requests.RequestException | None = None

    for attempt in range(1, max_attempts + 1):
        try:
            resp = client.get(url, params=params or {})
            resp.raise_for_status()
            data = resp.json()
            if not isinstance(data, dict):
                msg = f"Expected a JSON object, got {type(data).__name__}"
                raise requests.exceptions.InvalidJSONError(msg, response=resp)
            result: dict[str, Any] = data
            return result
        except requests.RequestException as exc:
            last_error = exc
            if attempt < max_attempts:
                log.warning(
                    "Attempt %d/%d for %s failed: %s. Retrying in %ss...",
                    attempt,
                    max_attempts,
                    subject,
                    exc,
                    delay,
                )
                if delay > 0:
                    time.sleep(delay)
            else:
                log.error("Attempt %d/%d for %s failed: %s.", attempt, max_attempts, subject, exc)

    raise RetryExhaustedError(subject, max_attempts, last_error) from last_error
