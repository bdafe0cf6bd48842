from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import httpx
from tqdm import tqdm

from ecokit.core.config import URL_TIMEOUT_SEC
from ecokit.core.errors import stop_ctx


logger = logging.getLogger(__name__)


def _probe(client: httpx.Client, url: str, timeout: float) -> bool:
    try:
        with client.stream("GET", url, timeout=timeout) as response:
            return response.status_code < 400
    except httpx.HTTPError as e:
        logger.debug("URL not reachable: %s (%s)", url, e)
        return False


def check_url(
    url: Union[str, Sequence[str], None],
    timeout: float = URL_TIMEOUT_SEC,
    all_okay: bool = True,
    progress: bool = False,
    client: Optional[httpx.Client] = None,
) -> Union[bool, List[bool]]:
    """Check whether one or more URLs can be opened.

    Spaces in URLs are encoded as ``%20`` before probing. Only the response
    headers are read.

    Args:
        url: A URL or a list of URLs.
        timeout: Timeout in seconds per request (>= 1).
        all_okay: Return a single bool (all reachable) instead of one bool per URL.
        progress: Show a progress bar while checking.
        client: Optional pre-configured ``httpx.Client``.

    Returns:
        True/False, or a list of bools in input order when ``all_okay`` is False.

    Raises:
        InvalidArgument: On a missing URL, non-string URL, or invalid timeout.
    """
    if url is None:
        stop_ctx("url cannot be NULL", url=url)

    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 1:
        stop_ctx("`timeout` must be a positive number", timeout=timeout)

    if not isinstance(all_okay, bool):
        stop_ctx("`all_okay` must be a single logical value", all_okay=all_okay)

    if not isinstance(url, (str, list, tuple)):
        stop_ctx("`url` must be a character string or a list of them", url=url)
    urls = [url] if isinstance(url, str) else list(url)
    if not urls:
        stop_ctx("url cannot be empty", url=url)
    for u in urls:
        if not isinstance(u, str) or not u:
            stop_ctx("`url` must be a character string", url=u)

    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        results = [
            _probe(client, u.replace(" ", "%20"), timeout)
            for u in tqdm(urls, desc="Checking URLs", disable=not progress)
        ]
    finally:
        if owns_client:
            client.close()

    if all_okay:
        return all(results)
    return results


__all__ = ["check_url"]
