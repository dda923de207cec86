"""
The one network operation the modem code performs: GET a status page.
"""

import structlog
from aiohttp import ClientSession, ClientTimeout

from surfer.err.exceptions import ModemNotOkError
from surfer.util.const import FETCH_TIMEOUT_SECONDS, MAX_BODY_BYTES

log = structlog.get_logger(__name__)


async def fetch_page(
    cs: ClientSession,
    url: str,
    timeout: float = FETCH_TIMEOUT_SECONDS,
    limit: int = MAX_BODY_BYTES,
) -> bytes:
    """Request a status page and return (at most `limit` bytes of) the raw body.

    Anything aiohttp raises (connection refused, timeout, cancellation ...) is passed up as-is.
    No retries here; the caller decides if and when to try again.
    The response is released on every way out of the `async with` block, including when the
        caller cancels us mid-read.
    """
    log.debug("Start fetching", url=url)
    async with cs.get(url, timeout=ClientTimeout(total=timeout)) as resp:
        if resp.status != 200:
            raise ModemNotOkError(
                f"Failed to get status page. Status={resp.status}.",
                status_code=resp.status,
            )

        # Don't trust whatever is answering on the gateway address to send a sane amount of data.
        # StreamReader.read(n) may hand back less than n before EOF so keep going until we hit
        #   the cap or run out of body.
        ##
        chunks = []
        remaining = limit
        while remaining > 0:
            chunk = await resp.content.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)

    body = b"".join(chunks)
    if remaining <= 0:
        log.warning("Stopped reading status page at limit", url=url, limit=limit)
    log.debug("Done fetching", url=url, size=len(body))
    return body
