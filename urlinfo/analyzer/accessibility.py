"""Concurrent reachability probing of extracted links.

Every link gets one probe task.  Probes push exactly one boolean outcome
onto a shared, unbounded queue; a single collector drains it until every
probe has reported or the collection window closes, whichever comes first.
Probes still running when the window closes are cancelled, which aborts
their in-flight request.

The resulting count is a lower bound on the number of unreachable links:
a link whose probe is still pending at the deadline is not counted at all.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence, Tuple

import httpx

from urlinfo.analyzer.fetcher import default_headers
from urlinfo.config import settings

logger = logging.getLogger(__name__)


class LinkAccessibilityChecker:
    """Estimate how many links fail to respond within a short window.

    Args:
        window: Collection window in seconds (default
            ``settings.collection_window``).
        probe_timeout: Per-request timeout for a single probe.
        max_concurrency: Upper bound on probes in flight at once; excess
            probes wait for a free slot.
        transport: Optional httpx transport for the probe client.
    """

    def __init__(
        self,
        *,
        window: float | None = None,
        probe_timeout: float | None = None,
        max_concurrency: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.window = window if window is not None else settings.collection_window
        self.probe_timeout = (
            probe_timeout if probe_timeout is not None else settings.probe_timeout
        )
        self.max_concurrency = max(
            1,
            max_concurrency if max_concurrency is not None else settings.max_concurrent_probes,
        )
        self._transport = transport

    async def count_inaccessible(self, links: Sequence[str]) -> int:
        """Probe *links* concurrently and return how many were seen to fail."""
        if not links:
            return 0

        outcomes: asyncio.Queue[bool] = asyncio.Queue()
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async with httpx.AsyncClient(
            headers=default_headers(),
            timeout=self.probe_timeout,
            follow_redirects=True,
            limits=httpx.Limits(max_connections=self.max_concurrency),
            transport=self._transport,
        ) as client:
            tasks = [
                asyncio.create_task(self._probe(client, link, semaphore, outcomes))
                for link in links
            ]
            try:
                inaccessible, received = await self._collect(outcomes, len(tasks))
            finally:
                pending = [task for task in tasks if not task.done()]
                for task in pending:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)

        logger.info(
            "link probing finished",
            extra={
                "links": len(links),
                "observed": received,
                "inaccessible": inaccessible,
                "abandoned": len(links) - received,
            },
        )
        return inaccessible

    async def _collect(self, outcomes: asyncio.Queue[bool], expected: int) -> Tuple[int, int]:
        """Drain *outcomes* until *expected* arrive or the window closes."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.window
        inaccessible = 0
        received = 0

        while received < expected:
            remaining = deadline - loop.time()
            if remaining <= 0:
                break
            try:
                accessible = await asyncio.wait_for(outcomes.get(), timeout=remaining)
            except asyncio.TimeoutError:
                break
            received += 1
            if not accessible:
                inaccessible += 1

        return inaccessible, received

    async def _probe(
        self,
        client: httpx.AsyncClient,
        link: str,
        semaphore: asyncio.Semaphore,
        outcomes: asyncio.Queue[bool],
    ) -> None:
        """GET *link* and report one outcome; the status code is not inspected."""
        async with semaphore:
            try:
                async with client.stream("GET", link):
                    pass
            except Exception as exc:
                # Relative and malformed hrefs end up here too.
                logger.debug("probe failed", extra={"link": link, "error": repr(exc)})
                outcomes.put_nowait(False)
                return
        outcomes.put_nowait(True)
