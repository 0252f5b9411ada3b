# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe dispatch: the single-request path and the concurrent fan-in."""

from __future__ import annotations

import logging
import queue
import threading

from ..config import ProbeSettings, load_probe_settings
from ..errors import InvalidRequestCountError, TransportError
from ..http.client import ConnectionClient, create_default_connection_client
from ..http.models import ParsedResponse, Target
from ..http.parser import parse_response
from ..models import Measurement

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Runs probes against a ConnectionClient.

    Failure policy: one failed probe aborts the batch. `collect` re-raises the
    first error it receives, cancels probes that have not started and does not
    wait for the ones already on the wire. No partial measurement set is ever
    returned.
    """

    def __init__(self, client: ConnectionClient | None = None, settings: ProbeSettings | None = None):
        self.settings = settings or load_probe_settings()
        self.client = client or create_default_connection_client(self.settings)

    def measure(self, target: Target) -> Measurement:
        raw = self.client.probe(target)
        parsed = parse_response(raw.content)
        return Measurement(status_code=parsed.status_code, elapsed_ms=raw.elapsed_ms, size_bytes=raw.size)

    def fetch(self, target: Target) -> ParsedResponse:
        """Run one probe synchronously and return the parsed response."""
        return parse_response(self.client.probe(target).content)

    def pool_size(self, count: int, max_workers: int | None = None) -> int:
        bound = max_workers or self.settings.max_workers or count
        return max(1, min(bound, count))

    def _worker(
        self,
        target: Target,
        jobs: queue.SimpleQueue[int],
        results: queue.SimpleQueue[tuple[Measurement | None, Exception | None]],
        abort: threading.Event,
    ) -> None:
        while not abort.is_set():
            try:
                jobs.get_nowait()
            except queue.Empty:
                return
            try:
                results.put((self.measure(target), None))
            except Exception as exc:  # noqa: BLE001
                results.put((None, exc))

    def collect(self, target: Target, count: int, *, max_workers: int | None = None) -> list[Measurement]:
        """
        Probe `target` `count` times concurrently; measurements come back in arrival order.

        Workers are daemon threads fed from a job queue, and the caller performs
        exactly `count` receives on the result queue. After a failure the
        remaining workers stop taking jobs; probes already on the wire are left
        running and never keep the interpreter alive.
        """
        if count < 1:
            raise InvalidRequestCountError(count)

        workers = self.pool_size(count, max_workers)
        logger.debug("dispatching %d probes on %d workers", count, workers)

        jobs: queue.SimpleQueue[int] = queue.SimpleQueue()
        for index in range(count):
            jobs.put(index)
        results: queue.SimpleQueue[tuple[Measurement | None, Exception | None]] = queue.SimpleQueue()
        abort = threading.Event()

        for n in range(workers):
            threading.Thread(
                target=self._worker,
                args=(target, jobs, results, abort),
                name=f"tlsprobe-{n}",
                daemon=True,
            ).start()

        measurements: list[Measurement] = []
        try:
            for _ in range(count):
                measurement, error = results.get()
                if error is not None:
                    raise error
                measurements.append(measurement)
        except TransportError as exc:
            logger.warning("aborting batch after %d/%d probes: %s", len(measurements), count, exc.reason or exc)
            raise
        finally:
            abort.set()

        return measurements


__all__ = ["Dispatcher"]
