# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Connection client abstraction and the raw TLS implementation."""

from __future__ import annotations

import logging
import socket
import ssl
import time
from typing import Protocol

from ..config import ProbeSettings, load_probe_settings
from ..errors import ProbeConnectError, ProbeReadError, ProbeWriteError
from .models import RawResponse, Target

logger = logging.getLogger(__name__)


class ConnectionClient(Protocol):
    """Minimal protocol for issuing one request over one fresh connection."""

    def probe(self, target: Target) -> RawResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def build_request(target: Target) -> bytes:
    """Render the single HTTP/1.0 request sent on every probe."""
    return f"GET {target.path} HTTP/1.0\r\nHost: {target.host_header}\r\n\r\n".encode("ascii")


class TlsConnectionClient(ConnectionClient):
    """Opens a TLS connection per probe and drains it until the peer closes."""

    def __init__(self, settings: ProbeSettings | None = None, ssl_context: ssl.SSLContext | None = None):
        self.settings = settings or load_probe_settings()
        self._ssl_context = ssl_context or ssl.create_default_context()

    def probe(self, target: Target) -> RawResponse:
        started = time.perf_counter()
        try:
            sock = socket.create_connection(target.address, timeout=self.settings.connect_timeout)
        except OSError as exc:
            raise ProbeConnectError(target, exc) from exc

        try:
            try:
                conn = self._ssl_context.wrap_socket(sock, server_hostname=target.host)
            except OSError as exc:
                raise ProbeConnectError(target, exc) from exc

            with conn:
                conn.settimeout(self.settings.read_timeout)
                try:
                    conn.sendall(build_request(target))
                except OSError as exc:
                    raise ProbeWriteError(target, exc) from exc
                try:
                    content = self._drain(conn)
                except OSError as exc:
                    raise ProbeReadError(target, exc) from exc
        finally:
            sock.close()

        response = RawResponse(content=content, elapsed=time.perf_counter() - started)
        logger.debug("probe %s%s: %d bytes in %d ms", target.host_header, target.path, response.size, response.elapsed_ms)
        return response

    def _drain(self, conn: socket.socket) -> bytes:
        chunks: list[bytes] = []
        while True:
            chunk = conn.recv(self.settings.read_chunk_bytes)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        return None


def create_default_connection_client(settings: ProbeSettings | None = None) -> ConnectionClient:
    """Factory for the default raw TLS client."""
    return TlsConnectionClient(settings or load_probe_settings())
