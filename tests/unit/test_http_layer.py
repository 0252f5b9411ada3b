# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import ssl

import pytest

from tlsprobe.config import ProbeSettings
from tlsprobe.errors import (
    ErrorCategory,
    InvalidTargetError,
    ProbeConnectError,
    ProbeReadError,
    ProbeWriteError,
)
from tlsprobe.http import client as client_module
from tlsprobe.http.adapters import StubConnectionClient
from tlsprobe.http.client import TlsConnectionClient, build_request, create_default_connection_client
from tlsprobe.http.models import RawResponse, Target
from tlsprobe.http.url import parse_target


class FakeRawSocket:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeTlsSocket:
    def __init__(self, chunks=(), *, send_exc=None, recv_exc=None):
        self.chunks = list(chunks)
        self.send_exc = send_exc
        self.recv_exc = recv_exc
        self.sent = b""
        self.timeouts = []
        self.recv_sizes = []
        self.closed = False

    def settimeout(self, value):
        self.timeouts.append(value)

    def sendall(self, data):
        if self.send_exc:
            raise self.send_exc
        self.sent += data

    def recv(self, size):
        self.recv_sizes.append(size)
        if self.recv_exc:
            raise self.recv_exc
        return self.chunks.pop(0) if self.chunks else b""

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):  # noqa: ARG002
        self.close()


class FakeContext:
    def __init__(self, tls_socket=None, exc=None):
        self.tls_socket = tls_socket
        self.exc = exc
        self.server_hostname = None

    def wrap_socket(self, sock, server_hostname=None):  # noqa: ARG002
        self.server_hostname = server_hostname
        if self.exc:
            raise self.exc
        return self.tls_socket


@pytest.fixture
def raw_socket(monkeypatch):
    sock = FakeRawSocket()
    calls = []

    def fake_create_connection(address, timeout=None):
        calls.append({"address": address, "timeout": timeout})
        return sock

    monkeypatch.setattr(client_module.socket, "create_connection", fake_create_connection)
    sock.calls = calls
    return sock


def test_parse_target_defaults():
    target = parse_target("https://my-worker.derekli2.workers.dev/links")
    assert target == Target(host="my-worker.derekli2.workers.dev", path="/links", port=443)
    assert target.host_header == "my-worker.derekli2.workers.dev"
    assert target.address == ("my-worker.derekli2.workers.dev", 443)


def test_parse_target_empty_path_becomes_root():
    assert parse_target("https://example.com").path == "/"


def test_parse_target_keeps_query_and_port():
    target = parse_target("https://example.com:8443/a/b?x=1#frag")
    assert target.port == 8443
    assert target.path == "/a/b?x=1"
    assert target.host_header == "example.com:8443"


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "not a url", "/relative/path", "http://example.com/", "ftp://example.com/file", "https://"],
)
def test_parse_target_rejects_bad_input(raw):
    with pytest.raises(InvalidTargetError):
        parse_target(raw)


def test_ipv6_host_header_is_bracketed():
    assert Target(host="::1", port=8443).host_header == "[::1]:8443"
    assert Target(host="::1").host_header == "[::1]"


def test_build_request_is_minimal_http10():
    request = build_request(Target(host="example.com", path="/links"))
    assert request == b"GET /links HTTP/1.0\r\nHost: example.com\r\n\r\n"


def test_raw_response_helpers():
    raw = RawResponse(content=b"abc\xff", elapsed=0.0429)
    assert raw.size == 4
    assert raw.elapsed_ms == 42
    assert raw.text == "abc\ufffd"


def test_tls_client_reads_until_close(raw_socket, monkeypatch):
    ticks = iter([100.0, 100.25])
    monkeypatch.setattr(client_module.time, "perf_counter", lambda: next(ticks))
    tls = FakeTlsSocket([b"HTTP/1.0 200 OK\r\n", b"\r\n", b"hello"])
    context = FakeContext(tls)
    client = TlsConnectionClient(ProbeSettings(read_chunk_bytes=4096), ssl_context=context)

    response = client.probe(Target(host="example.com", path="/links"))

    assert response.content == b"HTTP/1.0 200 OK\r\n\r\nhello"
    assert response.elapsed_ms == 250
    assert tls.sent == b"GET /links HTTP/1.0\r\nHost: example.com\r\n\r\n"
    assert tls.recv_sizes == [4096] * 4
    assert tls.timeouts == [None]
    assert context.server_hostname == "example.com"
    assert raw_socket.calls == [{"address": ("example.com", 443), "timeout": 5.0}]
    assert tls.closed is True
    assert raw_socket.closed is True


def test_tls_client_applies_read_timeout(raw_socket):
    tls = FakeTlsSocket([b"x"])
    client = TlsConnectionClient(ProbeSettings(connect_timeout=1.5, read_timeout=9.0), ssl_context=FakeContext(tls))
    client.probe(Target(host="example.com"))
    assert raw_socket.calls[0]["timeout"] == 1.5
    assert tls.timeouts == [9.0]


def test_tls_client_connect_failure(monkeypatch):
    def refuse(address, timeout=None):  # noqa: ARG001
        raise ConnectionRefusedError("refused")

    monkeypatch.setattr(client_module.socket, "create_connection", refuse)
    client = TlsConnectionClient(ProbeSettings(), ssl_context=FakeContext(FakeTlsSocket()))
    with pytest.raises(ProbeConnectError) as excinfo:
        client.probe(Target(host="example.com"))
    assert excinfo.value.category == ErrorCategory.CONNECTION_ERROR
    assert str(excinfo.value) == "Connection error: refused"
    assert isinstance(excinfo.value.__cause__, ConnectionRefusedError)


def test_tls_client_connect_timeout(monkeypatch):
    def slow(address, timeout=None):  # noqa: ARG001
        raise TimeoutError("timed out")

    monkeypatch.setattr(client_module.socket, "create_connection", slow)
    client = TlsConnectionClient(ProbeSettings(), ssl_context=FakeContext(FakeTlsSocket()))
    with pytest.raises(ProbeConnectError) as excinfo:
        client.probe(Target(host="example.com"))
    assert excinfo.value.category == ErrorCategory.TIMEOUT


def test_tls_client_handshake_failure_closes_socket(raw_socket):
    client = TlsConnectionClient(ProbeSettings(), ssl_context=FakeContext(exc=ssl.SSLError("handshake failed")))
    with pytest.raises(ProbeConnectError) as excinfo:
        client.probe(Target(host="example.com"))
    assert excinfo.value.category == ErrorCategory.SSL_ERROR
    assert raw_socket.closed is True


def test_tls_client_write_failure_closes_connection(raw_socket):
    tls = FakeTlsSocket(send_exc=BrokenPipeError("pipe"))
    client = TlsConnectionClient(ProbeSettings(), ssl_context=FakeContext(tls))
    with pytest.raises(ProbeWriteError):
        client.probe(Target(host="example.com"))
    assert tls.closed is True
    assert raw_socket.closed is True


def test_tls_client_read_failure_closes_connection(raw_socket):
    tls = FakeTlsSocket(recv_exc=ConnectionResetError("reset"))
    client = TlsConnectionClient(ProbeSettings(), ssl_context=FakeContext(tls))
    with pytest.raises(ProbeReadError) as excinfo:
        client.probe(Target(host="example.com"))
    assert str(excinfo.value) == "Problem with read: reset"
    assert tls.closed is True
    assert raw_socket.closed is True


def test_create_default_connection_client_uses_settings():
    settings = ProbeSettings(connect_timeout=2.0)
    client = create_default_connection_client(settings)
    assert isinstance(client, TlsConnectionClient)
    assert client.settings is settings


def test_stub_connection_client_round_robin():
    stub = StubConnectionClient(["first", b"second"], elapsed=lambda i: i / 1000)
    target = Target(host="example.com")
    assert stub.probe(target).content == b"first"
    second = stub.probe(target)
    assert second.content == b"second"
    assert second.elapsed_ms == 1
    assert stub.probe(target).content == b"first"
    assert stub.calls == 3
    assert stub.targets == [target] * 3
    stub.close()
    assert stub.closed is True
