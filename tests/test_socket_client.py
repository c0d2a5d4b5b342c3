import unittest
from unittest import mock

from linkmatcher.errors import ConnectionFailure, ProtocolFailure
from linkmatcher.net.socket_client import SocketHttpClient
from linkmatcher.url_tools import RemoteAddress, split_address

RESPONSE = (
    b"HTTP/1.1 200 OK\r\n"
    b"Content-Type: text/html\r\n"
    b"Connection: close\r\n"
    b"\r\n"
    b"<!DOCTYPE html><html><body><a href=\"http://example.com/a\">a</a></body></html>"
)


class FakeSocket:
    """Stand-in for a connected socket that replays canned response chunks."""

    def __init__(self, chunks=(), send_error=None, recv_error=None):
        self.chunks = list(chunks)
        self.send_error = send_error
        self.recv_error = recv_error
        self.sent = b""
        self.closed = False

    def sendall(self, data: bytes) -> None:
        if self.send_error:
            raise self.send_error
        self.sent += data

    def recv(self, size: int) -> bytes:
        if self.recv_error:
            raise self.recv_error
        if not self.chunks:
            return b""
        return self.chunks.pop(0)

    def close(self) -> None:
        self.closed = True


def patch_connection(**kwargs):
    return mock.patch("linkmatcher.net.socket_client.socket.create_connection", **kwargs)


class SocketHttpClientTests(unittest.TestCase):
    def test_sends_request_and_reads_until_close(self) -> None:
        fake = FakeSocket([RESPONSE[:20], RESPONSE[20:70], RESPONSE[70:]])

        with patch_connection(return_value=fake) as create:
            response = SocketHttpClient().get(split_address("http://example.com/a/b?q=1"))

        create.assert_called_once_with(("example.com", 80), timeout=None)
        self.assertEqual(
            b"GET /a/b?q=1 HTTP/1.1\r\nHost: example.com\r\nConnection: close\r\n\r\n",
            fake.sent,
        )
        self.assertEqual(200, response.status_code)
        self.assertIn('<a href="http://example.com/a">', response.text)
        self.assertTrue(fake.closed)

    def test_configured_port_and_timeout(self) -> None:
        fake = FakeSocket([RESPONSE])

        with patch_connection(return_value=fake) as create:
            SocketHttpClient(port=8080, timeout=2.5).get(RemoteAddress(host="example.com"))

        create.assert_called_once_with(("example.com", 8080), timeout=2.5)

    def test_port_in_url_wins_over_configured_port(self) -> None:
        fake = FakeSocket([RESPONSE])

        with patch_connection(return_value=fake) as create:
            SocketHttpClient(port=8080).get(split_address("http://example.com:9000/"))

        create.assert_called_once_with(("example.com", 9000), timeout=None)
        self.assertIn(b"Host: example.com:9000\r\n", fake.sent)

    def test_empty_host_fails_without_connecting(self) -> None:
        with patch_connection() as create:
            with self.assertRaises(ConnectionFailure):
                SocketHttpClient().get(split_address("not a url"))

        create.assert_not_called()

    def test_connect_error_is_connection_failure(self) -> None:
        with patch_connection(side_effect=ConnectionRefusedError("refused")):
            with self.assertRaises(ConnectionFailure) as ctx:
                SocketHttpClient().get(RemoteAddress(host="example.com"))

        self.assertIn("example.com:80", str(ctx.exception))

    def test_socket_closed_when_send_fails(self) -> None:
        fake = FakeSocket(send_error=BrokenPipeError("broken pipe"))

        with patch_connection(return_value=fake):
            with self.assertRaises(ConnectionFailure):
                SocketHttpClient().get(RemoteAddress(host="example.com"))

        self.assertTrue(fake.closed)

    def test_socket_closed_when_read_times_out(self) -> None:
        fake = FakeSocket(recv_error=TimeoutError("timed out"))

        with patch_connection(return_value=fake):
            with self.assertRaises(ConnectionFailure):
                SocketHttpClient(timeout=1.0).get(RemoteAddress(host="example.com"))

        self.assertTrue(fake.closed)

    def test_garbage_response_is_protocol_failure(self) -> None:
        fake = FakeSocket([b"not http at all"])

        with patch_connection(return_value=fake):
            with self.assertRaises(ProtocolFailure):
                SocketHttpClient().get(RemoteAddress(host="example.com"))

        self.assertTrue(fake.closed)


if __name__ == "__main__":
    unittest.main()
