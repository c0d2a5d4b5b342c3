import unittest

import httpx

from linkmatcher.errors import ConnectionFailure
from linkmatcher.net.httpx_client import HttpxHttpClient
from linkmatcher.url_tools import split_address


class HttpxHttpClientTests(unittest.TestCase):
    def setUp(self) -> None:
        self.requests = []

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            200,
            headers={"Content-Type": "text/html; charset=utf-8"},
            content=b'<!DOCTYPE html><a href="http://example.com/x">x</a>',
        )

    def test_plain_get_with_connection_close(self) -> None:
        client = HttpxHttpClient(transport=httpx.MockTransport(self._handler))

        response = client.get(split_address("http://sub.example.com/a/b?q=1#frag"))

        self.assertEqual(1, len(self.requests))
        request = self.requests[0]
        self.assertEqual("GET", request.method)
        self.assertEqual("http", request.url.scheme)
        self.assertEqual("sub.example.com", request.url.host)
        self.assertEqual("/a/b", request.url.path)
        self.assertEqual(b"q=1", request.url.query)
        self.assertEqual("close", request.headers["connection"])
        self.assertEqual(200, response.status_code)
        self.assertEqual("text/html; charset=utf-8", response.headers["content-type"])
        self.assertIn("http://example.com/x", response.text)

    def test_configured_port(self) -> None:
        client = HttpxHttpClient(port=8080, transport=httpx.MockTransport(self._handler))

        client.get(split_address("http://example.com/"))

        self.assertEqual(8080, self.requests[0].url.port)

    def test_redirects_are_not_followed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(301, headers={"Location": "http://example.com/elsewhere"})

        client = HttpxHttpClient(transport=httpx.MockTransport(handler))

        response = client.get(split_address("http://example.com/old"))

        self.assertEqual(301, response.status_code)
        self.assertEqual(1, len(self.requests))

    def test_transport_error_is_connection_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = HttpxHttpClient(transport=httpx.MockTransport(handler))

        with self.assertRaises(ConnectionFailure):
            client.get(split_address("http://example.com/"))

    def test_empty_host(self) -> None:
        client = HttpxHttpClient(transport=httpx.MockTransport(self._handler))

        with self.assertRaises(ConnectionFailure):
            client.get(split_address("gopher://nowhere"))

        self.assertEqual([], self.requests)


if __name__ == "__main__":
    unittest.main()
