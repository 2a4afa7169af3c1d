from __future__ import annotations

import base64
import json
import unittest
from urllib.parse import parse_qs

import httpx

import support  # noqa: F401
from zulip_sdk import ApiError, ZulipClient, ZulipSettings  # noqa: E402
from zulip_sdk.clients.base import encode_params  # noqa: E402


def _settings() -> ZulipSettings:
    return ZulipSettings(username="iago@zulip.com", api_key="secret-key", realm="https://chat.example.com/")


class _ClientTestBase(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"result": "success", "msg": ""})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    def make_client(self) -> ZulipClient:
        return ZulipClient.from_settings(_settings(), transport=httpx.MockTransport(self.handler))


class TestZulipClientLifecycle(_ClientTestBase):
    async def test_context_manager_yields_client_and_closes_pool(self) -> None:
        client = self.make_client()
        async with client as entered:
            self.assertIs(entered, client)
            self.assertFalse(client._http.is_closed)
        self.assertTrue(client._http.is_closed)


class TestZulipClientRequests(_ClientTestBase):
    async def test_basic_auth_and_base_path(self) -> None:
        async with self.make_client() as client:
            await client.users.me.get_profile()

        request = self.requests[0]
        expected = base64.b64encode(b"iago@zulip.com:secret-key").decode("ascii")
        self.assertEqual(request.headers["Authorization"], f"Basic {expected}")
        self.assertEqual(request.method, "GET")
        self.assertEqual(request.url.host, "chat.example.com")
        self.assertEqual(request.url.path, "/api/v1/users/me")
        self.assertTrue(request.headers["User-Agent"].startswith("zulip-doc-examples/"))

    async def test_post_sends_form_with_json_encoded_values(self) -> None:
        async with self.make_client() as client:
            await client.messages.send({"to": [9], "type": "private", "content": "hi"})

        request = self.requests[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.url.path, "/api/v1/messages")
        form = parse_qs(request.content.decode("utf-8"))
        self.assertEqual(form, {"to": ["[9]"], "type": ["private"], "content": ["hi"]})

    async def test_get_sends_query_parameters(self) -> None:
        narrow = [{"operator": "stream", "operand": "Verona"}]
        async with self.make_client() as client:
            await client.messages.retrieve({"anchor": "newest", "num_before": 100, "narrow": narrow})

        request = self.requests[0]
        self.assertEqual(request.url.params["anchor"], "newest")
        self.assertEqual(request.url.params["num_before"], "100")
        self.assertEqual(json.loads(request.url.params["narrow"]), narrow)
        self.assertEqual(request.content, b"")

    async def test_deregister_is_delete_on_events(self) -> None:
        async with self.make_client() as client:
            await client.queues.deregister({"queue_id": "1517975029:0"})

        request = self.requests[0]
        self.assertEqual(request.method, "DELETE")
        self.assertEqual(request.url.path, "/api/v1/events")
        self.assertEqual(parse_qs(request.content.decode("utf-8")), {"queue_id": ["1517975029:0"]})

    async def test_topics_fills_stream_id_into_path(self) -> None:
        async with self.make_client() as client:
            await client.streams.topics.retrieve({"stream_id": 1})

        self.assertEqual(self.requests[0].url.path, "/api/v1/users/me/1/topics")
        self.assertEqual(dict(self.requests[0].url.params), {})

    async def test_get_stream_id_passes_stream_name(self) -> None:
        async with self.make_client() as client:
            await client.streams.get_stream_id("Denmark")

        self.assertEqual(self.requests[0].url.path, "/api/v1/get_stream_id")
        self.assertEqual(self.requests[0].url.params["stream"], "Denmark")

    async def test_returns_decoded_body(self) -> None:
        self.response = httpx.Response(200, json={"result": "success", "msg": "", "emoji": {"1": {"name": "green"}}})
        async with self.make_client() as client:
            result = await client.emojis.retrieve()
        self.assertEqual(result["emoji"]["1"]["name"], "green")


class TestZulipClientErrors(_ClientTestBase):
    async def test_error_status_raises_api_error(self) -> None:
        self.response = httpx.Response(
            400,
            json={"result": "error", "msg": "Stream 'Denmark' does not exist", "code": "BAD_REQUEST"},
        )
        async with self.make_client() as client:
            with self.assertRaises(ApiError) as ctx:
                await client.streams.get_stream_id("Denmark")

        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.code, "BAD_REQUEST")
        self.assertEqual(str(ctx.exception), "API error 400: BAD_REQUEST: Stream 'Denmark' does not exist")
        self.assertEqual(ctx.exception.response_body["result"], "error")

    async def test_error_result_with_ok_status_raises(self) -> None:
        self.response = httpx.Response(200, json={"result": "error", "msg": "nope"})
        async with self.make_client() as client:
            with self.assertRaises(ApiError) as ctx:
                await client.users.retrieve()
        self.assertEqual(str(ctx.exception), "API error 200: nope")

    async def test_non_json_response_raises(self) -> None:
        self.response = httpx.Response(502, text="Bad Gateway", headers={"Content-Type": "text/html"})
        async with self.make_client() as client:
            with self.assertRaises(ApiError) as ctx:
                await client.users.retrieve()
        self.assertEqual(ctx.exception.status_code, 502)
        self.assertEqual(ctx.exception.response_body, "Bad Gateway")

    async def test_transport_error_raises_status_zero(self) -> None:
        def failing(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = ZulipClient.from_settings(_settings(), transport=httpx.MockTransport(failing))
        async with client:
            with self.assertRaises(ApiError) as ctx:
                await client.users.retrieve()
        self.assertEqual(ctx.exception.status_code, 0)
        self.assertIsInstance(ctx.exception.__cause__, httpx.ConnectError)


class TestEncodeParams(unittest.TestCase):
    def test_strings_pass_through_and_others_are_json(self) -> None:
        self.assertEqual(
            encode_params({"a": "x", "b": True, "c": 3, "d": ["message"], "e": None}),
            {"a": "x", "b": "true", "c": "3", "d": '["message"]'},
        )

    def test_none_params(self) -> None:
        self.assertEqual(encode_params(None), {})


class TestApiErrorStr(unittest.TestCase):
    def test_without_message(self) -> None:
        self.assertEqual(str(ApiError(500)), "API error 500")


if __name__ == "__main__":
    unittest.main()
