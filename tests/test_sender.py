"""Tests for perch.server.sender response emission rules."""

from perch.http.response import Response
from perch.server.sender import send_response


async def _capture(response: Response, *, head: bool = False) -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send, head=head)
    return messages


class TestSendResponse:
    async def test_start_then_body(self) -> None:
        messages = await _capture(Response("hello"))
        assert [m["type"] for m in messages] == ["http.response.start", "http.response.body"]
        assert messages[0]["status"] == 200
        assert messages[1]["body"] == b"hello"

    async def test_content_type_and_length(self) -> None:
        messages = await _capture(Response("héllo", content_type="text/plain; charset=utf-8"))
        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/plain; charset=utf-8"
        assert headers[b"content-length"] == str(len("héllo".encode())).encode()

    async def test_header_names_lowercased(self) -> None:
        messages = await _capture(Response.redirect("/next"))
        headers = dict(messages[0]["headers"])
        assert headers[b"location"] == b"/next"
        assert messages[0]["status"] == 302


class TestHead:
    async def test_head_keeps_length_drops_body(self) -> None:
        messages = await _capture(Response("twelve bytes"), head=True)
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"12"
        assert messages[1]["body"] == b""


class TestNoBodyStatuses:
    async def test_304_drops_body_and_sets_zero_content_length(self) -> None:
        messages = await _capture(Response("unexpected-body").with_status(304))
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["body"] == b""
