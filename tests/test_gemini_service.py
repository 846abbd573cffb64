import binascii
from types import SimpleNamespace

import pytest
from google.genai import types

from ai.exceptions import RemoteCallError
from ai.factory import make_service
from ai.gemini_service import GeminiService
from dto.media import MediaPart
from llm_helper import HelperConfig


class StubModels:
    def __init__(self, outcomes):
        self._outcomes = list(outcomes)
        self.requests = []

    async def generate_content(self, *, model, contents):
        self.requests.append((model, contents))
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class StubClient:
    def __init__(self, *outcomes):
        self.closed = False
        self.aio = SimpleNamespace(models=StubModels(outcomes), aclose=self._aclose)

    async def _aclose(self):
        self.closed = True


def _response(text):
    return SimpleNamespace(text=text, prompt_feedback=None)


def _service(client, **kwargs):
    return GeminiService(
        api_key="k",
        client=client,
        min_wait_seconds=0,
        max_wait_seconds=0,
        **kwargs,
    )


async def test_generate_converts_media_parts_to_inline_bytes():
    client = StubClient(_response("done"))
    service = _service(client, model="gemini-test")

    text = await service.generate(["prompt", MediaPart.from_bytes(b"\x89PNG", "image/png")])

    assert text == "done"
    model, contents = client.aio.models.requests[0]
    assert model == "gemini-test"
    assert contents[0] == "prompt"
    assert isinstance(contents[1], types.Part)
    assert contents[1].inline_data.data == b"\x89PNG"
    assert contents[1].inline_data.mime_type == "image/png"


async def test_generate_without_text_is_remote_error():
    service = _service(StubClient(_response(None)))
    with pytest.raises(RemoteCallError):
        await service.generate(["prompt"])


async def test_single_attempt_by_default():
    client = StubClient(ConnectionError("down"), _response("late"))
    service = _service(client)

    with pytest.raises(ConnectionError):
        await service.generate(["prompt"])
    assert len(client.aio.models.requests) == 1


async def test_retries_transient_errors_when_enabled():
    client = StubClient(ConnectionError("down"), _response("recovered"))
    service = _service(client, max_attempts=3)

    assert await service.generate(["prompt"]) == "recovered"
    assert len(client.aio.models.requests) == 2


async def test_non_transient_errors_are_not_retried():
    client = StubClient(ValueError("bad request"), _response("never"))
    service = _service(client, max_attempts=3)

    with pytest.raises(ValueError):
        await service.generate(["prompt"])
    assert len(client.aio.models.requests) == 1


async def test_aclose_closes_async_client():
    client = StubClient()
    await _service(client).aclose()
    assert client.closed


def test_make_service_builds_gemini_session():
    service = make_service(HelperConfig(api_key="k", model="gemini-x"))
    assert isinstance(service, GeminiService)
    assert service.model == "gemini-x"


def test_make_service_rejects_unknown_provider():
    with pytest.raises(ValueError, match="Unknown AI provider"):
        make_service(HelperConfig(api_key="k", provider="openai"))


async def test_invalid_base64_is_rejected_before_sending():
    client = StubClient(_response("never"))
    service = _service(client)

    with pytest.raises(binascii.Error):
        await service.generate(["prompt", MediaPart(data="QU*JD", mime_type="audio/wav")])
    assert client.aio.models.requests == []
