"""
Tests for the counsellor chat endpoints.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

from src.services.gemini import (
    GeminiClient,
    ProviderRateLimited,
    ProviderUnavailable,
    ProviderUnknownError,
    get_gemini_client,
)


def test_chat_passes_message_verbatim(client, gemini):
    response = client.post("/api/chat", json={"message": "I can't sleep lately"})

    assert response.status_code == 200
    assert response.json() == {"reply": "Generated reply"}
    assert gemini.prompts == ["I can't sleep lately"]


def test_chat_substitutes_fallback_when_provider_returns_no_text(app, client):
    sdk = MagicMock()
    sdk.aio.models.generate_content = AsyncMock(
        return_value=types.GenerateContentResponse(candidates=[])
    )
    real_client = GeminiClient(api_key="test-key", model="gemini-1.5-flash")
    real_client._client = sdk
    app.dependency_overrides[get_gemini_client] = lambda: real_client

    response = client.post("/api/chat", json={"message": "hello"})

    assert response.status_code == 200
    assert response.json() == {"reply": "⚠️ No reply received from Gemini."}


@pytest.mark.parametrize(
    "path, body",
    [
        ("/api/chat", {"message": "hi"}),
        ("/api/general-chat", {"message": "hi"}),
        ("/api/specialised-chat", {"disorder": "OCD", "message": "hi"}),
    ],
)
def test_overloaded_provider_yields_503(client, gemini, path, body):
    gemini.error = ProviderUnavailable("The model is overloaded")

    response = client.post(path, json=body)

    assert response.status_code == 503
    assert "busy" in response.json()["reply"]


@pytest.mark.parametrize(
    "path, body, expected",
    [
        ("/api/chat", {"message": "hi"}, "⚠️ Sorry, something went wrong on the server."),
        ("/api/general-chat", {"message": "hi"}, "⚠️ Something went wrong on the server."),
        (
            "/api/specialised-chat",
            {"disorder": "OCD", "message": "hi"},
            "⚠️ Sorry, something went wrong on the server.",
        ),
    ],
)
def test_other_provider_failures_yield_500(client, gemini, path, body, expected):
    gemini.error = ProviderUnknownError("boom: secret provider detail")

    response = client.post(path, json=body)

    assert response.status_code == 500
    assert response.json() == {"reply": expected}


def test_rate_limit_on_chat_is_a_generic_failure(client, gemini):
    gemini.error = ProviderRateLimited("30s")

    response = client.post("/api/chat", json={"message": "hi"})

    assert response.status_code == 500


@pytest.mark.parametrize("body", [{}, {"message": ""}, {"message": "   "}])
def test_general_chat_rejects_empty_message_without_calling_provider(client, gemini, body):
    response = client.post("/api/general-chat", json=body)

    assert response.status_code == 400
    assert response.json() == {"reply": "⚠️ Message cannot be empty."}
    assert gemini.call_count == 0


def test_general_chat_renders_counsellor_prompt(client, gemini):
    response = client.post("/api/general-chat", json={"message": "I feel anxious all day"})

    assert response.status_code == 200
    assert gemini.call_count == 1
    prompt = gemini.prompts[0]
    assert "determine the most likely mental health condition" in prompt
    assert 'User\'s message: "I feel anxious all day"' in prompt


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"message": "hi"},
        {"disorder": "PTSD"},
        {"disorder": "", "message": "hi"},
    ],
)
def test_specialised_chat_requires_both_fields(client, gemini, body):
    response = client.post("/api/specialised-chat", json=body)

    assert response.status_code == 400
    assert response.json() == {"reply": "❌ Disorder and message are required."}
    assert gemini.call_count == 0


def test_specialised_chat_calls_provider_once(client, gemini):
    response = client.post(
        "/api/specialised-chat",
        json={"disorder": "PTSD", "message": "Loud noises scare me"},
    )

    assert response.status_code == 200
    assert response.json() == {"reply": "Generated reply"}
    assert gemini.call_count == 1
    assert "specializing in PTSD" in gemini.prompts[0]
    assert '"Loud noises scare me"' in gemini.prompts[0]


@pytest.mark.parametrize(
    "path, body, expected",
    [
        ("/api/chat", {"message": ["not", "text"]}, "⚠️ Message must be text."),
        ("/api/general-chat", {"message": 5}, "⚠️ Message must be text."),
        (
            "/api/specialised-chat",
            {"disorder": {"name": "OCD"}, "message": "hi"},
            "❌ Disorder and message are required.",
        ),
    ],
)
def test_wrongly_typed_body_gets_400_reply(client, gemini, path, body, expected):
    response = client.post(path, json=body)

    assert response.status_code == 400
    assert response.json() == {"reply": expected}
    assert gemini.call_count == 0
