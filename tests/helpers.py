from __future__ import annotations

import json
from typing import Any, Callable

import httpx

from conduct_checker.llm.client import ChatCompletionClient

ENDPOINT = "https://llm.example/v1/chat/completions"

CODE_OF_CONDUCT = (
    "# Code of Conduct\n\n"
    "Be kind and respectful. Harassment and insults are not tolerated.\n"
)


class FakeLLMClient:
    def __init__(self, content: str = '{"result": "NONE", "reason": "ok"}'):
        self.content = content
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.content


def chat_reply(*contents: str) -> dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {"index": idx, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
            for idx, content in enumerate(contents)
        ],
    }


def verdict(result: str, reason: str) -> str:
    return json.dumps({"result": result, "reason": reason})


class RecordingTransport:
    """Serves queued responses and records every request it receives."""

    def __init__(self, *responses: httpx.Response | Callable[[httpx.Request], httpx.Response]):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request to {request.url}")
        response = self.responses.pop(0)
        if callable(response):
            return response(request)
        return response

    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


def make_client(
    transport: RecordingTransport,
    endpoint: str = ENDPOINT,
    api_key: str = "sk-test",
    model: str = "test-model",
    max_redirects: int = 5,
) -> ChatCompletionClient:
    return ChatCompletionClient(
        endpoint=endpoint,
        api_key=api_key,
        model=model,
        max_redirects=max_redirects,
        http_client=httpx.Client(transport=httpx.MockTransport(transport)),
    )
