from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import httpx

from conduct_checker._defaults import DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT
from conduct_checker.errors import (
    ConfigurationError,
    ProtocolError,
    TooManyRedirectsError,
    TransportError,
)

logger = logging.getLogger(__name__)

_TEMPORARY_REDIRECT = 307
_HTTP_SCHEMES = ("http", "https")


def parse_endpoint(endpoint: str) -> httpx.URL:
    """Parse an absolute http(s) endpoint URL, raising :class:`ConfigurationError` otherwise."""
    if not endpoint:
        raise ConfigurationError("endpoint must not be empty")
    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid endpoint URL: {endpoint!r}") from exc
    if url.scheme not in _HTTP_SCHEMES or not url.host:
        raise ConfigurationError(f"Endpoint must be an absolute http(s) URL: {endpoint!r}")
    return url


class LLMClient(Protocol):
    def complete(self, prompt: str) -> str: ...


class ChatCompletionClient:
    """Client for an OpenAI-compatible chat-completion endpoint.

    Sends a single user message and returns the text of the first choice.
    Temporary redirects (307) are followed with the identical payload, at
    most ``max_redirects`` times. Any other non-200 status is an error.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        model: str,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        if max_redirects < 0:
            raise ConfigurationError("max_redirects must not be negative")
        self._url = parse_endpoint(endpoint)
        self._endpoint = endpoint
        self._model = model
        self._max_redirects = max_redirects
        self._api_key = api_key
        self._owns_http_client = http_client is None
        # Redirects are handled explicitly so the payload is re-posted as is.
        self._http = http_client or httpx.Client(timeout=timeout, follow_redirects=False)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def model(self) -> str:
        return self._model

    @property
    def max_redirects(self) -> int:
        return self._max_redirects

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> ChatCompletionClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }

    def complete(self, prompt: str) -> str:
        payload = self.build_request(prompt)
        logger.debug("Request to chat-completion endpoint: %s", json.dumps(payload, indent=2))

        url = self._url
        hops = 0
        while True:
            response = self._post(url, payload)
            if response.status_code != _TEMPORARY_REDIRECT:
                break
            if hops >= self.max_redirects:
                raise TooManyRedirectsError(self.max_redirects)
            location = response.headers.get("Location")
            if not location:
                raise ProtocolError("No Location header found in 307 response")
            url = _redirect_target(url, location)
            hops += 1
            logger.info("Received 307 redirect from chat-completion endpoint. Redirecting to: %s", url)

        if response.status_code != 200:
            raise TransportError(
                f"Error calling chat-completion endpoint (HTTP {response.status_code}): {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return _extract_content(response.text)

    def _post(self, url: httpx.URL, payload: dict[str, Any]) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        if self._http.is_closed:
            raise TransportError("Cannot call chat-completion endpoint: the HTTP client has been closed")
        try:
            response = self._http.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"Error calling chat-completion endpoint at {url}: {exc}") from exc
        logger.debug("Response from chat-completion endpoint (HTTP %s): %s", response.status_code, response.text)
        return response


def _redirect_target(current: httpx.URL, location: str) -> httpx.URL:
    try:
        target = current.join(httpx.URL(location))
    except httpx.InvalidURL as exc:
        raise ProtocolError(f"Invalid Location header in 307 response: {location!r}") from exc
    if target.scheme not in _HTTP_SCHEMES or not target.host:
        raise ProtocolError(f"Location header in 307 response is not an http(s) URL: {location!r}")
    return target


def _extract_content(body: str) -> str:
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"Response from chat-completion endpoint is not valid JSON: {body!r}") from exc
    if data is None:
        raise ProtocolError("Response from chat-completion endpoint is null")
    if not isinstance(data, dict) or "choices" not in data:
        raise ProtocolError("Response from chat-completion endpoint does not contain 'choices'")

    choices = data["choices"]
    if not isinstance(choices, list) or not choices:
        raise ProtocolError("Response from chat-completion endpoint does not contain valid 'choices'")
    if len(choices) > 1:
        logger.warning("More than one choice found in the response (%d). Using the first one.", len(choices))

    first = choices[0]
    if not isinstance(first, dict) or not isinstance(first.get("message"), dict):
        raise ProtocolError("Response from chat-completion endpoint does not contain 'message'")
    content = first["message"].get("content")
    if not isinstance(content, str):
        raise ProtocolError("Response from chat-completion endpoint does not contain 'content'")
    return content
