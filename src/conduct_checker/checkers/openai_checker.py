from __future__ import annotations

import logging
from importlib import resources

from conduct_checker._defaults import DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT
from conduct_checker.data.base import CodeOfConductProvider, ConductChecker
from conduct_checker.data.models import CheckResult, Message, TextfileType, ViolationState
from conduct_checker.errors import ConfigurationError, ProtocolError, UnsupportedFormatError
from conduct_checker.llm.client import ChatCompletionClient, LLMClient, parse_endpoint
from conduct_checker.utils import parse_json_object, strip_markdown_fences

logger = logging.getLogger(__name__)

PROMPT_RESOURCE = "prompt.txt"


def load_prompt_template(resource: str = PROMPT_RESOURCE) -> str:
    try:
        return resources.files(__package__).joinpath(resource).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Error loading prompt file '{resource}'") from exc


def _check_client_settings(llm_client: LLMClient, endpoint: str, model: str) -> None:
    for name, expected in (("endpoint", endpoint), ("model", model)):
        actual = getattr(llm_client, name, None)
        if actual is not None and actual != expected:
            raise ConfigurationError(f"llm_client {name} {actual!r} does not match {expected!r}")


class OpenAiConductChecker(ConductChecker):
    """Conduct checker that asks an OpenAI-compatible chat-completion endpoint.

    The bundled prompt template is filled with the message title, the message
    body and the code of conduct, and the model is expected to answer with a
    JSON object holding ``result`` (a :class:`ViolationState` name) and
    ``reason``. Every failure raises; there is no fallback verdict.
    """

    # Formats that can be embedded in the prompt, in order of preference.
    SUPPORTED_FORMATS: tuple[TextfileType, ...] = (TextfileType.MARKDOWN,)

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        model: str,
        code_of_conduct_provider: CodeOfConductProvider,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        timeout: float = DEFAULT_TIMEOUT,
        llm_client: LLMClient | None = None,
        prompt_resource: str = PROMPT_RESOURCE,
    ) -> None:
        if api_key is None:
            raise ConfigurationError("api_key must not be None")
        if not api_key.strip():
            raise ConfigurationError("api_key must not be blank")
        if not model:
            raise ConfigurationError("model must not be empty")
        if code_of_conduct_provider is None:
            raise ConfigurationError("code_of_conduct_provider must not be None")
        parse_endpoint(endpoint)
        if llm_client is not None:
            _check_client_settings(llm_client, endpoint, model)

        self._endpoint = endpoint
        self._model = model
        self._prompt_template = load_prompt_template(prompt_resource)
        self.code_of_conduct_provider = code_of_conduct_provider
        # Injected clients belong to the caller and are never closed here.
        self._owns_llm_client = llm_client is None
        self.llm_client = llm_client or ChatCompletionClient(
            endpoint=endpoint,
            api_key=api_key,
            model=model,
            max_redirects=max_redirects,
            timeout=timeout,
        )

        logger.info("Using chat-completion API with model: %s", model)
        logger.info("Using chat-completion API with endpoint: %s", endpoint)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def model(self) -> str:
        return self._model

    @property
    def prompt_template(self) -> str:
        return self._prompt_template

    def close(self) -> None:
        if not self._owns_llm_client:
            return
        close = getattr(self.llm_client, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> OpenAiConductChecker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def create_prompt(self, message: Message) -> str:
        for textfile_type in self.SUPPORTED_FORMATS:
            if self.code_of_conduct_provider.supports(textfile_type):
                code_of_conduct = self.code_of_conduct_provider.get_code_of_conduct(textfile_type)
                return self.prompt_template.format(
                    title=message.title,
                    message=message.message,
                    code_of_conduct=code_of_conduct,
                )
        raise UnsupportedFormatError("Only markdown code of conduct documents are supported.")

    def check(self, message: Message) -> CheckResult:
        prompt = self.create_prompt(message)
        content = self.llm_client.complete(prompt)
        data = parse_json_object(strip_markdown_fences(content))

        result = data.get("result")
        if result is None:
            raise ProtocolError("Reply does not contain 'result'")
        reason = data.get("reason")
        if reason is None:
            raise ProtocolError("Reply does not contain 'reason'")
        try:
            violation_state = ViolationState[str(result)]
        except KeyError as exc:
            raise ProtocolError(f"Unknown violation state: {result!r}") from exc

        return CheckResult(
            message=message,
            violation_state=violation_state,
            reason=str(reason),
        )
