from ._version import __version__
from .checkers.openai_checker import OpenAiConductChecker
from .data.base import CodeOfConductProvider, ConductChecker
from .data.models import CheckResult, Message, TextfileType, ViolationState
from .errors import (
    ConductCheckError,
    ConfigurationError,
    ProtocolError,
    TooManyRedirectsError,
    TransportError,
    UnsupportedFormatError,
)
from .llm.client import ChatCompletionClient
from .providers.file_provider import FileCodeOfConductProvider
from .providers.text_provider import TextCodeOfConductProvider

__all__ = [
    "__version__",
    "ChatCompletionClient",
    "CheckResult",
    "CodeOfConductProvider",
    "ConductCheckError",
    "ConductChecker",
    "ConfigurationError",
    "FileCodeOfConductProvider",
    "Message",
    "OpenAiConductChecker",
    "ProtocolError",
    "TextCodeOfConductProvider",
    "TextfileType",
    "TooManyRedirectsError",
    "TransportError",
    "UnsupportedFormatError",
    "ViolationState",
]
