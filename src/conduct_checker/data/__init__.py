from .base import CodeOfConductProvider, ConductChecker
from .models import CheckResult, Message, TextfileType, ViolationState

__all__ = [
    "CheckResult",
    "CodeOfConductProvider",
    "ConductChecker",
    "Message",
    "TextfileType",
    "ViolationState",
]
