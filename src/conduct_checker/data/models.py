from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum


class ViolationState(str, Enum):
    NONE = "NONE"
    MINOR = "MINOR"
    SEVERE = "SEVERE"


class TextfileType(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True, slots=True)
class Message:
    title: str
    message: str


@dataclass(frozen=True, slots=True)
class CheckResult:
    message: Message
    violation_state: ViolationState
    reason: str

    def to_dict(self) -> dict:
        return {
            "message": {"title": self.message.title, "message": self.message.message},
            "violation_state": self.violation_state.name,
            "reason": self.reason,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=True)
