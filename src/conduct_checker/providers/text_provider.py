from __future__ import annotations

from conduct_checker.data.base import CodeOfConductProvider
from conduct_checker.data.models import TextfileType
from conduct_checker.errors import UnsupportedFormatError


class TextCodeOfConductProvider(CodeOfConductProvider):
    """Serves an in-memory code of conduct in a single format."""

    def __init__(self, text: str, textfile_type: TextfileType = TextfileType.MARKDOWN) -> None:
        self.text = text
        self.textfile_type = textfile_type

    def supports(self, textfile_type: TextfileType) -> bool:
        return textfile_type == self.textfile_type

    def get_code_of_conduct(self, textfile_type: TextfileType) -> str:
        if not self.supports(textfile_type):
            raise UnsupportedFormatError(f"Code of conduct is not available as {textfile_type.value}")
        return self.text
