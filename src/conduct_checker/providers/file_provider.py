from __future__ import annotations

from pathlib import Path

from conduct_checker.data.base import CodeOfConductProvider
from conduct_checker.data.models import TextfileType
from conduct_checker.errors import UnsupportedFormatError

_SUFFIX_TYPES = {
    ".md": TextfileType.MARKDOWN,
    ".markdown": TextfileType.MARKDOWN,
    ".html": TextfileType.HTML,
    ".htm": TextfileType.HTML,
    ".txt": TextfileType.PLAIN_TEXT,
}


def infer_textfile_type(path: Path) -> TextfileType:
    textfile_type = _SUFFIX_TYPES.get(path.suffix.lower())
    if textfile_type is None:
        raise UnsupportedFormatError(f"Cannot infer code of conduct format from file name: {path.name}")
    return textfile_type


class FileCodeOfConductProvider(CodeOfConductProvider):
    """Serves a code of conduct stored on disk, e.g. ``CODE_OF_CONDUCT.md``.

    The file is read on every request so edits take effect without a restart.
    """

    def __init__(self, path: str | Path, textfile_type: TextfileType | None = None) -> None:
        self.path = Path(path)
        self.textfile_type = textfile_type or infer_textfile_type(self.path)

    def supports(self, textfile_type: TextfileType) -> bool:
        return textfile_type == self.textfile_type

    def get_code_of_conduct(self, textfile_type: TextfileType) -> str:
        if not self.supports(textfile_type):
            raise UnsupportedFormatError(f"{self.path.name} is not available as {textfile_type.value}")
        return self.path.read_text(encoding="utf-8")
