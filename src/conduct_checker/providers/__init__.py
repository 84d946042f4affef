from .file_provider import FileCodeOfConductProvider
from .text_provider import TextCodeOfConductProvider

__all__ = ["FileCodeOfConductProvider", "TextCodeOfConductProvider"]
