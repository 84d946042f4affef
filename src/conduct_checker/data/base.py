from __future__ import annotations

from abc import ABC, abstractmethod

from .models import CheckResult, Message, TextfileType


class CodeOfConductProvider(ABC):
    @abstractmethod
    def supports(self, textfile_type: TextfileType) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_code_of_conduct(self, textfile_type: TextfileType) -> str:
        """Return the current code of conduct in the requested format.

        Raises :class:`~conduct_checker.errors.UnsupportedFormatError` when
        :meth:`supports` is false for *textfile_type*.
        """
        raise NotImplementedError


class ConductChecker(ABC):
    @abstractmethod
    def check(self, message: Message) -> CheckResult:
        raise NotImplementedError
