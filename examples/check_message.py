"""Check a single message against a code of conduct file.

Requires OPENAI_API_KEY in your environment.
"""
from __future__ import annotations

import logging
import os
import sys

from conduct_checker import FileCodeOfConductProvider, Message, OpenAiConductChecker
from conduct_checker._defaults import DEFAULT_ENDPOINT, DEFAULT_MODEL


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    path = sys.argv[1] if len(sys.argv) > 1 else "CODE_OF_CONDUCT.md"

    with OpenAiConductChecker(
        endpoint=DEFAULT_ENDPOINT,
        api_key=os.environ["OPENAI_API_KEY"],
        model=DEFAULT_MODEL,
        code_of_conduct_provider=FileCodeOfConductProvider(path),
    ) as checker:
        result = checker.check(
            Message(
                title="Why is this still broken?",
                message="Honestly, whoever wrote this parser should not be allowed near a keyboard.",
            )
        )

    print(f"Violation: {result.violation_state.name}")
    print(f"Reason:    {result.reason}")


if __name__ == "__main__":
    main()
