"""Prompters: the yes/no and free-text questions a round asks the player."""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, InvalidResponse, Prompt

YES_NO_ERROR = "Please answer y or n."


class InputExhausted(EOFError):
    """Raised when a prompt cannot obtain a response."""

    def __init__(self, prompt: str):
        self.prompt = prompt
        super().__init__(f"No response available for prompt: {prompt}")


class Prompter(Protocol):
    """What the game engine needs from the player."""

    def ask_yes_no(self, prompt: str) -> bool: ...

    def ask_text(self, prompt: str) -> str: ...


def normalize_yes_no(response: str) -> Optional[bool]:
    """Map a raw response to True/False, or None when it is neither y nor n."""
    value = response.strip().lower()
    if value == "y":
        return True
    if value == "n":
        return False
    return None


class YesNoConfirm(Confirm):
    """Confirm prompt accepting y/n in any case and surrounding whitespace."""

    validate_error_message = f"[prompt.invalid]{YES_NO_ERROR}"

    def process_response(self, value: str) -> bool:
        answer = normalize_yes_no(value)
        if answer is None:
            raise InvalidResponse(self.validate_error_message)
        return answer


class VerbatimPrompt(Prompt):
    """Text prompt returning the response exactly as typed."""

    def process_response(self, value: str) -> str:
        return value


class ConsolePrompter:
    """Prompts the player on a rich console, re-asking until y or n is given."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask_yes_no(self, prompt: str) -> bool:
        try:
            return YesNoConfirm.ask(escape(prompt), console=self.console)
        except EOFError as exc:
            raise InputExhausted(prompt) from exc

    def ask_text(self, prompt: str) -> str:
        try:
            return VerbatimPrompt.ask(escape(prompt), console=self.console)
        except EOFError as exc:
            raise InputExhausted(prompt) from exc

    def tell(self, message: str) -> None:
        self.console.print(message)


class ScriptedPrompter:
    """
    Replays a fixed list of responses.

    Yes/no responses are normalized like console input; an invalid one is
    skipped and the next response is used, as if the player was asked again.
    Every prompt asked is recorded in ``prompts``.
    """

    def __init__(self, responses: Iterable[str]):
        self._responses = list(responses)
        self._position = 0
        self.prompts: List[str] = []
        self.messages: List[str] = []

    @property
    def remaining(self) -> int:
        return len(self._responses) - self._position

    def _next(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self._position >= len(self._responses):
            raise InputExhausted(prompt)
        response = self._responses[self._position]
        self._position += 1
        return response

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            answer = normalize_yes_no(self._next(prompt))
            if answer is not None:
                return answer
            self.messages.append(YES_NO_ERROR)

    def ask_text(self, prompt: str) -> str:
        return self._next(prompt)

    def tell(self, message: str) -> None:
        self.messages.append(message)


__all__ = [
    "InputExhausted",
    "Prompter",
    "normalize_yes_no",
    "YesNoConfirm",
    "VerbatimPrompt",
    "ConsolePrompter",
    "ScriptedPrompter",
    "YES_NO_ERROR",
]
