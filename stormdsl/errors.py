"""The error raised when a schema fails validation."""

from __future__ import annotations

from typing import Iterable, Union

Problem = Union[str, BaseException]


class ValidationError(ValueError):
    """One or more validation problems, kept as a flat list of messages."""

    def __init__(self, errors: Iterable[Problem]) -> None:
        messages: list[str] = []
        for error in errors:
            if isinstance(error, ValidationError):
                messages.extend(error.errors)
            else:
                messages.append(str(error))
        self.errors: tuple[str, ...] = tuple(messages)
        super().__init__(*self.errors)

    def __str__(self) -> str:
        if len(self.errors) == 1:
            return f"1 error occurred:\n\t* {self.errors[0]}\n\n"
        points = "\n\t".join(f"* {message}" for message in self.errors)
        return f"{len(self.errors)} errors occurred:\n\t{points}\n\n"