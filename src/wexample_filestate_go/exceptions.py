"""Exception hierarchy for wexample-filestate-go."""

from __future__ import annotations


class GoSyntaxError(SyntaxError):
    """Raised when Go source cannot be parsed as a valid file.

    Position information is 1-based, as reported by the Go toolchain.
    """

    def __init__(
        self, message: str, filename: str, lineno: int = 1, offset: int = 1
    ) -> None:
        super().__init__(
            f"{filename}:{lineno}:{offset}: {message}",
            (filename, lineno, offset, None),
        )
        self.message = message

    def __str__(self) -> str:
        return self.msg


class UnsupportedGoDeclarationError(RuntimeError):
    """A declaration or receiver shape outside the set the organizer understands.

    Never raised for input that passed the syntax check; reaching it means the
    grammar and the extractor disagree.
    """
