"""
Command line domain entities: raw input, option tokens and option sets.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cmdshell.exceptions import UnrecognizedOptionError

OPTION_PREFIXES = ("-", "/")
QUOTE = '"'

# alias -> canonical command name
COMMAND_ALIASES: dict[str, str] = {
    "li": "list",
    "list": "list",
    "h": "help",
    "help": "help",
}


def split_command_line(text: str) -> list[str]:
    """
    Split a command line on spaces that are not inside double quotes.

    A space is a split point only when the quote count on both sides of it is
    even, so a line with an unbalanced quote is returned as a single token.
    Quote characters are kept in the tokens and empty tokens are dropped.

    Args:
        text: Raw command line

    Returns:
        Ordered list of tokens
    """
    text = text.strip()
    if not text:
        return []
    if text.count(QUOTE) % 2:
        return [text]

    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    for ch in text:
        if ch == QUOTE:
            in_quotes = not in_quotes
        if ch == " " and not in_quotes:
            tokens.append("".join(current))
            current = []
            continue
        current.append(ch)
    tokens.append("".join(current))
    return [t for t in tokens if t]


@dataclass(frozen=True)
class OptionToken:
    """A single token of a command line, option or plain argument."""

    raw: str

    def is_option(self) -> bool:
        return self.raw.startswith(OPTION_PREFIXES)

    @property
    def name(self) -> str:
        """Lower-cased option name without its prefix."""
        return self.raw[1:].lower() if self.is_option() else self.raw

    def command(self) -> str:
        """
        Resolve the canonical command this token names.

        Raises:
            UnrecognizedOptionError: If the token is not an option or names no command
        """
        if not self.is_option():
            raise UnrecognizedOptionError(
                f"'{self.raw}' is currently not recognized by this cmd tool."
            )
        try:
            return COMMAND_ALIASES[self.name]
        except KeyError:
            raise UnrecognizedOptionError(
                f"'-{self.name}' is currently not recognized by this cmd tool."
            )

    def __str__(self) -> str:
        return self.raw


class OptionSet:
    """
    Tokens of one command line with duplicates collapsed.

    A repeated token keeps only its last occurrence, so the set is ordered by
    the position where each token was last seen.
    """

    def __init__(self, tokens: Iterable[str]):
        ordered: dict[str, None] = {}
        for token in tokens:
            ordered.pop(token, None)
            ordered[token] = None
        self._tokens = [OptionToken(t) for t in ordered]

    def __iter__(self) -> Iterator[OptionToken]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def raw_tokens(self) -> list[str]:
        return [t.raw for t in self._tokens]

    def __repr__(self) -> str:
        return f"OptionSet({self.raw_tokens()!r})"


class CommandLine:
    """Domain-level command line entered by the user or passed at startup."""

    raw: str

    def __init__(self, raw: str):
        self.raw = raw.strip()

    def is_empty(self) -> bool:
        return not self.tokens()

    def is_terminator(self, keywords: Iterable[str]) -> bool:
        """Check whether the whole line is one of the exit keywords."""
        line = self.raw.lower()
        return any(line == k.lower() for k in keywords)

    def tokens(self) -> list[str]:
        return split_command_line(self.raw)

    def option_set(self) -> OptionSet:
        return OptionSet(self.tokens())

    def __repr__(self) -> str:
        return f"CommandLine(raw={self.raw!r})"
