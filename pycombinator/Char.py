from typing import Callable, Iterable, Union
from .Parser import Parser, Input, Result


# Core function: Succeeds if the character satisfies a predicate
def satisfy(predicate: Callable[[str], bool], name: str = "satisfy") -> Parser[str]:
    """Consumes one character for which predicate is true and returns it."""
    if predicate is None:
        raise ValueError("satisfy() requires a predicate")

    def parse(input: Input) -> Result[str]:
        if input.at_end():
            return Result.failure(input)
        c = input.current_char()
        if not predicate(c):
            return Result.failure(input)
        return Result.success(c, input.advance())
    return Parser(parse, name)

# Parses a single literal character, or any character matching a predicate
def char(c: Union[str, Callable[[str], bool]]) -> Parser[str]:
    """char('a') matches the literal 'a'; char(str.isupper) matches by predicate."""
    if c is None:
        raise ValueError("char() requires a literal or a predicate")
    if callable(c):
        return satisfy(c)
    if len(c) != 1:
        raise ValueError(f"char() expects a single character, got {c!r}")
    return satisfy(lambda x: x == c, f"char({c!r})")

# Parses any character in the provided collection
def char_in(cs: Iterable[str]) -> Parser[str]:
    allowed = frozenset(cs)
    return satisfy(lambda c: c in allowed, f"char_in({''.join(sorted(allowed))!r})")

# Parses any character not in the provided collection
def char_except(cs: Iterable[str]) -> Parser[str]:
    forbidden = frozenset(cs)
    return satisfy(lambda c: c not in forbidden, f"char_except({''.join(sorted(forbidden))!r})")

def any_char() -> Parser[str]:
    """Parses any character; fails only at end of input."""
    return satisfy(lambda _: True, "any_char")

def whitespace() -> Parser[str]:
    return satisfy(str.isspace, "whitespace")

def digit() -> Parser[str]:
    return satisfy(str.isdecimal, "digit")

def letter() -> Parser[str]:
    return satisfy(str.isalpha, "letter")

def alpha_num() -> Parser[str]:
    return satisfy(str.isalnum, "letter or digit")

def upper() -> Parser[str]:
    return satisfy(str.isupper, "uppercase letter")

def lower() -> Parser[str]:
    return satisfy(str.islower, "lowercase letter")

def newline() -> Parser[str]:
    """Parses a newline character ('\\n') and returns it."""
    return char('\n').label("newline")

def spaces() -> Parser[None]:
    """Skips zero or more whitespace characters."""
    return whitespace().many().map(lambda _: None).label("spaces")

def string(s: str) -> Parser[str]:
    """Parses the exact string s and returns it. Never partially consumes."""
    def parse(input: Input) -> Result[str]:
        cursor = input
        for expected in s:
            if cursor.at_end() or cursor.current_char() != expected:
                # Parser.parse rewinds this failure to the starting input.
                return Result.failure(cursor)
            cursor = cursor.advance()
        return Result.success(s, cursor)
    return Parser(parse, f"string({s!r})")
