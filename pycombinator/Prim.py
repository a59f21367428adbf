from typing import Any, Callable, Optional, Tuple
from .Parser import Parser, Forward, Input, Result, ParseError, T

constant = Parser.constant


def fail(name: str = "fail") -> Parser[Any]:
    """A parser that always fails without consuming input."""
    def parse(input: Input) -> Result[Any]:
        return Result.failure(input)
    return Parser(parse, name)


def forward(name: str = "forward") -> Forward[Any]:
    """Declare a parser now and define() it later, for self-referential rules."""
    return Forward(name)


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Build the parser returned by thunk on first use, then reuse it."""
    cell = []

    def parse(input: Input) -> Result[T]:
        if not cell:
            cell.append(thunk())
        return cell[0].parse(input)
    return Parser(parse, f"lazy({getattr(thunk, '__name__', 'thunk')})")


def run_parser(parser: Parser[T],
               text: str,
               require_end: bool = False) -> Tuple[Optional[T], Optional[ParseError]]:
    """Run parser once over text, returning (value, None) or (None, error).

    With require_end, a successful parse that leaves text behind is reported
    as an error naming the leftover input.
    """
    result = parser.parse(Input(text))
    if not result.is_success:
        return None, ParseError(result.remaining_input.position)
    rest = result.remaining_input
    if require_end and not rest.at_end():
        return None, ParseError(rest.position, rest.remaining_text(), unconsumed=True)
    return result.value, None
