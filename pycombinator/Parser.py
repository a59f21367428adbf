import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

logger = logging.getLogger(__name__)


class EndOfInputError(EOFError):
    """Raised when the current character is read from an exhausted cursor."""


@dataclass(frozen=True)
class Input:
    """Immutable cursor: the text being parsed and a read position into it."""
    text: str
    position: int = 0

    def __post_init__(self):
        if self.position < 0:
            raise ValueError(f"position must be >= 0, got {self.position}")

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def current_char(self) -> str:
        """Character under the cursor. Callers must check at_end() first."""
        if self.at_end():
            raise EndOfInputError(f"Unexpected end of input at position {self.position}")
        return self.text[self.position]

    def advance(self, steps: int = 1) -> 'Input':
        # No bounds check here; at_end() and remaining_text() tolerate overshoot.
        return Input(self.text, self.position + steps)

    def remaining_text(self) -> str:
        if self.at_end():
            return ""
        return self.text[self.position:]

    def __str__(self) -> str:
        rest = self.remaining_text()
        preview = rest[:30] + ('...' if len(rest) > 30 else '')
        return f"position {self.position} ({preview!r})"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a single parse attempt."""
    value: Optional[T]
    remaining_input: Input
    is_success: bool

    @classmethod
    def success(cls, value: T, remaining_input: Input) -> 'Result[T]':
        return cls(value, remaining_input, True)

    @classmethod
    def failure(cls, remaining_input: Input) -> 'Result[Any]':
        return cls(None, remaining_input, False)

    def if_success(self, handler: Callable[['Result[T]'], 'Result[U]']) -> 'Result[Union[T, U]]':
        """Continue with handler(self) on success, otherwise return self unchanged."""
        if self.is_success:
            return handler(self)
        return self

    def if_failure(self, handler: Callable[['Result[T]'], 'Result[U]']) -> 'Result[Union[T, U]]':
        """Continue with handler(self) on failure, otherwise return self unchanged."""
        if not self.is_success:
            return handler(self)
        return self

    def __str__(self) -> str:
        if self.is_success:
            return f"succeeded with value {self.value!r} at position {self.remaining_input.position}"
        return f"failed, unconsumed, at position {self.remaining_input.position}"


@dataclass
class ParseError:
    """Report returned by run_parser when a parse does not succeed."""
    position: int
    leftover: str = ""
    unconsumed: bool = False

    def __str__(self) -> str:
        if self.unconsumed:
            return f"unconsumed input at position {self.position}: {self.leftover!r}"
        return f"failed, unconsumed, at position {self.position}"


def _no_progress(before: Input, after: Input) -> bool:
    if before.at_end() and after.at_end():
        return True
    return before.position == after.position and before.text == after.text


class Parser(Generic[T]):
    """A named wrapper around a function from Input to Result."""
    __slots__ = ('_parse_fn', 'name')

    def __init__(self, parse_fn: Callable[[Input], Result[T]], name: Optional[str] = None):
        if parse_fn is None:
            raise ValueError("Parser requires a parse function")
        if not callable(parse_fn):
            raise TypeError(f"parse function must be callable, got {type(parse_fn).__name__}")
        self._parse_fn = parse_fn
        self.name = name or getattr(parse_fn, '__name__', 'parser')

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    def parse(self, input: Input) -> Result[T]:
        """Run the parser. A failure never reports consumed input."""
        result = self._parse_fn(input)
        if not result.is_success:
            if result.remaining_input != input or result.value is not None:
                return Result.failure(input)
        return result

    def __call__(self, input: Input) -> Result[T]:
        return self.parse(input)

    # Sequencing. `next_` is either a Parser (value of self is discarded) or
    # a continuation taking self's successful Result and returning a Parser.
    def then(self, next_: Union['Parser[U]', Callable[[Result[T]], 'Parser[U]']]) -> 'Parser[U]':
        if isinstance(next_, Parser):
            second = next_
            return self.then(lambda _: second).label(f"{self.name} then {second.name}")
        if not callable(next_):
            raise TypeError(f"then() expects a Parser or a callable, got {type(next_).__name__}")
        continuation = next_

        def parse(input: Input) -> Result[U]:
            return self.parse(input).if_success(
                lambda first: continuation(first).parse(first.remaining_input))
        return Parser(parse, f"{self.name} then ...")

    # Monadic bind (>>=) over the parsed value rather than the Result
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.then(lambda result: f(result.value))

    def __rshift__(self, other: Union['Parser[U]', Callable[[T], 'Parser[U]']]) -> 'Parser[U]':
        if isinstance(other, Parser):
            return self.then(other)
        return self.bind(other)

    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        return self.then(lambda result: Parser.constant(f(result.value))).label(self.name)

    # Ordered choice (<|>)
    def or_(self, alternative: 'Parser[T]') -> 'Parser[T]':
        def parse(input: Input) -> Result[T]:
            # A failed first branch is guaranteed unconsumed, so input is the retry point.
            return self.parse(input).if_failure(lambda _: alternative.parse(input))
        return Parser(parse, f"{self.name} | {alternative.name}")

    def __or__(self, alternative: 'Parser[T]') -> 'Parser[T]':
        return self.or_(alternative)

    def not_(self) -> 'Parser[None]':
        """Zero-width negation: succeeds with None exactly where self fails."""
        def parse(input: Input) -> Result[None]:
            if self.parse(input).is_success:
                return Result.failure(input)
            return Result.success(None, input)
        return Parser(parse, f"not {self.name}")

    def __invert__(self) -> 'Parser[None]':
        return self.not_()

    def many(self) -> 'Parser[List[T]]':
        """Zero or more repetitions. Always succeeds."""
        def parse(input: Input) -> Result[List[T]]:
            values: List[T] = []
            current = input
            while True:
                result = self.parse(current)
                if not result.is_success:
                    break
                if _no_progress(current, result.remaining_input):
                    # Zero-width success ends the loop; its value is dropped.
                    logger.debug("many(%s): stopped on zero-width match at %d",
                                 self.name, current.position)
                    break
                values.append(result.value)
                current = result.remaining_input
            return Result.success(values, current)
        return Parser(parse, f"many({self.name})")

    def token(self) -> 'Parser[T]':
        """Skip whitespace on both sides of self, keeping self's value."""
        from .Char import whitespace
        skip_ws = whitespace().many()
        inner = skip_ws.then(self)
        return inner.then(
            lambda result: skip_ws.then(Parser.constant(result.value))
        ).label(f"token({self.name})")

    def label(self, name: str) -> 'Parser[T]':
        return Parser(self._parse_fn, name)

    @staticmethod
    def constant(value: T) -> 'Parser[T]':
        """Succeed with value without consuming input."""
        def parse(input: Input) -> Result[T]:
            return Result.success(value, input)
        return Parser(parse, f"constant({value!r})")


class Forward(Parser[T]):
    """Placeholder for a parser defined later, for recursive grammars.

        expr = forward()
        term = digit() | between(char('('), char(')'), expr)
        expr.define(term)
    """
    __slots__ = ('_target',)

    def __init__(self, name: str = "forward"):
        self._target: Optional[Parser[T]] = None
        super().__init__(self._run_target, name)

    def _run_target(self, input: Input) -> Result[T]:
        if self._target is None:
            raise RuntimeError(f"forward parser {self.name!r} used before define()")
        return self._target.parse(input)

    def define(self, parser: Parser[T]) -> None:
        if self._target is not None:
            raise RuntimeError(f"forward parser {self.name!r} is already defined")
        if not isinstance(parser, Parser):
            raise TypeError(f"define() expects a Parser, got {type(parser).__name__}")
        logger.debug("forward %s defined as %s", self.name, parser.name)
        self._target = parser
