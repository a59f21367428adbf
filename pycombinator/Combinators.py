import logging
from typing import Any, Callable, List, Optional, Tuple
from .Parser import Parser, Input, Result, T
from .Prim import constant, fail
from .Char import any_char

logger = logging.getLogger(__name__)


# 1. choice: Tries parsers in order until one succeeds
def choice(parsers: List[Parser[T]]) -> Parser[T]:
    """
    Applies a list of parsers in order until one succeeds.
    Returns the value of the succeeding parser, or fails if none succeed.
    """
    if not parsers:
        return fail("no alternatives")
    result = parsers[0]
    for p in parsers[1:]:
        result = result | p
    return result

# 2. sequence: Runs parsers one after another, collecting every value
def sequence(parsers: List[Parser[Any]]) -> Parser[List[Any]]:
    result = constant([])
    for p in parsers:
        result = result.bind(lambda acc, p=p: p.map(lambda x, acc=acc: acc + [x]))
    return result

# 3. many1: Applies a parser one or more times
def many1(p: Parser[T]) -> Parser[List[T]]:
    """
    Applies parser p one or more times, returning a list of results.
    """
    return p.bind(lambda x: p.many().map(lambda xs: [x] + xs)).label(f"many1({p.name})")

# 4. skipMany: Skips zero or more occurrences of a parser
def skip_many(p: Parser[Any]) -> Parser[None]:
    return p.many().map(lambda _: None)

# 5. option: Tries a parser, returning a default value on failure
def option(x: T, p: Parser[T]) -> Parser[T]:
    return p | constant(x)

# 6. optional: Tries a parser, returning None on failure
def optional(p: Parser[T]) -> Parser[Optional[T]]:
    return p | constant(None)

# 7. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return (open >> p).bind(lambda x: close >> constant(x))

# 8. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    return p.bind(lambda x: (sep >> p).many().map(lambda xs: [x] + xs))

# 9. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    return sep_by1(p, sep) | constant([])

# 10. lookAhead: Parses p but leaves the input where it was
def look_ahead(p: Parser[T]) -> Parser[T]:
    def parse(input: Input) -> Result[T]:
        return p.parse(input).if_success(lambda res: Result.success(res.value, input))
    return Parser(parse, f"look_ahead({p.name})")

# 11. eof: Succeeds only at the end of input
def eof() -> Parser[None]:
    return any_char().not_().label("end of input")

# 12. trace: Logs entry, success and failure of p at DEBUG level
def trace(label_str: str, p: Parser[T]) -> Parser[T]:
    def parse(input: Input) -> Result[T]:
        logger.debug("%s: enter at %s", label_str, input)
        result = p.parse(input)
        if result.is_success:
            logger.debug("%s: ok %r, now at %d", label_str, result.value,
                         result.remaining_input.position)
        else:
            logger.debug("%s: failed at %d", label_str, input.position)
        return result
    return Parser(parse, p.name)

# 13. chainl1: Left-associative operator chain
def chainl1(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses one or more p separated by op, applying op left-associatively.
    A dangling operator is left unconsumed.
    """
    rest = op.bind(lambda f: p.map(lambda y: (f, y))).many()

    def fold(x: T, pairs: List[Tuple[Callable[[T, T], T], T]]) -> T:
        for f, y in pairs:
            x = f(x, y)
        return x
    return p.bind(lambda x: rest.map(lambda pairs: fold(x, pairs))).label(f"chainl1({p.name})")
