# Core
from .Parser import Parser, Forward, Input, Result, ParseError, EndOfInputError
from .Prim import run_parser, constant, fail, forward, lazy

# Characters
from .Char import (
    satisfy, char, char_in, char_except, any_char,
    whitespace, digit, letter, alpha_num, upper, lower,
    newline, spaces, string
)

# Combinators
from .Combinators import (
    choice, sequence, many1, skip_many, option, optional,
    between, sep_by, sep_by1, look_ahead, eof, trace, chainl1
)
