import json

from pycombinator.Char import char, char_except, digit, string
from pycombinator.Combinators import between, many1, option, sep_by
from pycombinator.Prim import constant, lazy, run_parser

# 1. Lexemes
def symbol(s):
    return string(s).token()

null_val = symbol("null") >> constant(None)
true_val = symbol("true") >> constant(True)
false_val = symbol("false") >> constant(False)

# No escape sequences; enough for the demo document below.
string_literal = between(char('"'), char('"'), char_except('"').many()).map("".join).token()

digits = many1(digit()).map("".join)
number = (
    option("", char('-')).bind(lambda sign:
    digits.bind(lambda whole:
    option("", char('.') >> digits.map(lambda f: "." + f)).map(lambda frac:
    float(sign + whole + frac) if frac else int(sign + whole))))
).token()

# 2. Recursive JSON Parser
def json_value():
    return (
        null_val
        | true_val
        | false_val
        | string_literal
        | number
        | json_object()
        | json_array()
    )

def json_array():
    # [ value, value, ... ]
    return between(symbol("["), symbol("]"), sep_by(lazy(json_value), symbol(",")))

def json_object():
    # { "key": value, ... }
    entry = string_literal.bind(lambda key:
            symbol(":") >>
            lazy(json_value).map(lambda val: (key, val)))

    return between(symbol("{"), symbol("}"), sep_by(entry, symbol(","))).map(dict)

parser = json_value()

SAMPLE = """
{
    "name": "pycombinator",
    "version": 1.5,
    "tags": ["parser", "combinator"],
    "stable": false,
    "extra": null,
    "nested": {"depth": [1, [2, [-3]]]}
}
"""

if __name__ == "__main__":
    result, err = run_parser(parser, SAMPLE, require_end=True)

    if err:
        print("Parsing Failed:", err)
    else:
        print("Successfully Parsed:")
        print(json.dumps(result, indent=4))
