from pycombinator.Char import char, char_in, digit
from pycombinator.Combinators import between, chainl1, many1
from pycombinator.Prim import forward, run_parser

# 1. Basic Token Parsers
# token() skips whitespace on both sides, so "2 +  3" needs no lexer.
integer = many1(digit()).map(lambda ds: int("".join(ds))).token()
lparen = char('(').token()
rparen = char(')').token()

# 2. Helper Functions for Calculation
def add(x, y): return x + y
def sub(x, y): return x - y
def mul(x, y): return x * y
def div(x, y):
    if y == 0: raise ValueError("Division by zero")
    return x / y  # float division

OPS = {'+': add, '-': sub, '*': mul, '/': div}

def operator(symbols):
    return char_in(symbols).token().map(OPS.get)

# 3. The Expression Parser
# 'expr' is referenced by 'factor' before it is defined (recursion).
expr = forward("expr")
factor = integer | between(lparen, rparen, expr)
negated = (char('-').token() >> factor).map(lambda x: -x) | factor
term = chainl1(negated, operator("*/"))
expr.define(chainl1(term, operator("+-")))

if __name__ == "__main__":
    test_cases = [
        "2 + 3",            # 5
        "2 * 3",            # 6
        "2 + 3 * 4",        # 14 (Precedence check)
        "(2 + 3) * 4",      # 20 (Parens check)
        "-2 + 3",           # 1 (Prefix check)
        "10 / 2 + 3",       # 8.0
        "2 +",              # Leftover input
        "10 / (2 - 2)"      # Runtime error
    ]

    print(f"{'Expression':<20} | {'Result':<10}")
    print("-" * 35)

    for expr_str in test_cases:
        try:
            result, err = run_parser(expr, expr_str, require_end=True)

            if err:
                print(f"{expr_str:<20} | Error: {err}")
            else:
                print(f"{expr_str:<20} | {result}")

        except ValueError as e:
            print(f"{expr_str:<20} | Runtime Error: {e}")
