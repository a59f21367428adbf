from pycombinator.Char import char, string
from pycombinator.Prim import run_parser


class TimeMany:
    def setup(self):
        self.parser = char("a").many()
        self.small = "a" * 1000
        self.medium = "a" * 10000
        self.large = "a" * 100000

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)


class TimeToken:
    def setup(self):
        self.parser = string("ab").token().many()
        self.text = " ab  " * 5000

    def time_token_many(self):
        run_parser(self.parser, self.text)
