__all__ = [
    "RationalError",
    "ParseError",
    "DivisionByZeroError"
]


class RationalError(Exception):
    pass


class ParseError(RationalError, ValueError):
    """
    Raised when text matches neither the decimal nor the fraction grammar.

    Attributes:
        text (str): the offending input
    """

    def __init__(self, text: str):
        self.text = text
        super(ParseError, self).__init__(f"illegal number format '{text}'.")


class DivisionByZeroError(RationalError, ZeroDivisionError):

    def __init__(self, message: str = "division by zero is not allowed."):
        super(DivisionByZeroError, self).__init__(message)
