__version__ = "0.1.0"

from .errors import RationalError, ParseError, DivisionByZeroError
from .rational import Rational

ZERO = Rational.ZERO
ONE = Rational.ONE
parse = Rational.parse
from_integers = Rational.from_integers
from_number = Rational.from_number

__all__ = [
    "Rational",
    "RationalError",
    "ParseError",
    "DivisionByZeroError",
    "ZERO",
    "ONE",
    "parse",
    "from_integers",
    "from_number"
]
