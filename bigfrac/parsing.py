import decimal
import logging
import re
import typing

from . import config as _config
from .errors import ParseError, DivisionByZeroError

module_logger = logging.getLogger(__name__)

__all__ = [
    "zero_strings",
    "decimal_pattern",
    "fraction_pattern",
    "integer_pattern",
    "FractionParser",
    "parse_components",
    "parse_integer",
    "digits_to_int"
]

# spellings that are zero without consulting either grammar
zero_strings = frozenset([
    "", "0", "+0", "-0",
    "0.0", "+0.0", "-0.0",
    "0.", "+0.", "-0.",
    ".0", "+.0", "-.0",
    ".", "+.", "-.",
    "+", "-"
])

decimal_pattern = re.compile(
    r"(?P<sign>[+-]?)(?=\.?[0-9])(?P<integer>[0-9]*)(?:\.(?P<fraction>[0-9]*))?")

fraction_pattern = re.compile(
    r"(?P<numerator>[+-]?[0-9]+)/(?P<denominator>[+-]?[0-9]+)")

integer_pattern = re.compile(r"[+-]?[0-9]+")


def digits_to_int(digits: str) -> int:
    # int() refuses strings longer than sys.get_int_max_str_digits()
    if len(digits) > 4000:
        return int(decimal.Decimal(digits))
    return int(digits)


def _has_leading_zero(digits: str) -> bool:
    digits = digits.lstrip("+-")
    return len(digits) > 1 and digits.startswith("0")


def parse_integer(text: str, allow_leading_zeros: bool = True) -> int:
    """
    Parse a signed run of ASCII digits into an int.

    int() alone is too lenient here: it accepts whitespace, underscores
    and non-ASCII digits.
    """
    if not integer_pattern.fullmatch(text):
        raise ParseError(text)
    if not allow_leading_zeros and _has_leading_zero(text):
        raise ParseError(text)
    return digits_to_int(text)


class FractionParser:
    """
    Split decimal or fraction text into a numerator, denominator pair.

    Calling the parser returns the raw pair: decimal text maps to
    (digits, 10**n_fraction_digits) and fraction text to its two sides.
    Reducing the pair is left to the caller.

    Args:
        allow_leading_zeros (bool): If False, integer components like "01"
            or "-007" are rejected. Defaults to the value from
            bigfrac.config.
    """

    def __init__(self, allow_leading_zeros: bool = None):
        self.logger = module_logger.getChild("FractionParser")
        if allow_leading_zeros is None:
            allow_leading_zeros = _config.config.allow_leading_zeros
        self.allow_leading_zeros = allow_leading_zeros

    def __repr__(self):
        return (f"{type(self).__name__}("
                f"allow_leading_zeros={self.allow_leading_zeros})")

    def __call__(self, text: typing.Optional[str]) -> typing.Tuple[int, int]:
        if text is None or (isinstance(text, str) and text in zero_strings):
            self.logger.debug(f"__call__: zero spelling text={text!r}")
            return 0, 1
        if not isinstance(text, str):
            raise TypeError(
                (f"Couldn't parse {text} "
                 f"of type {type(text)}"))

        match = decimal_pattern.fullmatch(text)
        if match is not None:
            self.logger.debug(f"__call__: decimal text={text!r}")
            return self._from_decimal(text, match)

        match = fraction_pattern.fullmatch(text)
        if match is not None:
            self.logger.debug(f"__call__: fraction text={text!r}")
            return self._from_fraction(text, match)

        raise ParseError(text)

    def _from_decimal(self, text: str, match: re.Match) -> typing.Tuple[int, int]:
        integer = match.group("integer")
        fraction = match.group("fraction") or ""
        if not self.allow_leading_zeros and _has_leading_zero(integer):
            raise ParseError(text)
        digits = (integer + fraction) or "0"
        numerator = digits_to_int(match.group("sign") + digits)
        return numerator, 10**len(fraction)

    def _from_fraction(self, text: str, match: re.Match) -> typing.Tuple[int, int]:
        numerator_str = match.group("numerator")
        denominator_str = match.group("denominator")
        if not self.allow_leading_zeros and (
                _has_leading_zero(numerator_str) or
                _has_leading_zero(denominator_str)):
            raise ParseError(text)
        denominator = digits_to_int(denominator_str)
        if denominator == 0:
            raise DivisionByZeroError()
        return digits_to_int(numerator_str), denominator


def parse_components(text: typing.Optional[str],
                     allow_leading_zeros: bool = None) -> typing.Tuple[int, int]:
    return FractionParser(allow_leading_zeros=allow_leading_zeros)(text)
