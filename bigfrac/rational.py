import decimal
import fractions
import logging
import math
import numbers
import operator
import typing

from . import config as _config
from .errors import DivisionByZeroError
from .parsing import FractionParser, parse_integer

module_logger = logging.getLogger(__name__)

__all__ = [
    "Rational",
    "number_type"
]

number_type = typing.Union[
    int, float, decimal.Decimal, fractions.Fraction, "Rational"]

# str(int) is refused past sys.get_int_max_str_digits(), roughly 13000 bits
_max_str_bits = 13000


def _int_to_str(n: int) -> str:
    if n.bit_length() > _max_str_bits:
        return format(decimal.Decimal(n), "f")
    return str(n)


def _normalize(numerator: int,
               denominator: int,
               reduce: bool = True) -> typing.Tuple[int, int]:
    if denominator == 0:
        raise DivisionByZeroError()
    # cross multiplication in compare() relies on a positive denominator
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator
    if reduce:
        gcd = math.gcd(numerator, denominator)
        if gcd > 1:
            numerator //= gcd
            denominator //= gcd
    return numerator, denominator


def _coerce_integer(value: typing.Any) -> int:
    if isinstance(value, str):
        return parse_integer(
            value, allow_leading_zeros=_config.config.allow_leading_zeros)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            (f"Couldn't identify {value} "
             f"of type {type(value)} as an integer")) from None


class Rational:
    """
    Immutable arbitrary precision fraction.

    Numerator and denominator are plain ints. The sign is kept in the
    numerator and the denominator is always positive. Every arithmetic
    result is reduced by the gcd of its parts.

    Examples:

    .. code-block:: python

        >>> Rational.parse("2/3") * Rational.parse("-6/7")
        Rational('-4/7')
        >>> Rational(1000) / 21 * 21
        Rational('1000')

    Args:
        numerator (int/str): integer or integer text
        denominator (int/str): integer or integer text, defaults to 1
    """

    ZERO: "Rational"
    ONE: "Rational"

    def __init__(self, numerator, denominator=1):
        self._numerator, self._denominator = _normalize(
            _coerce_integer(numerator), _coerce_integer(denominator))
        self._decimal_value = None

    @classmethod
    def from_integers(cls,
                      numerator: int,
                      denominator: int = 1,
                      reduce: bool = True) -> "Rational":
        """
        Create a Rational from two ints.

        With reduce=False the parts are kept as given, apart from moving
        the sign into the numerator. Equality and hashing still treat the
        result as its reduced value.
        """
        instance = cls.__new__(cls)
        instance._numerator, instance._denominator = _normalize(
            operator.index(numerator), operator.index(denominator), reduce)
        instance._decimal_value = None
        return instance

    @classmethod
    def parse(cls,
              text: typing.Optional[str],
              *,
              allow_leading_zeros: bool = None) -> "Rational":
        """
        Parse decimal text like "-123.678" or fraction text like "2/-3".

        Empty text, None and the other zero spellings give ZERO.

        Raises:
            ParseError: if text matches neither grammar
            DivisionByZeroError: if a fraction has a zero right hand side
        """
        parser = FractionParser(allow_leading_zeros=allow_leading_zeros)
        numerator, denominator = parser(text)
        return cls.from_integers(numerator, denominator)

    @classmethod
    def from_str(cls, rational_str: typing.Any, delimiter: str = "/"):
        """
        Return a new instance of Rational if `rational_str` is a str.
        If `rational_str` is already a Rational object, just return that.

        Args:
            rational_str (str/Rational)
            delimiter (str): separator between numerator and denominator
        Returns:
            Rational
        """
        module_logger.debug(
            (f"Rational.from_str: rational_str={rational_str!r}, "
             f"delimiter={delimiter!r}"))
        if isinstance(rational_str, Rational):
            return rational_str
        elif isinstance(rational_str, str):
            if delimiter != "/" and delimiter in rational_str:
                return cls(*rational_str.split(delimiter, 1))
            return cls.parse(rational_str)
        else:
            raise TypeError(
                (f"Couldn't identify {rational_str} "
                 f"of type {type(rational_str)}"))

    @classmethod
    def from_number(cls, number: number_type) -> "Rational":
        """
        Exact Rational for an int, Fraction, Decimal or float.

        Floats go through their shortest decimal repr, so 0.1 gives 1/10
        and not the binary expansion of the double.
        """
        if isinstance(number, Rational):
            return number
        if isinstance(number, numbers.Integral):
            return cls.from_integers(int(number))
        if isinstance(number, numbers.Rational):
            return cls.from_integers(number.numerator, number.denominator)
        if isinstance(number, decimal.Decimal):
            if not number.is_finite():
                raise ValueError(f"Cannot convert {number} to Rational")
            return cls.from_integers(*number.as_integer_ratio())
        if isinstance(number, numbers.Real):
            if not math.isfinite(number):
                raise ValueError(f"Cannot convert {number} to Rational")
            try:
                value = decimal.Decimal(str(number))
            except decimal.InvalidOperation:
                value = decimal.Decimal(float(number))
            return cls.from_integers(*value.as_integer_ratio())
        raise TypeError(
            (f"Couldn't identify {number} "
             f"of type {type(number)} as a number"))

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def signum(self) -> int:
        return (self._numerator > 0) - (self._numerator < 0)

    @property
    def is_positive(self) -> bool:
        """Zero counts as positive."""
        return self._numerator >= 0

    def _new(self, numerator: int, denominator: int) -> "Rational":
        return type(self).from_integers(numerator, denominator)

    def _canonical(self) -> typing.Tuple[int, int]:
        return _normalize(self._numerator, self._denominator)

    @classmethod
    def _lift(cls, value: typing.Any) -> typing.Optional["Rational"]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, numbers.Integral):
            return cls.from_integers(int(value))
        return None

    def _operand(self, value: typing.Any) -> "Rational":
        lifted = self._lift(value)
        if lifted is None:
            raise TypeError(
                (f"Expected Rational or int operand, "
                 f"got {value} of type {type(value)}"))
        return lifted

    # arithmetic

    def reciprocal(self) -> "Rational":
        return self._new(self._denominator, self._numerator)

    def multiply(self, value) -> "Rational":
        """
        Multiply by `value`.

        If a numerator of one side equals the denominator of the other,
        that factor is cancelled before multiplying. Dividing and then
        multiplying by the same value therefore gives back the exact
        parts of the start value, with no growth.
        """
        value = self._operand(value)
        cancel_upper_left_lower_right = self._numerator == value._denominator
        cancel_lower_left_upper_right = self._denominator == value._numerator
        if cancel_upper_left_lower_right and cancel_lower_left_upper_right:
            return self.ONE
        elif cancel_upper_left_lower_right:
            return self._new(value._numerator, self._denominator)
        elif cancel_lower_left_upper_right:
            return self._new(self._numerator, value._denominator)
        return self._new(self._numerator * value._numerator,
                         self._denominator * value._denominator)

    def divide(self, value) -> "Rational":
        return self.multiply(self._operand(value).reciprocal())

    def add(self, value) -> "Rational":
        value = self._operand(value)
        if self._denominator == value._denominator:
            return self._new(self._numerator + value._numerator,
                             self._denominator)
        return self._new(
            self._numerator * value._denominator +
            value._numerator * self._denominator,
            self._denominator * value._denominator)

    def subtract(self, value) -> "Rational":
        value = self._operand(value)
        if self._denominator == value._denominator:
            return self._new(self._numerator - value._numerator,
                             self._denominator)
        return self._new(
            self._numerator * value._denominator -
            value._numerator * self._denominator,
            self._denominator * value._denominator)

    def negate(self) -> "Rational":
        return self._new(-self._numerator, self._denominator)

    def abs(self) -> "Rational":
        return self._new(abs(self._numerator), self._denominator)

    def pow(self, exponent: int) -> "Rational":
        """
        Raise to an integer power.

        x.pow(0) is ONE for every x, including ZERO. Negative exponents
        go through reciprocal(), so ZERO.pow(-1) raises
        DivisionByZeroError.
        """
        exponent = operator.index(exponent)
        if exponent == 0:
            return self.ONE
        if exponent < 0:
            return self.reciprocal().pow(-exponent)
        if self._numerator == 0:
            return self.ZERO
        return self._new(self._numerator**exponent,
                         self._denominator**exponent)

    def __add__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        if isinstance(exponent, Rational):
            numerator, denominator = exponent._canonical()
            if denominator != 1:
                return NotImplemented
            exponent = numerator
        try:
            exponent = operator.index(exponent)
        except TypeError:
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self._new(self._numerator, self._denominator)

    def __abs__(self):
        return self.abs()

    # comparison

    def compare(self, value) -> int:
        """
        Exact three way comparison, returning -1, 0 or 1.

        Never goes through floating point, and gives 0 for any two
        representations of the same value, e.g. 1/2 and 500000/1000000.
        """
        value = self._operand(value)
        if self._denominator == value._denominator:
            left, right = self._numerator, value._numerator
        else:
            left = self._numerator * value._denominator
            right = value._numerator * self._denominator
        return (left > right) - (left < right)

    def compare_to_number(self, number: number_type) -> int:
        """
        Compare numerically against any supported number type.

        Unlike ``==``, this treats ints, floats, Decimals and Fractions
        by their value.
        """
        return self.compare(self.from_number(number))

    def _richcmp(self, other, op):
        if isinstance(other, decimal.Decimal) and not other.is_finite():
            # NaN Decimals signal on ordering, compare as the float instead
            other = float("nan") if other.is_nan() else float(other)
        if (isinstance(other, numbers.Real) and
                not isinstance(other, numbers.Rational) and
                not math.isfinite(other)):
            # any finite value orders like 0.0 against inf and nan
            return op(0.0, other)
        try:
            other = self.from_number(other)
        except TypeError:
            return NotImplemented
        return op(self.compare(other), 0)

    def __lt__(self, other):
        return self._richcmp(other, operator.lt)

    def __le__(self, other):
        return self._richcmp(other, operator.le)

    def __gt__(self, other):
        return self._richcmp(other, operator.gt)

    def __ge__(self, other):
        return self._richcmp(other, operator.ge)

    def __eq__(self, other):
        # never equal to other types, use compare_to_number for those
        if not isinstance(other, Rational):
            return False
        return self.compare(other) == 0

    def __hash__(self):
        return hash(self._canonical())

    def __bool__(self):
        return self._numerator != 0

    # conversion

    def decimal_value(self,
                      precision: int = None,
                      rounding: str = None) -> decimal.Decimal:
        """
        Approximate this Rational as a Decimal.

        This is lossy for non terminating expansions like 1/7 and is
        meant for display and interop only.

        Args:
            precision (int): significant digits, defaults to
                bigfrac.config.config.precision (500)
            rounding (str): one of the decimal.ROUND_* modes, defaults to
                bigfrac.config.config.rounding (ROUND_HALF_UP)
        Returns:
            decimal.Decimal
        """
        use_default = precision is None and rounding is None
        if use_default and self._decimal_value is not None:
            return self._decimal_value

        if precision is None:
            precision = _config.config.precision
        if rounding is None:
            rounding = _config.config.rounding
        precision = _config.check_precision(precision)
        rounding = _config.check_rounding(rounding)
        module_logger.debug(
            (f"Rational.decimal_value: precision={precision}, "
             f"rounding={rounding}"))

        context = decimal.Context(
            prec=precision,
            rounding=rounding,
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN)
        value = context.divide(
            decimal.Decimal(self._numerator),
            decimal.Decimal(self._denominator))
        if use_default:
            self._decimal_value = value
        return value

    def to_decimal_string(self,
                          precision: int = None,
                          rounding: str = None) -> str:
        return format(self.decimal_value(precision, rounding), "f")

    def to_plain_string(self) -> str:
        return self.to_decimal_string()

    def to_fraction_string(self, always_show_denominator: bool = False) -> str:
        numerator_str = _int_to_str(self._numerator)
        if self._denominator == 1 and not always_show_denominator:
            return numerator_str
        return f"{numerator_str}/{_int_to_str(self._denominator)}"

    def __float__(self):
        return float(self.decimal_value())

    def __int__(self):
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def __str__(self):
        return self.to_fraction_string()

    def __repr__(self):
        return f"{type(self).__name__}('{self}')"


Rational.ZERO = Rational.from_integers(0, 1)
Rational.ONE = Rational.from_integers(1, 1)
