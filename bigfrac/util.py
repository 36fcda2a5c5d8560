import functools
import logging
import typing

import numpy as np

from .rational import Rational

module_logger = logging.getLogger(__name__)


__all__ = [
    "rational_type",
    "str_to_rationals",
    "rationals_to_str",
    "to_float_array",
    "from_float_array",
    "exact_sum"
]


rational_type = typing.Union[str, int, Rational]


def _as_rational(value: typing.Any) -> Rational:
    if isinstance(value, (str, Rational)):
        return Rational.from_str(value)
    return Rational.from_number(value)


def str_to_rationals(rationals_str: str, delimiter: str = ",") -> np.ndarray:
    """
    Given some values, represented as a string of decimal or fraction
    text, create a numpy object array of Rational.

    Empty fields, like the ones produced by a trailing delimiter, parse
    as zero.
    """
    module_logger.debug((f"str_to_rationals: "
                         f"rationals_str={rationals_str}, "
                         f"delimiter={delimiter}"))
    fields = rationals_str.split(delimiter)
    rationals = np.empty(len(fields), dtype=object)
    for i, field in enumerate(fields):
        rationals[i] = Rational.parse(field.strip())
    return rationals


def rationals_to_str(values: typing.Iterable[rational_type],
                     always_show_denominator: bool = False) -> typing.List[str]:
    """
    Given some rationals, dump them to fraction text.

    Returns:
        list: a list of strings
    """
    values_as_str = [
        _as_rational(value).to_fraction_string(
            always_show_denominator=always_show_denominator)
        for value in values]
    module_logger.debug(f"rationals_to_str: values_as_str={values_as_str}")
    return values_as_str


def to_float_array(values: typing.Iterable[rational_type],
                   dtype: np.dtype = np.float64) -> np.ndarray:
    """
    Approximate each value as a float. The result is lossy, keep the
    Rational values around for anything that has to be exact.
    """
    values = [_as_rational(value) for value in values]
    module_logger.debug(
        f"to_float_array: len(values)={len(values)}, dtype={dtype}")
    return np.asarray([float(value) for value in values], dtype=dtype)


def from_float_array(arr: np.ndarray) -> np.ndarray:
    """
    Convert an array of numbers into an object array of Rational with the
    same shape. Floats go through their shortest repr, so 0.1 maps to 1/10.
    """
    arr = np.asarray(arr)
    module_logger.debug(
        f"from_float_array: shape={arr.shape}, dtype={arr.dtype}")
    rationals = np.empty(arr.shape, dtype=object)
    for idx, value in np.ndenumerate(arr):
        rationals[idx] = Rational.from_number(value)
    return rationals


def exact_sum(values: typing.Iterable[rational_type]) -> Rational:
    return functools.reduce(
        Rational.add, (_as_rational(value) for value in values), Rational.ZERO)
