import decimal
import logging
import os
import typing

module_logger = logging.getLogger(__name__)

__all__ = [
    "Config",
    "load_config",
    "rounding_modes",
    "config"
]

rounding_modes = (
    decimal.ROUND_UP,
    decimal.ROUND_DOWN,
    decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_05UP
)

_false_strings = ("0", "false", "no", "off")


class Config(typing.NamedTuple):
    precision: int = 500
    rounding: str = decimal.ROUND_HALF_UP
    allow_leading_zeros: bool = True


def check_precision(precision: typing.Any) -> int:
    precision = int(precision)
    if precision < 1:
        raise ValueError(f"precision must be at least 1, got {precision}")
    return precision


def check_rounding(rounding: str) -> str:
    if rounding not in rounding_modes:
        raise ValueError(
            (f"Unknown rounding mode {rounding}, "
             f"expected one of {', '.join(rounding_modes)}"))
    return rounding


def load_config(environ: typing.Mapping[str, str] = None) -> Config:
    """
    Build a Config from environment variables.

    Recognized variables are BIGFRAC_DECIMAL_PRECISION,
    BIGFRAC_DECIMAL_ROUNDING and BIGFRAC_ALLOW_LEADING_ZEROS. Anything
    missing falls back to the Config defaults.

    Args:
        environ (dict): defaults to os.environ
    Returns:
        Config
    """
    if environ is None:
        environ = os.environ
    defaults = Config()

    precision_str = environ.get("BIGFRAC_DECIMAL_PRECISION", None)
    precision = defaults.precision
    if precision_str is not None:
        try:
            precision = check_precision(precision_str)
        except ValueError as err:
            raise ValueError(
                f"BIGFRAC_DECIMAL_PRECISION: {err}") from err

    rounding = environ.get("BIGFRAC_DECIMAL_ROUNDING", defaults.rounding)
    try:
        rounding = check_rounding(rounding)
    except ValueError as err:
        raise ValueError(f"BIGFRAC_DECIMAL_ROUNDING: {err}") from err

    allow_leading_zeros = defaults.allow_leading_zeros
    leading_zeros_str = environ.get("BIGFRAC_ALLOW_LEADING_ZEROS", None)
    if leading_zeros_str is not None:
        allow_leading_zeros = \
            leading_zeros_str.strip().lower() not in _false_strings

    loaded = Config(precision, rounding, allow_leading_zeros)
    module_logger.debug(f"load_config: config={loaded}")
    return loaded


config = load_config()
