# mcpathgen/utils/utils.py

from enum import Enum  # Change to StrEnum if Python 3.11+

from mcpathgen.exceptions.pricing_exceptions import InvalidOptionTypeError


# ===== Option Type Enum =====
class OptionType(Enum):  # Use StrEnum if Python 3.11+
    CALL = "call"
    PUT = "put"
    STRADDLE = "straddle"

    @staticmethod
    def from_string(s: str) -> "OptionType":
        try:
            return OptionType(s.lower())
        except ValueError:
            raise InvalidOptionTypeError(s)


def as_option_type(option_type) -> OptionType:
    if isinstance(option_type, OptionType):
        return option_type
    if isinstance(option_type, str):
        return OptionType.from_string(option_type)
    raise InvalidOptionTypeError(option_type)


# ===== Payoff =====
def exercise_payoff(option_type, price: float, strike: float) -> float:
    """Intrinsic value of exercising at ``price``."""
    option_type = as_option_type(option_type)
    if option_type is OptionType.CALL:
        return max(price - strike, 0.0)
    if option_type is OptionType.PUT:
        return max(strike - price, 0.0)
    return abs(strike - price)
