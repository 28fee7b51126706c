from mcpathgen.exceptions.montecarlo_exceptions import (
    MonteCarloError,
    InputValidationError,
    ConfigurationError,
    UnsupportedFeatureError,
)
from mcpathgen.exceptions.pricing_exceptions import (
    PricingError,
    InvalidOptionTypeError,
    NegativeVolatilityError,
    ImpliedVolatilityError,
)

__all__ = [
    "MonteCarloError",
    "InputValidationError",
    "ConfigurationError",
    "UnsupportedFeatureError",
    "PricingError",
    "InvalidOptionTypeError",
    "NegativeVolatilityError",
    "ImpliedVolatilityError",
]
