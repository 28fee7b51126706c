class PricingError(Exception):
    """Base class for pricing-related errors."""

    pass


class InvalidOptionTypeError(PricingError):
    """Raised when the provided option type is not call, put or straddle."""

    def __init__(self, option_type):
        super().__init__(
            f"Invalid option type '{option_type}'. Expected 'call', 'put' or 'straddle'."
        )


class NegativeVolatilityError(PricingError):
    """Raised when volatility is negative."""

    def __init__(self, sigma):
        super().__init__(f"Volatility must be non-negative, got {sigma}.")


class ImpliedVolatilityError(PricingError):
    """Raised when no volatility in the search interval reproduces the target value."""

    def __init__(self, target: float, min_vol: float, max_vol: float, details: str = ""):
        message = (
            f"Could not find implied volatility for target value {target:.6f} "
            f"in [{min_vol}, {max_vol}]."
        )
        if details:
            message += f" Details: {details}"
        super().__init__(message)
