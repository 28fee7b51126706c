class MonteCarloError(Exception):
    """Base exception for the Monte Carlo simulation layer"""


class InputValidationError(MonteCarloError):
    """Raised for invalid inputs to grids, paths and processes"""


class ConfigurationError(MonteCarloError):
    """Raised when a generator or process is assembled from inconsistent parts.

    Examples are a random source whose dimension does not match the number of
    factors times the number of time steps, or a time grid with fewer than
    two instants. Not recoverable without changing the setup.
    """


class UnsupportedFeatureError(MonteCarloError):
    """Raised when a requested feature has no implementation."""

    def __init__(self, feature: str):
        super().__init__(f"{feature} not supported")
        self.feature = feature
