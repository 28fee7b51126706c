from mcpathgen.pricing_models.european_option import EuropeanOption, black_scholes_price
from mcpathgen.pricing_models.monte_carlo import BasketPathPricer, MonteCarloModel, PathPricer
from mcpathgen.pricing_models.single_asset_option import SingleAssetOption, VolatilityFunction

__all__ = [
    "black_scholes_price",
    "EuropeanOption",
    "SingleAssetOption",
    "VolatilityFunction",
    "PathPricer",
    "BasketPathPricer",
    "MonteCarloModel",
]
