# mcpathgen/pricing_models/european_option.py

import numpy as np
from scipy.stats import norm

from mcpathgen.pricing_models.single_asset_option import SingleAssetOption
from mcpathgen.utils.utils import OptionType, as_option_type, exercise_payoff


def black_scholes_price(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type="call",
    q: float = 0.0,
) -> float:
    """
    Black-Scholes-Merton value of a European option.

    Parameters:
        S: Spot price of the underlying asset
        K: Strike price
        T: Time to maturity (in years)
        r: Risk-free interest rate (continuously compounded)
        sigma: Volatility of the underlying asset
        option_type: "call", "put" or "straddle"
        q: Dividend yield (default 0)

    Returns:
        Option price (float)
    """
    option_type = as_option_type(option_type)

    # Degenerate cases: discounted payoff on the forward
    if T <= 0 or sigma <= 0:
        forward = S * np.exp(-q * T) * np.exp(r * T)
        return float(np.exp(-r * T) * exercise_payoff(option_type, forward, K))

    d1 = (np.log(S / K) + (r - q + 0.5 * sigma**2) * T) / (sigma * np.sqrt(T))
    d2 = d1 - sigma * np.sqrt(T)

    call = S * np.exp(-q * T) * norm.cdf(d1) - K * np.exp(-r * T) * norm.cdf(d2)
    put = K * np.exp(-r * T) * norm.cdf(-d2) - S * np.exp(-q * T) * norm.cdf(-d1)

    if option_type is OptionType.CALL:
        return float(call)
    if option_type is OptionType.PUT:
        return float(put)
    return float(call + put)


class EuropeanOption(SingleAssetOption):
    """European option with closed-form Black-Scholes-Merton value and Greeks."""

    def _d1_d2(self):
        sqrt_t = np.sqrt(self.residual_time)
        d1 = (
            np.log(self.underlying / self.strike)
            + (self.risk_free_rate - self.dividend_yield + 0.5 * self.volatility**2)
            * self.residual_time
        ) / (self.volatility * sqrt_t)
        return d1, d1 - self.volatility * sqrt_t

    def _weights(self):
        # (call, put) multiplicities
        if self.option_type is OptionType.CALL:
            return 1.0, 0.0
        if self.option_type is OptionType.PUT:
            return 0.0, 1.0
        return 1.0, 1.0

    def value(self) -> float:
        return black_scholes_price(
            self.underlying,
            self.strike,
            self.residual_time,
            self.risk_free_rate,
            self.volatility,
            self.option_type,
            self.dividend_yield,
        )

    def delta(self) -> float:
        d1, _ = self._d1_d2()
        growth = np.exp(-self.dividend_yield * self.residual_time)
        c, p = self._weights()
        return float(growth * (c * norm.cdf(d1) + p * (norm.cdf(d1) - 1.0)))

    def gamma(self) -> float:
        d1, _ = self._d1_d2()
        growth = np.exp(-self.dividend_yield * self.residual_time)
        c, p = self._weights()
        single = growth * norm.pdf(d1) / (
            self.underlying * self.volatility * np.sqrt(self.residual_time)
        )
        return float((c + p) * single)

    def theta(self) -> float:
        """Value change per year of calendar time."""
        S, K, T = self.underlying, self.strike, self.residual_time
        r, q, sigma = self.risk_free_rate, self.dividend_yield, self.volatility
        d1, d2 = self._d1_d2()
        growth = np.exp(-q * T)
        discount = np.exp(-r * T)
        decay = -S * growth * norm.pdf(d1) * sigma / (2.0 * np.sqrt(T))

        call = decay + q * S * growth * norm.cdf(d1) - r * K * discount * norm.cdf(d2)
        put = decay - q * S * growth * norm.cdf(-d1) + r * K * discount * norm.cdf(-d2)
        c, p = self._weights()
        return float(c * call + p * put)

    def vega(self) -> float:
        d1, _ = self._d1_d2()
        growth = np.exp(-self.dividend_yield * self.residual_time)
        c, p = self._weights()
        single = self.underlying * growth * norm.pdf(d1) * np.sqrt(self.residual_time)
        return float((c + p) * single)

    def rho(self) -> float:
        _, d2 = self._d1_d2()
        T = self.residual_time
        scaled = self.strike * T * np.exp(-self.risk_free_rate * T)
        c, p = self._weights()
        return float(c * scaled * norm.cdf(d2) - p * scaled * norm.cdf(-d2))

    def dividend_rho(self) -> float:
        d1, _ = self._d1_d2()
        T = self.residual_time
        scaled = self.underlying * T * np.exp(-self.dividend_yield * T)
        c, p = self._weights()
        return float(-c * scaled * norm.cdf(d1) + p * scaled * norm.cdf(-d1))
