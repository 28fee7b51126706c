# mcpathgen/pricing_models/single_asset_option.py
"""
Common code for single-asset option evaluation.

``SingleAssetOption`` holds the market and contract data of a plain option
and defines the Greeks interface. Vega, rho and dividend rho default to
one-sided finite differences on a clone; closed-form subclasses override
them.

Implied volatility is found by handing a ``VolatilityFunction`` to Brent's
method. The function is a closure over a private clone of the option: every
evaluation sets the clone's volatility and returns value - target, so the
original option is left untouched.
"""

import copy
import logging
from abc import ABC, abstractmethod

from scipy.optimize import brentq

from mcpathgen.common.config import MAX_VOLATILITY, MIN_VOLATILITY, RATE_BUMP, VOL_BUMP
from mcpathgen.exceptions.pricing_exceptions import (
    ImpliedVolatilityError,
    NegativeVolatilityError,
    PricingError,
)
from mcpathgen.utils.utils import as_option_type

__all__ = ["SingleAssetOption", "VolatilityFunction"]

logger = logging.getLogger(__name__)


def _bump(x: float, relative: float) -> float:
    return x * relative if x != 0.0 else relative


def _check_volatility(volatility: float) -> None:
    if volatility < 0:
        raise NegativeVolatilityError(volatility)
    if volatility < MIN_VOLATILITY:
        raise PricingError(
            f"volatility must be at least {MIN_VOLATILITY}, got {volatility}"
        )


class SingleAssetOption(ABC):
    def __init__(
        self,
        option_type,
        underlying: float,
        strike: float,
        dividend_yield: float,
        risk_free_rate: float,
        residual_time: float,
        volatility: float,
    ):
        if underlying <= 0 or strike <= 0:
            raise PricingError(
                f"underlying and strike must be positive, got S={underlying}, K={strike}"
            )
        if residual_time <= 0:
            raise PricingError(f"residual time must be positive, got T={residual_time}")
        _check_volatility(volatility)

        self.option_type = as_option_type(option_type)
        self.underlying = float(underlying)
        self.strike = float(strike)
        self.dividend_yield = float(dividend_yield)
        self.risk_free_rate = float(risk_free_rate)
        self.residual_time = float(residual_time)
        self.volatility = float(volatility)
        self._reset()

    def _reset(self) -> None:
        self._vega = None
        self._rho = None
        self._dividend_rho = None

    # modifiers
    def set_volatility(self, volatility: float) -> None:
        _check_volatility(volatility)
        self.volatility = float(volatility)
        self._reset()

    def set_risk_free_rate(self, rate: float) -> None:
        self.risk_free_rate = float(rate)
        self._reset()

    def set_dividend_yield(self, dividend_yield: float) -> None:
        self.dividend_yield = float(dividend_yield)
        self._reset()

    # accessors
    @abstractmethod
    def value(self) -> float:
        pass

    @abstractmethod
    def delta(self) -> float:
        pass

    @abstractmethod
    def gamma(self) -> float:
        pass

    @abstractmethod
    def theta(self) -> float:
        pass

    def vega(self) -> float:
        if self._vega is None:
            h = _bump(self.volatility, VOL_BUMP)
            bumped = self.clone()
            bumped.set_volatility(self.volatility + h)
            self._vega = (bumped.value() - self.value()) / h
        return self._vega

    def rho(self) -> float:
        if self._rho is None:
            h = _bump(self.risk_free_rate, RATE_BUMP)
            bumped = self.clone()
            bumped.set_risk_free_rate(self.risk_free_rate + h)
            self._rho = (bumped.value() - self.value()) / h
        return self._rho

    def dividend_rho(self) -> float:
        if self._dividend_rho is None:
            h = _bump(self.dividend_yield, RATE_BUMP)
            bumped = self.clone()
            bumped.set_dividend_yield(self.dividend_yield + h)
            self._dividend_rho = (bumped.value() - self.value()) / h
        return self._dividend_rho

    def implied_volatility(
        self,
        target_value: float,
        accuracy: float = 1e-4,
        max_evaluations: int = 100,
        min_vol: float = MIN_VOLATILITY,
        max_vol: float = MAX_VOLATILITY,
    ) -> float:
        """
        Volatility that reproduces ``target_value``.

        Args:
            target_value: Option value to match (must be positive).
            accuracy: Absolute tolerance on the volatility.
            max_evaluations: Iteration cap for the root finder.
            min_vol, max_vol: Search interval.

        Raises:
            ImpliedVolatilityError: If the target is not positive, is not
                bracketed by the search interval, or the solver fails.
        """
        if target_value <= 0:
            raise ImpliedVolatilityError(
                target_value, min_vol, max_vol, "target value must be positive"
            )

        objective = VolatilityFunction(self.clone(), target_value)
        f_low = objective(min_vol)
        f_high = objective(max_vol)
        if f_low * f_high > 0:
            raise ImpliedVolatilityError(
                target_value, min_vol, max_vol, "root not bracketed"
            )

        try:
            sigma = brentq(
                objective, min_vol, max_vol, xtol=accuracy, maxiter=max_evaluations
            )
        except RuntimeError as e:
            raise ImpliedVolatilityError(target_value, min_vol, max_vol, str(e)) from e

        logger.debug("implied_volatility: target=%.6f -> sigma=%.6f", target_value, sigma)
        return sigma

    def clone(self) -> "SingleAssetOption":
        other = copy.copy(self)
        other._reset()
        return other


class VolatilityFunction:
    """Objective ``f(sigma) = option.value() - target`` for 1-D root finders."""

    def __init__(self, option: SingleAssetOption, target_value: float):
        self.option = option
        self.target_value = target_value

    def __call__(self, x: float) -> float:
        self.option.set_volatility(x)
        return self.option.value() - self.target_value
