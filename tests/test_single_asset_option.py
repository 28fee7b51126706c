# tests/test_single_asset_option.py
"""
Tests for closed-form European options and implied volatility.
"""

import numpy as np
import pytest

from mcpathgen.exceptions import (
    ImpliedVolatilityError,
    InvalidOptionTypeError,
    NegativeVolatilityError,
    PricingError,
)
from mcpathgen.pricing_models import (
    EuropeanOption,
    SingleAssetOption,
    VolatilityFunction,
    black_scholes_price,
)
from mcpathgen.utils import OptionType, exercise_payoff


# =============================================================================
# FIXTURES
# =============================================================================
@pytest.fixture
def atm_call():
    return EuropeanOption("call", 100.0, 100.0, 0.0, 0.05, 1.0, 0.2)


@pytest.fixture
def atm_put():
    return EuropeanOption(OptionType.PUT, 100.0, 100.0, 0.0, 0.05, 1.0, 0.2)


class BumpedEuropeanOption(SingleAssetOption):
    """Uses the finite-difference vega/rho defaults of the base class."""

    def value(self):
        return black_scholes_price(
            self.underlying,
            self.strike,
            self.residual_time,
            self.risk_free_rate,
            self.volatility,
            self.option_type,
            self.dividend_yield,
        )

    def delta(self):
        return 0.0

    def gamma(self):
        return 0.0

    def theta(self):
        return 0.0


# =============================================================================
# PAYOFF
# =============================================================================
class TestExercisePayoff:
    def test_payoffs(self):
        assert exercise_payoff("call", 110.0, 100.0) == 10.0
        assert exercise_payoff("call", 90.0, 100.0) == 0.0
        assert exercise_payoff("put", 90.0, 100.0) == 10.0
        assert exercise_payoff(OptionType.STRADDLE, 90.0, 100.0) == 10.0

    def test_invalid_type(self):
        with pytest.raises(InvalidOptionTypeError):
            exercise_payoff("butterfly", 90.0, 100.0)


# =============================================================================
# CLOSED FORM
# =============================================================================
class TestEuropeanOption:
    def test_known_values(self, atm_call, atm_put):
        assert pytest.approx(atm_call.value(), 0.01) == 10.45
        assert pytest.approx(atm_put.value(), 0.01) == 5.57

    def test_put_call_parity(self, atm_call, atm_put):
        parity = 100.0 - 100.0 * np.exp(-0.05)
        assert atm_call.value() - atm_put.value() == pytest.approx(parity)

    def test_straddle_is_call_plus_put(self, atm_call, atm_put):
        straddle = EuropeanOption("straddle", 100.0, 100.0, 0.0, 0.05, 1.0, 0.2)
        assert straddle.value() == pytest.approx(atm_call.value() + atm_put.value())
        assert straddle.vega() == pytest.approx(2.0 * atm_call.vega())

    def test_greeks_match_finite_differences(self, atm_call):
        h = 1e-4
        up = EuropeanOption("call", 100.0 + h, 100.0, 0.0, 0.05, 1.0, 0.2)
        down = EuropeanOption("call", 100.0 - h, 100.0, 0.0, 0.05, 1.0, 0.2)
        assert atm_call.delta() == pytest.approx((up.value() - down.value()) / (2 * h), rel=1e-5)
        assert atm_call.gamma() == pytest.approx(
            (up.value() - 2 * atm_call.value() + down.value()) / (h * h), rel=1e-3
        )

        shorter = EuropeanOption("call", 100.0, 100.0, 0.0, 0.05, 1.0 - h, 0.2)
        assert atm_call.theta() == pytest.approx((shorter.value() - atm_call.value()) / h, rel=1e-3)

    def test_analytic_greeks_match_bumped_defaults(self):
        args = ("put", 95.0, 100.0, 0.02, 0.04, 0.75, 0.25)
        analytic = EuropeanOption(*args)
        bumped = BumpedEuropeanOption(*args)
        assert bumped.vega() == pytest.approx(analytic.vega(), rel=1e-3)
        assert bumped.rho() == pytest.approx(analytic.rho(), rel=1e-3)
        assert bumped.dividend_rho() == pytest.approx(analytic.dividend_rho(), rel=1e-3)

    def test_expired_option_is_intrinsic(self):
        assert black_scholes_price(90.0, 100.0, 0.0, 0.05, 0.2, "put") == pytest.approx(10.0)

    def test_degenerate_inputs_rejected(self):
        with pytest.raises(PricingError, match="residual time"):
            EuropeanOption("call", 100.0, 100.0, 0.0, 0.05, 0.0, 0.2)
        with pytest.raises(PricingError, match="volatility"):
            EuropeanOption("call", 100.0, 90.0, 0.0, 0.05, 1.0, 0.0)

        option = EuropeanOption("call", 100.0, 100.0, 0.0, 0.05, 1.0, 0.2)
        with pytest.raises(PricingError):
            option.set_volatility(0.0)
        assert option.volatility == 0.2
        for greek in (option.delta, option.gamma, option.theta, option.vega, option.rho):
            assert np.isfinite(greek())

    def test_invalid_inputs(self):
        with pytest.raises(PricingError):
            EuropeanOption("call", -1.0, 100.0, 0.0, 0.05, 1.0, 0.2)
        with pytest.raises(PricingError):
            EuropeanOption("call", 100.0, 100.0, 0.0, 0.05, -1.0, 0.2)
        with pytest.raises(NegativeVolatilityError):
            EuropeanOption("call", 100.0, 100.0, 0.0, 0.05, 1.0, -0.2)

    def test_modifiers_reset_cached_greeks(self):
        option = BumpedEuropeanOption("call", 100.0, 100.0, 0.0, 0.05, 1.0, 0.2)
        vega_before = option.vega()
        option.set_volatility(0.4)
        assert option.vega() != vega_before
        with pytest.raises(NegativeVolatilityError):
            option.set_volatility(-0.1)


# =============================================================================
# IMPLIED VOLATILITY
# =============================================================================
class TestImpliedVolatility:
    @pytest.mark.parametrize(
        "option_type,S,sigma",
        [("call", 100.0, 0.20), ("put", 100.0, 0.25), ("call", 120.0, 0.30), ("put", 120.0, 0.35)],
    )
    def test_recovers_volatility(self, option_type, S, sigma):
        option = EuropeanOption(option_type, S, 100.0, 0.0, 0.05, 1.0, sigma)
        target = option.value()
        option.set_volatility(0.1)
        assert option.implied_volatility(target, accuracy=1e-8) == pytest.approx(sigma, abs=1e-6)

    def test_original_option_untouched(self, atm_call):
        atm_call.implied_volatility(12.0)
        assert atm_call.volatility == 0.2

    def test_volatility_function(self, atm_call):
        objective = VolatilityFunction(atm_call.clone(), 10.0)
        assert objective(0.2) == pytest.approx(atm_call.value() - 10.0)

    def test_unreachable_target(self, atm_call):
        with pytest.raises(ImpliedVolatilityError):
            atm_call.implied_volatility(150.0)

    def test_non_positive_target(self, atm_call):
        with pytest.raises(ImpliedVolatilityError):
            atm_call.implied_volatility(0.0)
