# tests/test_monte_carlo.py
"""
Tests for the Monte Carlo model driven by MultiPathGenerator.

Run with: pytest tests/test_monte_carlo.py -v
"""

import numpy as np
import pytest

from mcpathgen.exceptions import InputValidationError, MonteCarloError
from mcpathgen.pricing_models import BasketPathPricer, EuropeanOption, MonteCarloModel
from mcpathgen.processes import GeometricBrownianMotionProcess, StochasticProcessArray
from mcpathgen.simulation import (
    GaussianRandomSequenceGenerator,
    MultiPath,
    MultiPathGenerator,
    SobolRandomSequenceGenerator,
    TimeGrid,
)

# =============================================================================
# Fixtures
# =============================================================================

S, K, T, r, sigma = 100.0, 100.0, 1.0, 0.05, 0.2


@pytest.fixture
def single_asset_process():
    return StochasticProcessArray(
        [GeometricBrownianMotionProcess(S, r, sigma)], np.eye(1)
    )


@pytest.fixture
def bs_call():
    return EuropeanOption("call", S, K, 0.0, r, T, sigma).value()


def make_model(process, rsg_cls=GaussianRandomSequenceGenerator, antithetic=False, steps=1):
    grid = TimeGrid.from_horizon(T, steps)
    rsg = rsg_cls(process.size() * steps, seed=42)
    generator = MultiPathGenerator(process, grid, rsg, scheme="evolve")
    pricer = BasketPathPricer("call", K, np.exp(-r * T))
    return MonteCarloModel(generator, pricer, antithetic_variate=antithetic)


# =============================================================================
# Path pricer
# =============================================================================
class TestBasketPathPricer:
    def test_weighted_terminal_basket(self):
        multipath = MultiPath(2, TimeGrid([0.0, 1.0]))
        multipath.values[:, -1] = [120.0, 80.0]

        equal = BasketPathPricer("call", 95.0, 1.0)
        assert equal(multipath) == pytest.approx(5.0)

        skewed = BasketPathPricer("put", 95.0, 0.5, weights=[0.25, 0.75])
        assert skewed(multipath) == pytest.approx(0.5 * 5.0)

    def test_weight_count_mismatch(self):
        multipath = MultiPath(2, TimeGrid([0.0, 1.0]))
        pricer = BasketPathPricer("call", 95.0, 1.0, weights=[1.0, 0.0, 0.0])
        with pytest.raises(InputValidationError):
            pricer(multipath)

    def test_invalid_strike(self):
        with pytest.raises(InputValidationError):
            BasketPathPricer("call", 0.0, 1.0)


# =============================================================================
# Monte Carlo model
# =============================================================================
class TestMonteCarloModel:
    def test_plain_estimate_matches_black_scholes(self, single_asset_process, bs_call):
        model = make_model(single_asset_process)
        model.add_samples(20000)
        assert model.sample_count() == 20000
        assert abs(model.mean() - bs_call) < 5 * model.error_estimate()

    def test_antithetic_estimate_matches_black_scholes(self, single_asset_process, bs_call):
        model = make_model(single_asset_process, antithetic=True)
        model.add_samples(10000)
        assert abs(model.mean() - bs_call) < 5 * model.error_estimate()

    def test_antithetic_reduces_error(self, single_asset_process):
        plain = make_model(single_asset_process)
        paired = make_model(single_asset_process, antithetic=True)
        plain.add_samples(5000)
        paired.add_samples(5000)
        assert paired.error_estimate() < plain.error_estimate()

    def test_sobol_multi_step(self, single_asset_process, bs_call):
        model = make_model(single_asset_process, rsg_cls=SobolRandomSequenceGenerator, steps=4)
        model.add_samples(4096)
        assert model.mean() == pytest.approx(bs_call, abs=0.5)

    def test_statistics_need_samples(self, single_asset_process):
        model = make_model(single_asset_process)
        with pytest.raises(MonteCarloError):
            model.mean()
        model.add_samples(1)
        with pytest.raises(MonteCarloError):
            model.error_estimate()

    def test_invalid_sample_count(self, single_asset_process):
        model = make_model(single_asset_process)
        with pytest.raises(InputValidationError):
            model.add_samples(0)
