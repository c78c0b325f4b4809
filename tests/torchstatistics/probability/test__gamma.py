# tests/torchstatistics/probability/test__gamma.py
import math
import warnings

import pytest
import scipy.stats
import torch

from torchstatistics.probability import (
    ArgumentCountError,
    ComplexInputError,
    ConvergenceWarning,
    ShapeMismatchError,
    gamma_cumulative_distribution,
    gamma_probability_density,
    gamma_quantile,
    gamma_random,
)

nan = math.nan
inf = math.inf


class TestGammaPdfForward:
    """Test gamma_probability_density forward correctness."""

    def test_scipy_comparison(self):
        x = torch.linspace(0.1, 20, 100, dtype=torch.float64)
        expected = torch.tensor(
            scipy.stats.gamma.pdf(x.numpy(), a=2, scale=2), dtype=torch.float64
        )
        torch.testing.assert_close(gamma_probability_density(x, 2, 2), expected)

    def test_boundary(self):
        x = torch.tensor([-1.0, 0.0, 0.0, 0.0, inf], dtype=torch.float64)
        shape = torch.tensor([2.0, 0.5, 1.0, 2.0, 2.0], dtype=torch.float64)

        result = gamma_probability_density(x, shape, 2.0)

        torch.testing.assert_close(
            result,
            torch.tensor([0.0, inf, 0.5, 0.0, 0.0], dtype=torch.float64),
        )

    def test_invalid(self):
        result = gamma_probability_density(
            torch.tensor([1.0, 1.0, 1.0, nan]),
            torch.tensor([0.0, inf, 1.0, 1.0]),
            torch.tensor([1.0, 1.0, -1.0, 1.0]),
        )
        assert torch.isnan(result).all()


class TestGammaCdfForward:
    """Test gamma_cumulative_distribution forward correctness."""

    @pytest.mark.parametrize(
        "shape,scale", [(1, 1), (2, 1), (5, 2), (0.5, 1), (10, 0.5)]
    )
    def test_scipy_comparison(self, shape, scale):
        x = torch.linspace(0.1, 20, 50, dtype=torch.float64)
        expected = torch.tensor(
            scipy.stats.gamma.cdf(x.numpy(), a=shape, scale=scale),
            dtype=torch.float64,
        )
        torch.testing.assert_close(
            gamma_cumulative_distribution(x, shape, scale), expected
        )

    def test_support(self):
        x = torch.tensor([-inf, -1.0, 0.0, inf, nan], dtype=torch.float64)
        result = gamma_cumulative_distribution(x, 2.0, 1.0)
        torch.testing.assert_close(
            result,
            torch.tensor([0.0, 0.0, 0.0, 1.0, nan], dtype=torch.float64),
            equal_nan=True,
        )

    def test_exponential_case(self):
        """Gamma(1, scale) CDF is 1 - exp(-x/scale)."""
        x = torch.linspace(0.1, 10, 50, dtype=torch.float64)
        torch.testing.assert_close(
            gamma_cumulative_distribution(x, 1.0, 2.0), -torch.expm1(-x / 2)
        )


class TestGammaQuantileForward:
    """Test gamma_quantile forward correctness."""

    @pytest.fixture
    def p(self):
        return torch.tensor(
            [-1.0, 0.0, 0.63212055882855778, 1.0, 2.0], dtype=torch.float64
        )

    def test_exponential(self, p):
        expected = torch.tensor([nan, 0.0, 1.0, inf, nan], dtype=torch.float64)
        ones = torch.ones(5, dtype=torch.float64)

        for args in [(ones, ones), (1.0, ones), (ones, 1.0)]:
            torch.testing.assert_close(
                gamma_quantile(p, *args),
                expected,
                rtol=1e-14,
                atol=1e-15,
                equal_nan=True,
            )

    def test_invalid_shape(self, p):
        shape = torch.tensor([1.0, -inf, nan, inf, 1.0], dtype=torch.float64)
        assert torch.isnan(gamma_quantile(p, shape, 1.0)).all()

    def test_invalid_scale(self, p):
        scale = torch.tensor([1.0, -inf, nan, inf, 1.0], dtype=torch.float64)
        assert torch.isnan(gamma_quantile(p, 1.0, scale)).all()

    def test_nan_probability(self):
        p = torch.tensor([-1.0, 0.0, nan, 1.0, 2.0], dtype=torch.float64)
        torch.testing.assert_close(
            gamma_quantile(p, 1.0, 1.0),
            torch.tensor([nan, 0.0, nan, inf, nan], dtype=torch.float64),
            equal_nan=True,
        )

    @pytest.mark.parametrize(
        "p,shape,scale,expected",
        [
            (1e-16, 1.0, 1.0, 1e-16),
            (1e-16, 1.0, 2.0, 2e-16),
            (1e-20, 3.0, 5.0, 1.957434012161815e-06),
            (1e-15, 1.0, 1.0, 1e-15),
            (1e-35, 1.0, 1.0, 1e-35),
        ],
    )
    def test_small_probability(self, p, shape, scale, expected):
        """Accuracy when p is small."""
        result = gamma_quantile(p, shape, scale)
        assert result.dtype == torch.float64
        assert result.item() == pytest.approx(expected, rel=1e-12)

    def test_scipy_comparison(self):
        p = torch.linspace(0.01, 0.99, 99, dtype=torch.float64)
        expected = torch.tensor(
            scipy.stats.gamma.ppf(p.numpy(), a=2, scale=2), dtype=torch.float64
        )
        torch.testing.assert_close(
            gamma_quantile(p, 2.0, 2.0), expected, rtol=1e-10, atol=0.0
        )

    def test_cumulative_distribution_quantile_roundtrip(self):
        """cdf(ppf(cdf(x))) = cdf(x)."""
        x = torch.linspace(0.5, 10, 50, dtype=torch.float64)
        shape = torch.linspace(0.2, 20, 50, dtype=torch.float64)

        p = gamma_cumulative_distribution(x, shape, 3.0)
        x_recovered = gamma_quantile(p, shape, 3.0)

        torch.testing.assert_close(
            gamma_cumulative_distribution(x_recovered, shape, 3.0),
            p,
            rtol=math.sqrt(torch.finfo(torch.float64).eps),
            atol=0.0,
        )

    def test_no_warning_on_success(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", ConvergenceWarning)
            gamma_quantile(torch.rand(100, dtype=torch.float64), 4.0, 1.0)

    def test_unreachable_tolerance_warns_once(self):
        """The warning is global to the call; results are still returned."""
        p = torch.tensor([0.0, 0.1, 0.5, 0.9, 1.0], dtype=torch.float64)

        with pytest.warns(ConvergenceWarning, match="gamma_quantile") as record:
            result = gamma_quantile(p, 2.0, 1.0, tolerance=-1.0)

        assert len(record) == 1
        torch.testing.assert_close(
            result,
            torch.tensor(
                scipy.stats.gamma.ppf(p.numpy(), a=2), dtype=torch.float64
            ),
            rtol=1e-10,
            atol=0.0,
        )


class TestGammaPrecision:
    """The result precision follows the inputs."""

    def test_quantile_reduced(self):
        p = torch.tensor([-1.0, 0.0, 0.63212055882855778, 1.0, 2.0, nan])
        result = gamma_quantile(p, 1.0, 1.0)

        assert result.dtype == torch.float32
        torch.testing.assert_close(
            result,
            torch.tensor([nan, 0.0, 1.0, inf, nan, nan]),
            equal_nan=True,
        )

    @pytest.mark.parametrize("position", [1, 2])
    def test_quantile_reduced_parameter(self, position):
        args = [[0.0, 0.5, 1.0], 1.0, 1.0]
        args[position] = torch.tensor(1.0)

        assert gamma_quantile(*args).dtype == torch.float32

    def test_cdf_standard(self):
        assert gamma_cumulative_distribution(1.0, 1.0, 1.0).dtype == torch.float64


class TestGammaValidation:
    """Input validation shared by every gamma function."""

    @pytest.mark.parametrize(
        "function",
        [
            gamma_probability_density,
            gamma_cumulative_distribution,
            gamma_quantile,
        ],
    )
    def test_argument_count(self, function):
        for args in [(), (1,), (1, 2), (1, 2, 3, 4)]:
            with pytest.raises(ArgumentCountError):
                function(*args)

    def test_random_argument_count(self):
        with pytest.raises(ArgumentCountError):
            gamma_random(1.0)

    @pytest.mark.parametrize(
        "shapes",
        [
            [(3, 3), (2, 2), (2, 2)],
            [(2, 2), (3, 3), (2, 2)],
            [(2, 2), (2, 2), (3, 3)],
        ],
    )
    def test_shape_mismatch(self, shapes):
        with pytest.raises(ShapeMismatchError):
            gamma_quantile(*[torch.full(s, 0.5) for s in shapes])

    @pytest.mark.parametrize("args", [(1j, 2, 2), (2, 1j, 2), (2, 2, 1j)])
    def test_complex(self, args):
        with pytest.raises(ComplexInputError):
            gamma_quantile(*args)


class TestGammaRandom:
    """Test gamma_random."""

    def test_sizes(self):
        assert gamma_random(1.0, 1.0).shape == ()
        assert gamma_random(1.0, 1.0, 3).shape == (3, 3)
        assert gamma_random(1.0, 1.0, [4, 1]).shape == (4, 1)
        assert gamma_random(1.0, 1.0, 4, 1).shape == (4, 1)
        assert gamma_random(torch.ones(2, 1), 1.0).shape == (2, 1)

    def test_mean(self):
        torch.manual_seed(0)
        result = gamma_random(3.0, 2.0, [50000])
        assert result.mean().item() == pytest.approx(6.0, rel=0.02)
        assert (result > 0).all()

    def test_invalid_parameters(self):
        result = gamma_random(torch.tensor([2.0, 0.0, nan]), 1.0)
        assert not torch.isnan(result[0])
        assert torch.isnan(result[1:]).all()
