"""
Unit tests for monotonic schedules.

Constant, Linear, Exponential, Polynomial, Step and MultiStep.
"""

import pytest

from lr_schedulers.core.schedulers import (
    ConstantLR,
    LinearLR,
    ExponentialLR,
    PolynomialLR,
    StepLR,
    MultiStepLR,
    ScheduleConfigError,
)


class TestConstantLR:
    """Test ConstantLR."""

    def test_plain_constant_for_many_steps(self):
        scheduler = ConstantLR(base_lr=0.1)
        for _ in range(10001):
            assert scheduler.get_lr() == 0.1
            scheduler.step()

    def test_scaled_prefix(self, collect):
        scheduler = ConstantLR(base_lr=1.0, factor=2.0, total_iters=2)
        assert collect(scheduler, 5) == [2.0, 2.0, 1.0, 1.0, 1.0]

    def test_resume_inside_prefix(self, collect):
        scheduler = ConstantLR(base_lr=1.0, factor=2.0, total_iters=2, init_step=1)
        assert collect(scheduler, 5) == [2.0, 1.0, 1.0, 1.0, 1.0]

    def test_resume_after_prefix(self, collect):
        scheduler = ConstantLR(base_lr=0.5, factor=0.1, total_iters=2, init_step=3)
        assert collect(scheduler, 3) == [0.5, 0.5, 0.5]

    def test_zero_total_iters_disables_prefix(self, collect):
        scheduler = ConstantLR(base_lr=0.5, factor=0.1, total_iters=0)
        assert collect(scheduler, 3) == [0.5, 0.5, 0.5]

    def test_rejects_negative_total_iters(self):
        with pytest.raises(ScheduleConfigError, match="total_iters"):
            ConstantLR(base_lr=0.1, total_iters=-1)


class TestLinearLR:
    """Test LinearLR."""

    def test_decay_to_zero(self):
        scheduler = LinearLR(base_lr=1.0, start_factor=1.0, end_factor=0.0, total_iters=10)
        for _ in range(5):
            scheduler.step()
        assert scheduler.get_lr() == 0.5

        for _ in range(5):
            scheduler.step()
        assert scheduler.get_lr() == 0.0

        for _ in range(20):
            scheduler.step()
        assert scheduler.get_lr() == 0.0

    def test_decreasing_factor(self, collect):
        scheduler = LinearLR(base_lr=1.0, start_factor=2.0, end_factor=0.5, total_iters=2)
        assert collect(scheduler, 5) == [2.0, 1.25, 0.5, 0.5, 0.5]

    def test_increasing_factor(self, collect):
        scheduler = LinearLR(base_lr=1.0, start_factor=0.5, end_factor=2.0, total_iters=2)
        assert collect(scheduler, 5) == [0.5, 1.25, 2.0, 2.0, 2.0]

    def test_resume_before_total_iters(self, collect):
        scheduler = LinearLR(1.0, 0.5, 2.0, 2, init_step=1)
        assert collect(scheduler, 3) == [1.25, 2.0, 2.0]

    def test_rejects_zero_total_iters(self):
        with pytest.raises(ScheduleConfigError, match="total_iters must be positive"):
            LinearLR(base_lr=1.0, total_iters=0)

    def test_rejects_negative_factor(self):
        with pytest.raises(ScheduleConfigError, match="start_factor"):
            LinearLR(base_lr=1.0, start_factor=-0.5)


class TestExponentialLR:
    """Test ExponentialLR."""

    def test_geometric_decay(self, collect):
        scheduler = ExponentialLR(base_lr=2.0, gamma=0.5)
        assert collect(scheduler, 5) == [2.0, 1.0, 0.5, 0.25, 0.125]

    def test_resume(self, collect):
        scheduler = ExponentialLR(base_lr=2.0, gamma=0.5, init_step=1)
        assert collect(scheduler, 5) == [1.0, 0.5, 0.25, 0.125, 0.0625]

    @pytest.mark.parametrize("gamma", [0.0, -0.5])
    def test_rejects_non_positive_gamma(self, gamma):
        with pytest.raises(ScheduleConfigError, match="gamma must be positive"):
            ExponentialLR(base_lr=1.0, gamma=gamma)


class TestPolynomialLR:
    """Test PolynomialLR."""

    def test_linear_power(self, collect):
        scheduler = PolynomialLR(base_lr=1.0, total_iters=5, power=1.0)
        expected = [1.0, 0.8, 0.6, 0.4, 0.2, 0.0, 0.0, 0.0]
        assert collect(scheduler, 8) == pytest.approx(expected, abs=1e-10)

    def test_quadratic_power(self, collect):
        scheduler = PolynomialLR(base_lr=1.0, total_iters=4, power=2.0)
        expected = [1.0, 0.5625, 0.25, 0.0625, 0.0, 0.0]
        assert collect(scheduler, 6) == pytest.approx(expected, abs=1e-10)

    def test_clamps_to_zero_after_total_iters(self):
        scheduler = PolynomialLR(base_lr=1.0, total_iters=3, power=0.5, init_step=100)
        assert scheduler.get_lr() == 0.0

    def test_rejects_negative_power(self):
        with pytest.raises(ScheduleConfigError, match="power"):
            PolynomialLR(base_lr=1.0, total_iters=5, power=-1.0)


class TestStepLR:
    """Test StepLR."""

    def test_decays_every_step_size(self, collect):
        scheduler = StepLR(base_lr=1.0, step_size=3, gamma=0.1)
        rates = collect(scheduler, 7)
        assert rates[:3] == [1.0, 1.0, 1.0]
        assert rates[3:6] == pytest.approx([0.1, 0.1, 0.1])
        assert rates[6] == pytest.approx(0.01)

    def test_resume(self, collect):
        scheduler = StepLR(base_lr=1.0, step_size=3, gamma=0.1, init_step=2)
        assert collect(scheduler, 5) == pytest.approx([1.0, 0.1, 0.1, 0.1, 0.01])

    @pytest.mark.parametrize("step_size", [0, -3])
    def test_rejects_non_positive_step_size(self, step_size):
        with pytest.raises(ScheduleConfigError, match="step_size"):
            StepLR(base_lr=1.0, step_size=step_size)

    def test_rejects_float_step_size(self):
        with pytest.raises(ScheduleConfigError, match="integer"):
            StepLR(base_lr=1.0, step_size=2.5)


class TestMultiStepLR:
    """Test MultiStepLR."""

    def test_decays_at_milestones(self, collect):
        scheduler = MultiStepLR(base_lr=1.0, milestones=[3, 7], gamma=0.1)
        expected = [1.0, 1.0, 1.0, 0.1, 0.1, 0.1, 0.1, 0.01, 0.01, 0.01]
        assert collect(scheduler, 10) == pytest.approx(expected, abs=1e-10)

    def test_three_milestones(self, collect):
        scheduler = MultiStepLR(base_lr=0.5, milestones=[2, 5, 8], gamma=0.5)
        expected = [0.5, 0.5, 0.25, 0.25, 0.25, 0.125, 0.125, 0.125, 0.0625, 0.0625]
        assert collect(scheduler, 10) == expected

    def test_resume(self, collect):
        scheduler = MultiStepLR(base_lr=1.0, milestones=[3, 7], gamma=0.1, init_step=4)
        expected = [0.1, 0.1, 0.1, 0.01, 0.01]
        assert collect(scheduler, 5) == pytest.approx(expected, abs=1e-10)

    def test_milestone_at_zero(self):
        scheduler = MultiStepLR(base_lr=1.0, milestones=[0], gamma=0.5)
        assert scheduler.get_lr() == 0.5

    def test_empty_milestones_is_constant(self, collect):
        scheduler = MultiStepLR(base_lr=0.3, milestones=[])
        assert collect(scheduler, 4) == [0.3] * 4

    @pytest.mark.parametrize("milestones", [[3, 3], [5, 2], [1, 4, 4]])
    def test_rejects_non_increasing_milestones(self, milestones):
        with pytest.raises(ScheduleConfigError, match="strictly increasing"):
            MultiStepLR(base_lr=1.0, milestones=milestones)

    def test_rejects_negative_milestone(self):
        with pytest.raises(ScheduleConfigError, match=r"milestones\[0\]"):
            MultiStepLR(base_lr=1.0, milestones=[-1, 3])
