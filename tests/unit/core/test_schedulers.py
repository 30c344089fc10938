"""
Unit tests for behaviour shared by every learning rate scheduler.

Covers the Schedule protocol, get_lr idempotence, ignored loss sentinels,
init_step resume equivalence and init_step validation.
"""

import math

import pytest

from lr_schedulers.core.schedulers import (
    Schedule,
    ScheduleConfigError,
    ConstantLR,
    LinearLR,
    ExponentialLR,
    PolynomialLR,
    StepLR,
    MultiStepLR,
    CosineAnnealingLR,
    CosineAnnealingWarmRestarts,
    CyclicLR,
    MultiplicativeLR,
    ReduceLROnPlateau,
    OneCycleLR,
)

# Schedules whose rate is a function of the step count alone
STATELESS_FACTORIES = {
    "constant": lambda init_step=0: ConstantLR(0.5, factor=0.1, total_iters=3, init_step=init_step),
    "linear": lambda init_step=0: LinearLR(1.0, 1.0, 0.0, 10, init_step=init_step),
    "exponential": lambda init_step=0: ExponentialLR(1.0, 0.9, init_step=init_step),
    "polynomial": lambda init_step=0: PolynomialLR(1.0, 8, 2.0, init_step=init_step),
    "step": lambda init_step=0: StepLR(1.0, 3, 0.1, init_step=init_step),
    "multistep": lambda init_step=0: MultiStepLR(1.0, [2, 5, 9], 0.5, init_step=init_step),
    "cosine": lambda init_step=0: CosineAnnealingLR(1.0, 0.1, 7, init_step=init_step),
    "cosine_warm_restarts": lambda init_step=0: CosineAnnealingWarmRestarts(
        1.0, 0.0, 2, 2, init_step=init_step
    ),
    "cyclic": lambda init_step=0: CyclicLR(0.1, 1.0, 3, 2, mode="triangular2", init_step=init_step),
    "onecycle": lambda init_step=0: OneCycleLR(1.0, 20, 0.3, three_phase=True, init_step=init_step),
}

ALL_FACTORIES = {
    **STATELESS_FACTORIES,
    "multiplicative": lambda init_step=0: MultiplicativeLR(
        1.0, lambda step: 0.9, init_step=init_step
    ),
}


@pytest.fixture(params=sorted(ALL_FACTORIES))
def scheduler(request):
    return ALL_FACTORIES[request.param]()


def test_implements_schedule_protocol(scheduler):
    assert isinstance(scheduler, Schedule)


def test_plateau_implements_schedule_protocol():
    assert isinstance(ReduceLROnPlateau(init_lr=1.0), Schedule)


def test_get_lr_is_idempotent(scheduler):
    for _ in range(25):
        first = scheduler.get_lr()
        assert scheduler.get_lr() == first
        assert scheduler.get_lr(0.5) == first
        scheduler.step()


def test_rates_are_finite_and_non_negative(scheduler):
    for _ in range(50):
        lr = scheduler.get_lr()
        assert math.isfinite(lr)
        assert lr >= 0.0
        scheduler.step()


@pytest.mark.parametrize("sentinel", [None, 0.0, float("nan"), 1e9])
@pytest.mark.parametrize("name", sorted(ALL_FACTORIES))
def test_loss_is_ignored(name, sentinel):
    with_loss = ALL_FACTORIES[name]()
    without_loss = ALL_FACTORIES[name]()
    for _ in range(15):
        assert with_loss.get_lr(sentinel) == without_loss.get_lr()
        with_loss.step(sentinel)
        without_loss.step()


@pytest.mark.parametrize("name", sorted(STATELESS_FACTORIES))
@pytest.mark.parametrize("k,n", [(0, 5), (1, 4), (3, 0), (7, 9), (19, 6)])
def test_resume_matches_replay(name, k, n):
    resumed = STATELESS_FACTORIES[name](init_step=k)
    replayed = STATELESS_FACTORIES[name]()
    for _ in range(n):
        resumed.step()
    for _ in range(k + n):
        replayed.step()
    assert resumed.step_count == replayed.step_count == k + n
    assert resumed.get_lr() == pytest.approx(replayed.get_lr(), abs=1e-12)


@pytest.mark.parametrize("init_step", [-1, 1.5, True])
@pytest.mark.parametrize("name", sorted(ALL_FACTORIES))
def test_rejects_invalid_init_step(name, init_step):
    with pytest.raises(ScheduleConfigError, match="init_step"):
        ALL_FACTORIES[name](init_step=init_step)


def test_rejects_non_finite_rates():
    with pytest.raises(ScheduleConfigError, match="finite"):
        ConstantLR(base_lr=float("inf"))
    with pytest.raises(ScheduleConfigError, match="real number"):
        ConstantLR(base_lr="0.1")
