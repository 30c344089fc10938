"""
Pytest configuration for lr_schedulers tests.
"""

import pytest


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests by default unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def collect_lrs(schedule, num_steps, loss=None):
    """Record get_lr() then step() for num_steps iterations."""
    rates = []
    for _ in range(num_steps):
        rates.append(schedule.get_lr())
        schedule.step(loss)
    return rates


@pytest.fixture
def collect():
    return collect_lrs
