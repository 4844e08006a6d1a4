"""
HullScope Test Configuration and Fixtures

Provides the reference design and reduced sweep/training configurations so
surrogate tests train in seconds rather than minutes.
"""

import pytest

from hullscope.core.params import HullParams
from hullscope.surrogate.config import SweepConfig, SweepRange, TrainingConfig


# Coarse sweep: 4 × 3 × 2 × 4 hull types × 3 × 2 = 576 designs
SMALL_SWEEP = SweepConfig(
    lwl=SweepRange(6.0, 7.5, 0.5),
    beam=SweepRange(1.2, 2.0, 0.4),
    depth=SweepRange(0.6, 1.0, 0.4),
    total_load=SweepRange(150.0, 500.0, 175.0),
    engine_hp=SweepRange(15.0, 25.0, 10.0),
)


@pytest.fixture
def default_params():
    """The default 7 m single-chine outboard skiff."""
    return HullParams()


@pytest.fixture
def reference_params():
    """Reference design with every parameter stated explicitly."""
    return HullParams(
        lwl=7.0,
        beam=1.8,
        depth=0.85,
        hull_type="single-chine",
        deadrise=15.0,
        bow_type="plumb",
        stern_type="transom",
        crew_weight=160.0,
        cargo_weight=50.0,
        ballast_weight=0.0,
        fuel_capacity=50.0,
        water_capacity=40.0,
        engine_hp=25.0,
        engine_type="outboard",
    )


@pytest.fixture(scope="session")
def small_sweep():
    return SMALL_SWEEP


@pytest.fixture
def fast_training_config():
    """Three short epochs over the coarse sweep."""
    return TrainingConfig(
        epochs=3,
        batch_size=32,
        learning_rate=1e-3,
        validation_split=0.1,
        seed=7,
        sweep=SMALL_SWEEP,
    )
