import numpy as np
import pytest

from libdpll.config import PLLConfig, ConfigError, FREQUENCY_OFFSET, N
from libdpll.filter import LoopFilterParams


def test_defaults():
    config = PLLConfig()
    assert config.phase_offset == 0.0
    assert config.frequency_offset == FREQUENCY_OFFSET == 0.30
    assert config.bandwidth == 0.01
    assert config.damping == 0.707
    assert config.loop_gain == 1000.0
    assert config.samples == N == 400
    assert config.wrap_phase is False
    assert config.validate() is config


def test_lf_params():
    config = PLLConfig(bandwidth=0.02, damping=1.0, loop_gain=10.0)
    assert config.lf_params == LoopFilterParams(bandwidth=0.02, damping=1.0, loop_gain=10.0)


@pytest.mark.parametrize("field", ["bandwidth", "damping", "loop_gain"])
@pytest.mark.parametrize("value", [0.0, -1.0])
def test_non_positive_design_params_rejected(field, value):
    with pytest.raises(ConfigError, match=field):
        PLLConfig(**{field: value}).validate()


@pytest.mark.parametrize("samples", [0, -5])
def test_non_positive_samples_rejected(samples):
    with pytest.raises(ConfigError, match="samples"):
        PLLConfig(samples=samples).validate()


@pytest.mark.parametrize("samples", [1.5, "10", True])
def test_non_integer_samples_rejected(samples):
    with pytest.raises(ConfigError, match="samples"):
        PLLConfig(samples=samples).validate()


@pytest.mark.parametrize("field", ["phase_offset", "frequency_offset", "bandwidth"])
def test_non_finite_rejected(field):
    with pytest.raises(ConfigError, match=field):
        PLLConfig(**{field: np.inf}).validate()
    with pytest.raises(ConfigError, match=field):
        PLLConfig(**{field: float("nan")}).validate()


def test_negative_offsets_are_valid():
    PLLConfig(phase_offset=-1.0, frequency_offset=-0.2).validate()


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_replace_returns_new_config():
    config = PLLConfig()
    swept = config.replace(frequency_offset=0.05)
    assert swept.frequency_offset == 0.05
    assert config.frequency_offset == 0.30
    assert swept.as_dict()["frequency_offset"] == 0.05
