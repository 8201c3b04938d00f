import numpy as np
import pytest

from libdpll.filter import pi_lf_coefs
from libdpll.pllcomp import ReferencePhase, TrackingLoop, iter_reference, phase_detector


def test_reference_without_offsets_is_constant():
    samples = list(iter_reference(0.0, 0.0, 50))
    assert len(samples) == 50
    assert all(x == complex(1.0, 0.0) for x in samples)


def test_reference_advances_after_emitting():
    ref = ReferencePhase(0.3, init_phase=0.1)
    assert ref.update() == complex(np.cos(0.1), np.sin(0.1))
    assert ref.phase == pytest.approx(0.4)
    x = ref.update()
    assert abs(x) == pytest.approx(1.0)
    assert np.angle(x) == pytest.approx(0.4)


def test_reference_restart():
    ref = ReferencePhase(0.25, init_phase=1.0)
    first = [ref.update() for _ in range(5)]
    ref.reset()
    assert [ref.update() for _ in range(5)] == first
    ref.reset(init_phase=0.0)
    assert ref.update() == complex(1.0, 0.0)


def test_reference_phase_is_unbounded_by_default():
    ref = ReferencePhase(1.0)
    for _ in range(20):
        ref.update()
    assert ref.phase == pytest.approx(20.0)


def test_reference_wrap():
    ref = ReferencePhase(1.0, wrap=True)
    plain = ReferencePhase(1.0)
    for _ in range(20):
        np.testing.assert_allclose(ref.update(), plain.update(), atol=1e-12)
        assert 0.0 <= ref.phase < 2*np.pi


def test_phase_detector_range():
    rng = np.random.default_rng(7)
    for a, b in rng.uniform(-20, 20, (500, 2)):
        error = phase_detector(complex(np.cos(a), np.sin(a)), complex(np.cos(b), np.sin(b)))
        assert -np.pi < error <= np.pi


def test_phase_detector_half_cycle():
    assert phase_detector(complex(-1.0, -0.0), complex(1.0, 0.0)) == np.pi
    assert phase_detector(complex(-1.0, 0.0), complex(1.0, 0.0)) == np.pi


def test_phase_detector_small_offset():
    x = complex(np.cos(0.2), np.sin(0.2))
    y = complex(np.cos(-0.1), np.sin(-0.1))
    assert phase_detector(x, y) == pytest.approx(0.3)
    assert phase_detector(y, x) == pytest.approx(-0.3)


def test_tracking_loop_first_step():
    loop = TrackingLoop(pi_lf_coefs(0.01, 0.707, 1000.0))
    x = complex(np.cos(0.5), np.sin(0.5))
    y, error = loop.update(x)
    # output reflects the state before the update
    assert y == complex(1.0, 0.0)
    assert error == pytest.approx(0.5)
    assert loop.lf.v0 == pytest.approx(0.5)
    assert loop.phase == pytest.approx(0.5*loop.coefs.b0)


def test_tracking_loop_register_order():
    coefs = pi_lf_coefs(0.01, 0.707, 1000.0)
    loop = TrackingLoop(coefs)
    loop.lf.v0, loop.lf.v1 = 2.0, 1.0
    loop.update(complex(1.0, 0.0))
    assert loop.lf.v2 == 1.0
    assert loop.lf.v1 == 2.0
    # v0 = error - v1*a1 - v2*a2 with error = 0
    assert loop.lf.v0 == pytest.approx(0.0 + 2.0*2.0 - 1.0)
    assert loop.phase == pytest.approx(3.0*coefs.b0 + 2.0*coefs.b1 + 1.0*coefs.b2)


def test_tracking_loop_reset():
    loop = TrackingLoop(pi_lf_coefs(0.01, 0.707, 1000.0))
    for x in iter_reference(0.0, 0.3, 10):
        loop.update(x)
    loop.reset()
    assert loop.phase == 0.0
    assert (loop.lf.v0, loop.lf.v1, loop.lf.v2) == (0.0, 0.0, 0.0)
