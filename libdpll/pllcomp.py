""" PLL component model class implementations for discrete time simulation
    of a complex baseband carrier tracking loop
"""

import numpy as np
from libdpll.tools import wrap_phase

###############################################################################
# Reference
###############################################################################

class ReferencePhase:
    """ PHASE DOMAIN ideal reference carrier with constant frequency offset,
        output is unit magnitude complex sample
    """
    def __init__(self, frequency_offset, init_phase=0.0, wrap=False):
        """ args:
                frequency_offset - phase increment per sample (rad/sample)
                init_phase - phase of first sample (rad)
                wrap - reduce phase modulo 2*pi after each step
        """
        self.frequency_offset = frequency_offset
        self.init_phase = init_phase
        self.wrap = wrap
        self.phase = init_phase

    def update(self):
        """ returns:
                reference sample at current phase, phase is then advanced
        """
        x = complex(np.cos(self.phase), np.sin(self.phase))
        self.phase += self.frequency_offset
        if self.wrap: self.phase = wrap_phase(self.phase)
        return x

    def reset(self, init_phase=None):
        if init_phase is not None:
            self.init_phase = init_phase
        self.phase = self.init_phase


def iter_reference(phase_offset, frequency_offset, samples, wrap=False):
    """ Lazily yield the first samples of a reference carrier
    """
    ref = ReferencePhase(frequency_offset, init_phase=phase_offset, wrap=wrap)
    for _ in range(samples):
        yield ref.update()

###############################################################################
# Phase detector
###############################################################################

def phase_detector(x, y):
    """ Phase difference of x relative to y, arg(x*conj(y)) in (-pi, pi].
        No unwrapping between calls.
    """
    error = float(np.angle(x*np.conj(y)))
    # atan2 gives -pi for a -0.0 imaginary part
    if error == -np.pi:
        error = np.pi
    return error

###############################################################################
# Loop filter
###############################################################################

class LoopFilterIIR:
    """ Second order IIR loop filter, direct form II shift register
    """
    def __init__(self, coefs):
        """ args:
                coefs - DiscreteFilterCoefficients
        """
        self.coefs = coefs
        self.v0 = 0.0
        self.v1 = 0.0
        self.v2 = 0.0

    def update(self, xin):
        """ args:
                xin - filter input
            returns:
                filter output
        """
        c = self.coefs
        self.v2 = self.v1
        self.v1 = self.v0
        self.v0 = xin - self.v1*c.a1 - self.v2*c.a2
        return self.v0*c.b0 + self.v1*c.b1 + self.v2*c.b2

    def reset(self,):
        self.v0 = 0.0
        self.v1 = 0.0
        self.v2 = 0.0

###############################################################################
# Tracking loop
###############################################################################

class TrackingLoop:
    """ PHASE DOMAIN carrier tracking loop. The NCO phase is the loop filter output
        (a1, a2 of the loop filter form the phase accumulation), so the phase is
        recomputed from the filter registers each step and is never wrapped.
    """
    def __init__(self, coefs, init_phase=0.0):
        self.lf = LoopFilterIIR(coefs)
        self.init_phase = init_phase
        self.phase = init_phase

    @property
    def coefs(self):
        return self.lf.coefs

    def update(self, x):
        """ args:
                x - reference sample
            returns:
                (y, error) - NCO output and phase error, both from the state
                before this update
        """
        y = complex(np.cos(self.phase), np.sin(self.phase))
        error = phase_detector(x, y)
        self.phase = self.lf.update(error)
        return y, error

    def reset(self,):
        self.lf.reset()
        self.phase = self.init_phase
