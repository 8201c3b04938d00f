""" Loop filter design for the second order (type 2) PI-controlled PLL
"""

from dataclasses import dataclass, asdict
import numpy as np
import scipy.signal


@dataclass(frozen=True)
class LoopFilterParams:
    """ Continuous time PLL design targets
            bandwidth - loop natural frequency Wn (> 0)
            damping - damping factor zeta (> 0)
            loop_gain - loop gain K (> 0)
    """
    bandwidth: float
    damping: float
    loop_gain: float


@dataclass(frozen=True)
class DiscreteFilterCoefficients:
    """ IIR loop filter coefficients, a0 = 1.0 is implied
    """
    b0: float
    b1: float
    b2: float
    a1: float
    a2: float

    @property
    def a0(self):
        return 1.0

    @property
    def b(self):
        return (self.b0, self.b1, self.b2)

    @property
    def a(self):
        return (self.a0, self.a1, self.a2)

    def as_dict(self):
        return asdict(self)

#######################################################################################
#  Active PI design
#######################################################################################

def pi_lf_coefs(bandwidth, damping, loop_gain):
    """ Active PI loop filter, translated to discrete time coefficients.
        Inputs are assumed to be validated (all > 0), a zero bandwidth divides by zero.
        args:
            bandwidth - loop bandwidth Wn
            damping - damping factor zeta
            loop_gain - loop gain K
        returns:
            DiscreteFilterCoefficients
    """
    t1 = loop_gain/(bandwidth*bandwidth)
    t2 = 2.0*damping/bandwidth

    # feed-forward (numerator)
    b0 = (4.0*loop_gain/t1)*(1.0 + t2/2.0)
    b1 = 8.0*loop_gain/t1
    b2 = (4.0*loop_gain/t1)*(1.0 - t2/2.0)

    # feed-back (denominator), fixed by the discretization: double integrator
    a1 = -2.0
    a2 = 1.0
    return DiscreteFilterCoefficients(b0=b0, b1=b1, b2=b2, a1=a1, a2=a2)

def design_pi_lf(params):
    """ Same as pi_lf_coefs, from LoopFilterParams
    """
    return pi_lf_coefs(params.bandwidth, params.damping, params.loop_gain)

#######################################################################################
#  Loop filter responses
#######################################################################################

def lf_freqz(coefs, points=1024):
    """ Frequency response B(z)/A(z) of loop filter
        returns:
            w - normalized frequency (rad/sample), h - complex response
    """
    return scipy.signal.freqz(coefs.b, coefs.a, worN=int(points))

def lf_filter(coefs, x):
    return scipy.signal.lfilter(coefs.b, coefs.a, np.asarray(x, dtype=float))

def lf_impulse(coefs, steps):
    """ Impulse response of loop filter over steps samples
    """
    x = np.zeros(int(steps))
    if len(x):
        x[0] = 1.0
    return lf_filter(coefs, x)
