""" PLL Analysis methods
"""

import numpy as np
from libdpll._signal import make_signal

###############################################################################
# Lock / settling
###############################################################################

def meas_lock_time(sig, tol):
    """ Measure lock time of phase error signal from time domain data, i.e. the
        first sample from which |error| <= tol holds to the end of the run.
        Note: a run that ends out of tolerance is reported as unlocked (nan).
    """
    below_tol = np.abs(sig.td) <= tol
    if not len(below_tol) or not below_tol[-1]:
        return np.nan

    n = len(sig.td)-1
    while n>0 and below_tol[n-1]:
        n -= 1
    return n/sig.fs

def meas_rms_error(sig, nmin=0):
    """ RMS phase error (rad) from sample nmin on
    """
    td = sig.td[int(nmin):]
    if not len(td):
        return np.nan
    return float(np.sqrt(np.mean(np.abs(td)**2)))

###############################################################################
# Frequency measurement
###############################################################################

def meas_inst_freq(signal):
    """ Per-sample phase increment of a phase signal (rad/sample at fs=1)
    """
    return make_signal(td=signal.fs*np.diff(signal.td), fs=signal.fs,
                       name="inst_freq(%s)"%signal.name)
