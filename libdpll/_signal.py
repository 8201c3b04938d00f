import logging
import numpy as np

logger = logging.getLogger(__name__)


class Signal:
    def __init__(self, td, fs, samples, name):
        self.td = td
        self.fs = fs
        self.samples = samples
        self.name = name


def make_signal(td=[], fs=None, name="", *args, **kwargs):
    """Method to assist with creation of Signal objects from simulation time series.
    Complex data is kept complex, everything else is stored as float.
    """
    if isinstance(td, list):
        if len(td) and isinstance(td[0], complex):
            td = np.array(td, dtype=complex)
        else:
            td = np.array(td, dtype=float)
    elif not isinstance(td, np.ndarray):
        raise TypeError("time domain argument td of unsupported type %s. Use list or ndarray"%type(td).__name__)
    if not fs:
        logger.debug("* No sampling rate fs provided for %r, assuming 1 sample/s.", name)
        fs = 1
    return Signal(td, fs, len(td), name)
