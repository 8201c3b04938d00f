""" Random helping functions / decorators """
import functools
import logging
import time
import numpy as np

logger = logging.getLogger(__name__)

def wrap_phase(x):
    """ Reduce phase accumulator to [0, 2*pi). Trigonometric value is unchanged
        up to float rounding.
    """
    return float(np.mod(x, 2*np.pi))


def timer(func):
    """Log the runtime of the decorated function"""
    @functools.wraps(func)
    def wrapper_timer(*args, **kwargs):
        start_time = time.perf_counter()
        value = func(*args, **kwargs)
        run_time = time.perf_counter() - start_time
        logger.debug("Finished %r in %.2f seconds", func.__name__, run_time)
        return value
    return wrapper_timer
