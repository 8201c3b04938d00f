import logging
import matplotlib
matplotlib.use("Agg")

import pytest
from libdpll.config import PLLConfig


@pytest.fixture
def default_config():
    return PLLConfig().validate()


@pytest.fixture
def restore_root_logging():
    """ dpllsim.main() reconfigures the root, dpllsim and libdpll loggers """
    saved = {}
    for name in (None, "dpllsim", "libdpll"):
        log = logging.getLogger(name)
        saved[name] = (log.handlers[:], log.level, log.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        log = logging.getLogger(name)
        for h in log.handlers[:]:
            if h not in handlers:
                log.removeHandler(h)
        for h in handlers:
            if h not in log.handlers:
                log.addHandler(h)
        log.setLevel(level)
        log.propagate = propagate
