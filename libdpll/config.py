""" Simulation configuration for the discrete time PLL
"""

import numbers
from dataclasses import dataclass, asdict, replace, fields
import numpy as np
from libdpll.filter import LoopFilterParams

###############################################################################
# Simulation parameters
###############################################################################

PHASE_OFFSET = 0.00         # reference carrier phase offset (rad)
FREQUENCY_OFFSET = 0.30     # reference carrier frequency offset (rad/sample)
WN = 0.01                   # pll bandwidth
ZETA = 0.707                # pll damping factor
K = 1000.0                  # pll loop gain
N = 400                     # number of samples


class ConfigError(ValueError):
    """ Raised for a simulation configuration the PLL core cannot run with
    """


@dataclass(frozen=True)
class PLLConfig:
    phase_offset: float = PHASE_OFFSET
    frequency_offset: float = FREQUENCY_OFFSET
    bandwidth: float = WN
    damping: float = ZETA
    loop_gain: float = K
    samples: int = N
    wrap_phase: bool = False

    @property
    def lf_params(self):
        return LoopFilterParams(bandwidth=self.bandwidth, damping=self.damping,
                                loop_gain=self.loop_gain)

    def validate(self):
        """ Checks the configuration once, before the simulation core runs.
            returns:
                self, to allow PLLConfig(...).validate() chaining
            raises:
                ConfigError naming the first offending field
        """
        for f in fields(self):
            if f.name in ("samples", "wrap_phase"):
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigError("%s must be a real number, got %r"%(f.name, value))
            if not np.isfinite(value):
                raise ConfigError("%s must be finite, got %r"%(f.name, value))
        for name in ("bandwidth", "damping", "loop_gain"):
            if getattr(self, name) <= 0:
                raise ConfigError("%s must be > 0, got %r"%(name, getattr(self, name)))
        if isinstance(self.samples, bool) or not isinstance(self.samples, numbers.Integral):
            raise ConfigError("samples must be an integer, got %r"%(self.samples,))
        if self.samples < 1:
            raise ConfigError("samples must be > 0, got %r"%self.samples)
        return self

    def replace(self, **changes):
        return replace(self, **changes)

    def as_dict(self):
        return asdict(self)
