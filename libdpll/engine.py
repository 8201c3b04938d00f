""" Engine for running simulation
"""

import logging
from typing import NamedTuple
import numpy as np
from libdpll.tools import timer
from libdpll.filter import design_pi_lf
from libdpll.pllcomp import ReferencePhase, TrackingLoop
from libdpll._signal import make_signal

logger = logging.getLogger(__name__)


class SampleRow(NamedTuple):
    index: int
    x: complex
    y: complex
    error: float


#////////////////////////////////////////////////////////////////////////////////////////////
# Carrier tracking PLL simulator

def make_components(config, coefs=None):
    """ Designs the loop filter (unless given) and instantiates the reference
        and tracking loop
        returns:
            (coefs, ref, loop)
    """
    if coefs is None:
        coefs = design_pi_lf(config.lf_params)
    ref = ReferencePhase(config.frequency_offset, init_phase=config.phase_offset,
                         wrap=config.wrap_phase)
    loop = TrackingLoop(coefs)
    return coefs, ref, loop

def eval_step(n, ref, loop):
    x = ref.update()
    y, error = loop.update(x)
    return SampleRow(n, x, y, error)

def sim_pll(config, coefs=None):
    """ Stream the simulation one SampleRow at a time. Config is assumed validated.
        args:
            config - PLLConfig
            coefs - loop filter already designed from config, designed here if None
    """
    _, ref, loop = make_components(config, coefs)
    for n in range(config.samples):
        yield eval_step(n, ref, loop)

#////////////////////////////////////////////////////////////////////////////////////////////
# Simulator sub-methods

def save_step(n, step_data, data):
    """ Saves simulation step result to dictionary with arrays
        containing full time evolution of simulation
    """
    for k,v in step_data.items():
        data[k][n] = v


@timer
def run_sim(config):
    """ Runs simulation, saves full time series
        returns:
            dict with Signals "x", "y", "error", "phase", "ref_phase",
            and "coefs", "params"
    """
    coefs, ref, loop = make_components(config)
    steps = config.samples
    data = {
        "x":         np.zeros(steps, dtype=complex),
        "y":         np.zeros(steps, dtype=complex),
        "error":     np.zeros(steps),
        "phase":     np.zeros(steps),
        "ref_phase": np.zeros(steps),
    }
    for n in range(steps):
        step = dict(ref_phase=ref.phase, phase=loop.phase)
        row = eval_step(n, ref, loop)
        step["x"] = row.x
        step["y"] = row.y
        step["error"] = row.error
        save_step(n, step, data)

    for k,v in data.items():
        data[k] = make_signal(td=v, name=k)
    data["coefs"] = coefs
    data["params"] = config.as_dict()
    return data

def record_rows(rows, into):
    """ Pass rows through unchanged, appending each one to the list into
    """
    for row in rows:
        into.append(row)
        yield row

def rows_to_signals(rows):
    """ Signals "x", "y", "error" from already computed SampleRows
    """
    return {
        "x":     make_signal(td=np.array([r.x for r in rows], dtype=complex), name="x"),
        "y":     make_signal(td=np.array([r.y for r in rows], dtype=complex), name="y"),
        "error": make_signal(td=np.array([r.error for r in rows], dtype=float), name="error"),
    }

#////////////////////////////////////////////////////////////////////////////////////////////
# Sweep engine

@timer
def sim_sweep(config, sweep_param, sweep_vals, sim_engine=run_sim):
    """ Do a parametric sweep of PLL
        args:
            config - nominal PLLConfig
            sweep_param - name of PLLConfig field to sweep
            sweep_vals - values that sweep_param should be simulated for
            sim_engine - pll simulation method taking a PLLConfig
        raises:
            ConfigError if any swept configuration is invalid (before simulating)
    """
    swept = [config.replace(**{sweep_param: val}).validate() for val in sweep_vals]
    data = []
    for _config in swept:
        logger.debug("* Sweep %s = %r", sweep_param, getattr(_config, sweep_param))
        data.append(sim_engine(_config))
    return data
