#!/usr/bin/env python3
""" PHASE DOMAIN discrete time carrier tracking PLL simulation

    Tracks a synthetic complex carrier with phase/frequency offset using a
    second order PI loop filter and NCO, streaming one line per sample:

        index, real(x), imag(x), real(y), imag(y), error

Usage:
    python dpllsim.py --frequencyOffset 0.05 --samples 1000
    python dpllsim.py --loglevel debug            # also print loop filter coefficients
    python dpllsim.py --plot pll.png              # save time domain plot of the run
"""

import argparse
import logging
import sys
import matplotlib.pyplot as plt
from libdpll.config import PLLConfig, ConfigError
from libdpll.config import PHASE_OFFSET, FREQUENCY_OFFSET, WN, ZETA, K, N
from libdpll.filter import design_pi_lf
from libdpll.engine import sim_pll, record_rows, rows_to_signals
from libdpll.report import format_coefs, write_rows
from libdpll.analysis import meas_lock_time, meas_rms_error
from libdpll.plot import plot_pll_sim

logger = logging.getLogger("dpllsim")

LOCK_TOL = 0.01     # rad, |error| bound used to report lock time


def setup_logging(level):
    """ Diagnostics of this script are "#" comment lines on stdout, next to the
        data rows. Library records go to stderr, third party loggers stay at WARNING.
    """
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr,
                        format="%(levelname)s:%(name)s: %(message)s", force=True)
    logging.getLogger("libdpll").setLevel(level)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def make_parser():
    parser = argparse.ArgumentParser(
        description="Discrete time second order PLL simulation"
    )
    parser.add_argument(
        "--loglevel",
        default="info",
        help="Log level name, 'debug' prints loop filter coefficients (default: info)"
    )
    parser.add_argument(
        "--phaseOffset",
        dest="phase_offset",
        type=float,
        default=PHASE_OFFSET,
        help="Reference carrier phase offset in rad (default: %(default)s)"
    )
    parser.add_argument(
        "--frequencyOffset",
        dest="frequency_offset",
        type=float,
        default=FREQUENCY_OFFSET,
        help="Reference carrier frequency offset in rad/sample (default: %(default)s)"
    )
    parser.add_argument(
        "--pll.bandwidth",
        dest="bandwidth",
        type=float,
        default=WN,
        help="PLL bandwidth Wn (default: %(default)s)"
    )
    parser.add_argument(
        "--pll.damping",
        dest="damping",
        type=float,
        default=ZETA,
        help="PLL damping factor zeta (default: %(default)s)"
    )
    parser.add_argument(
        "--pll.loopGain",
        dest="loop_gain",
        type=float,
        default=K,
        help="PLL loop gain K (default: %(default)s)"
    )
    parser.add_argument(
        "--samples",
        dest="samples",
        type=int,
        default=N,
        help="Number of samples (default: %(default)s)"
    )
    parser.add_argument(
        "--wrap",
        dest="wrap_phase",
        action="store_true",
        help="Wrap the reference phase accumulator modulo 2*pi"
    )
    parser.add_argument(
        "--plot",
        metavar="FILE",
        default=None,
        help="Save time domain plot of the run to FILE"
    )
    return parser


def config_from_args(args):
    return PLLConfig(
        phase_offset=args.phase_offset,
        frequency_offset=args.frequency_offset,
        bandwidth=args.bandwidth,
        damping=args.damping,
        loop_gain=args.loop_gain,
        samples=args.samples,
        wrap_phase=args.wrap_phase,
    ).validate()


def main(argv=None):
    """Main entry point."""
    parser = make_parser()
    args = parser.parse_args(argv)

    level = logging.getLevelName(args.loglevel.upper())
    if not isinstance(level, int):
        parser.error("unknown log level %r" % args.loglevel)
    setup_logging(level)

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    coefs = design_pi_lf(config.lf_params)
    for line in format_coefs(coefs):
        logger.debug(line)

    rows = []
    stream = sim_pll(config, coefs)
    if args.plot:
        stream = record_rows(stream, rows)
    write_rows(stream, sys.stdout)

    if args.plot:
        data = rows_to_signals(rows)
        logger.debug("# lock time (|error| <= %g): %s samples", LOCK_TOL,
                     meas_lock_time(data["error"], LOCK_TOL))
        logger.debug("# rms error: %.8f rad", meas_rms_error(data["error"]))
        fig = plot_pll_sim(data)
        fig.savefig(args.plot)
        plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())
