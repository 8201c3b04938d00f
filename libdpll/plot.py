""" Plotting methods for PLL simulation results
"""

import logging
import numpy as np
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)

###############################################################################
# Plot style
###############################################################################

BOX_LINEWIDTH = 2
GRID_LINEWIDTH = 1
TICK_WIDTH = 2
GRAPH_LINEWIDTH = 2

def razavify(ax=None, legend=True, legend_cols=2, loc="upper right"):
    """ Bold frame, inward ticks, dotted grid
    """
    ax = ax if ax is not None else plt.gca()
    ax.xaxis.set_ticks_position("both")
    ax.yaxis.set_ticks_position("both")
    ax.tick_params(axis="both", which="both", direction="in", width=TICK_WIDTH)
    for axis in ['top','bottom','left','right']:
        ax.spines[axis].set_linewidth(BOX_LINEWIDTH)
    ax.grid(linewidth=GRID_LINEWIDTH, color="dimgray", linestyle=":")
    ax.set_title(ax.get_title(), fontweight="bold")
    if legend and ax.get_legend_handles_labels()[0]:
        ax.legend(loc=loc, ncol=legend_cols, shadow=False, fancybox=False, frameon=True)
    for ln in ax.lines:
        ln.set_linewidth(GRAPH_LINEWIDTH)

###############################################################################
# Time domain
###############################################################################

def plot_td(signal, ax=None, nmin=None, nmax=None, label="", title="", dots=False, alpha=1.0,
            *args, **kwargs):
    """ Plots time domain data for signal, complex data is plotted as real part
    """
    logger.debug("* Plotting signal %s in time domain", signal.name)
    ax = ax if ax is not None else plt.gca()
    index = np.arange(signal.samples)
    nmin = nmin if nmin else 0
    nmax = nmax if nmax else signal.samples
    td = np.real(signal.td[nmin:nmax])
    ax.plot(index[nmin:nmax], td, label=label if label else signal.name, alpha=alpha)
    if dots:
        ax.scatter(index[nmin:nmax], td, alpha=alpha)
    ax.set_xlabel("Sample index")
    ax.set_ylabel("Signal")
    if nmax > nmin + 1:
        ax.set_xlim((nmin, nmax-1))
    ax.set_title("Time domain "+title)
    return ax

def plot_pll_sim(data, nmin=None, nmax=None):
    """ Reference vs. tracked output and phase error of a run_sim() result
        returns:
            matplotlib Figure
    """
    fig, (ax1, ax2) = plt.subplots(2, 1, sharex=True)
    plot_td(data["x"], ax=ax1, nmin=nmin, nmax=nmax, label="real(x)", title="carrier")
    plot_td(data["y"], ax=ax1, nmin=nmin, nmax=nmax, label="real(y)", title="carrier")
    razavify(ax1)
    plot_td(data["error"], ax=ax2, nmin=nmin, nmax=nmax, label="error", title="phase error")
    ax2.set_ylabel("Phase error [rad]")
    razavify(ax2, legend=False)
    fig.tight_layout()
    return fig
