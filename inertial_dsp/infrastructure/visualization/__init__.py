"""
Visualização dos sinais processados.
"""

from .plotter import ChannelTrace, plot_channels

__all__ = ["ChannelTrace", "plot_channels"]
