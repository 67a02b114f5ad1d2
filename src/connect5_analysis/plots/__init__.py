
from .chart import (
    plot_histograms,
    plot_outcome_bar,
    plot_rule_usage,
)

__all__ = [
    "plot_histograms",
    "plot_outcome_bar",
    "plot_rule_usage",
]
