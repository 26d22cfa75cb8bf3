"""Simulation engine for airspace traffic.

Exports:
    AirspaceSimulator: Population manager and fixed-order tick loop
    TickReport: Event counts and populations for one tick
    RunSummary: Totals and population statistics over a run
"""

from .report import RunSummary, TickReport
from .simulator import AirspaceSimulator

__all__ = ["AirspaceSimulator", "TickReport", "RunSummary"]
