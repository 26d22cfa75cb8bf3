"""Per-tick reports and run summaries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass
class TickReport:
    """What happened during one tick, and the populations it left behind."""

    tick: int
    drifters_spawned: int = 0
    drifters_retired: int = 0
    drifters_stalled: int = 0
    flights_dispatched: int = 0
    flights_arrived: int = 0
    drifters: int = 0
    flights: int = 0
    storms: int = 0


@dataclass
class RunSummary:
    """Aggregate over a sequence of tick reports.

    Attributes:
        ticks: Number of ticks executed.
        totals: Summed event counters over the run.
        population: For ``drifters`` and ``flights``, the mean, standard
            deviation and maximum of the end-of-tick population.
    """

    ticks: int
    totals: dict[str, int]
    population: dict[str, dict[str, float]]

    @classmethod
    def from_reports(cls, reports: Sequence[TickReport]) -> "RunSummary":
        events = (
            "drifters_spawned",
            "drifters_retired",
            "drifters_stalled",
            "flights_dispatched",
            "flights_arrived",
        )
        totals = {name: sum(getattr(r, name) for r in reports) for name in events}
        population = {}
        for name in ("drifters", "flights"):
            values = np.array([getattr(r, name) for r in reports], dtype=float)
            if values.size == 0:
                population[name] = {"mean": 0.0, "std": 0.0, "max": 0.0}
                continue
            population[name] = {
                "mean": float(np.mean(values)),
                "std": float(np.std(values)),
                "max": float(np.max(values)),
            }
        return cls(ticks=len(reports), totals=totals, population=population)

    def get_summary(self) -> dict[str, Any]:
        """Flat dictionary view, suitable for printing or export."""
        summary: dict[str, Any] = {"ticks": self.ticks, **self.totals}
        for name, stats in self.population.items():
            for stat, value in stats.items():
                summary[f"{name}_{stat}"] = value
        return summary
