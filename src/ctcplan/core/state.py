"""Mutable state for one CTC point's time-to-target simulation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SimulationState:
    """Net worth and elapsed months, mutated once per simulated month.

    Attributes:
        net_worth: Current investments less lumpsum expenses, then grown
            and topped up each month.
        months_elapsed: Number of months simulated so far.
    """

    net_worth: float
    months_elapsed: int = 0

    def advance(self, monthly_rate: float, sip_amount: float, net_savings: float) -> float:
        """Simulate one month and return the net worth before it.

        Growth is applied first (only when ``monthly_rate > 0``), then the
        SIP contribution, then the month's net savings.
        """
        previous = self.net_worth
        if monthly_rate > 0:
            self.net_worth *= 1.0 + monthly_rate
        self.net_worth += sip_amount
        self.net_worth += net_savings
        self.months_elapsed += 1
        return previous
