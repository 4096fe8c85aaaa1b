"""Rental price estimation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RentalPriceCalculator:
    """Prices a lease by whole calendar days, counting a started day as a full one."""

    start_of_lease: datetime
    end_of_lease: datetime
    base_price_per_day: float

    def calculate(self) -> float:
        """Return the rental price for the lease period."""
        days = (self.end_of_lease.date() - self.start_of_lease.date()).days
        if self.start_of_lease.time() < self.end_of_lease.time():
            days += 1
        return days * self.base_price_per_day