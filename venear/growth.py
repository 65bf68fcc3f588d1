"""Growth of veNEAR over time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from venear.amounts import ContractError, truncate_near_to_millis, truncate_to_seconds
from venear.balances import Fraction


@dataclass(frozen=True)
class VenearGrowthConfigFixedRate:
    """Fixed growth rate of veNEAR per nanosecond.

    The denominator of the rate should be 10**30 to keep results exact.
    """

    annual_growth_rate_ns: Fraction

    def calculate(self, previous_timestamp: int, current_timestamp: int, balance: int) -> int:
        """Return the veNEAR grown on ``balance`` between two timestamps."""
        if current_timestamp < previous_timestamp:
            raise ContractError("Timestamp must be increasing")
        if current_timestamp != truncate_to_seconds(current_timestamp):
            raise ContractError("Current timestamp must be truncated to seconds")
        if previous_timestamp != truncate_to_seconds(previous_timestamp):
            raise ContractError("Previous timestamp must be truncated to seconds")
        if previous_timestamp == current_timestamp:
            return 0
        growth_period_ns = current_timestamp - previous_timestamp
        return self.annual_growth_rate_ns.u384_mul(
            growth_period_ns, truncate_near_to_millis(balance)
        )

    def to_json(self) -> dict[str, Any]:
        return {"FixedRate": {"annual_growth_rate_ns": self.annual_growth_rate_ns.to_json()}}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> VenearGrowthConfigFixedRate:
        if not isinstance(data, dict) or set(data) != {"FixedRate"}:
            raise ValueError(f"unknown veNEAR growth config: {data!r}")
        return cls(Fraction.from_json(data["FixedRate"]["annual_growth_rate_ns"]))