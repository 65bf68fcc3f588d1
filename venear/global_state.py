"""Global state of the veNEAR contract and its Merkle tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from venear.amounts import truncate_to_seconds
from venear.balances import PooledVenearBalance
from venear.growth import VenearGrowthConfigFixedRate


@dataclass
class GlobalState:
    """Total pooled veNEAR balance and the growth config it accrues under."""

    update_timestamp: int
    venear_growth_config: VenearGrowthConfigFixedRate
    total_venear_balance: PooledVenearBalance = field(default_factory=PooledVenearBalance)

    @classmethod
    def create(
        cls, timestamp: int, venear_growth_config: VenearGrowthConfigFixedRate
    ) -> GlobalState:
        return cls(
            update_timestamp=truncate_to_seconds(timestamp),
            venear_growth_config=venear_growth_config,
        )

    def update(self, current_timestamp: int) -> None:
        """Accrue growth on the total balance up to ``current_timestamp``."""
        current_timestamp = truncate_to_seconds(current_timestamp)
        self.total_venear_balance.update(
            self.update_timestamp, current_timestamp, self.venear_growth_config
        )
        self.update_timestamp = current_timestamp

    def to_json(self) -> dict[str, Any]:
        return {
            "update_timestamp": str(self.update_timestamp),
            "total_venear_balance": self.total_venear_balance.to_json(),
            "venear_growth_config": self.venear_growth_config.to_json(),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GlobalState:
        """Build the state from its JSON form, plain or wrapped as ``{"V0": ...}``."""
        if set(data) == {"V0"}:
            data = data["V0"]
        return cls(
            update_timestamp=int(data["update_timestamp"]),
            venear_growth_config=VenearGrowthConfigFixedRate.from_json(
                data["venear_growth_config"]
            ),
            total_venear_balance=PooledVenearBalance.from_json(data["total_venear_balance"]),
        )