"""Balance updates sent from a lockup to the veNEAR contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LockupUpdate:
    """NEAR locked in a lockup at a point in time, tagged with the lockup's nonce."""

    locked_near_balance: int
    timestamp: int
    lockup_update_nonce: int

    def to_json(self) -> dict[str, Any]:
        return {
            "V1": {
                "locked_near_balance": str(self.locked_near_balance),
                "timestamp": str(self.timestamp),
                "lockup_update_nonce": str(self.lockup_update_nonce),
            }
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> LockupUpdate:
        if not isinstance(data, dict) or set(data) != {"V1"}:
            raise ValueError(f"unknown lockup update version: {data!r}")
        body = data["V1"]
        return cls(
            locked_near_balance=int(body["locked_near_balance"]),
            timestamp=int(body["timestamp"]),
            lockup_update_nonce=int(body["lockup_update_nonce"]),
        )