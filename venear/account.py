"""Account details as stored in the Merkle tree."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from venear.amounts import ContractError, near_add, truncate_to_seconds
from venear.balances import PooledVenearBalance, VenearBalance
from venear.growth import VenearGrowthConfigFixedRate


@dataclass
class AccountDelegation:
    """The account the whole veNEAR balance was delegated to."""

    account_id: str


@dataclass
class Account:
    """An account's balances, delegations and last update time (ns)."""

    account_id: str
    update_timestamp: int = 0
    balance: VenearBalance = field(default_factory=VenearBalance)
    delegated_balance: PooledVenearBalance = field(default_factory=PooledVenearBalance)
    delegation: Optional[AccountDelegation] = None

    def _checked_timestamp(self, current_timestamp: int) -> int:
        current_timestamp = truncate_to_seconds(current_timestamp)
        if current_timestamp < self.update_timestamp:
            raise ContractError("Timestamp must be increasing")
        return current_timestamp

    def total_balance(
        self, current_timestamp: int, venear_growth_config: VenearGrowthConfigFixedRate
    ) -> int:
        """Return the veNEAR balance at ``current_timestamp`` without modifying the account."""
        current_timestamp = self._checked_timestamp(current_timestamp)
        delegated = copy.deepcopy(self.delegated_balance)
        delegated.update(self.update_timestamp, current_timestamp, venear_growth_config)
        total = delegated.total()
        if self.delegation is not None:
            return total
        own = copy.deepcopy(self.balance)
        own.update(self.update_timestamp, current_timestamp, venear_growth_config)
        return near_add(total, own.total())

    def update(
        self, current_timestamp: int, venear_growth_config: VenearGrowthConfigFixedRate
    ) -> None:
        """Accrue growth up to ``current_timestamp`` and move the update time forward."""
        current_timestamp = self._checked_timestamp(current_timestamp)
        self.balance.update(self.update_timestamp, current_timestamp, venear_growth_config)
        self.delegated_balance.update(
            self.update_timestamp, current_timestamp, venear_growth_config
        )
        self.update_timestamp = current_timestamp

    def to_json(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "update_timestamp": str(self.update_timestamp),
            "balance": self.balance.to_json(),
            "delegated_balance": self.delegated_balance.to_json(),
            "delegation": (
                None if self.delegation is None else {"account_id": self.delegation.account_id}
            ),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Account:
        """Build an account from its JSON form, plain or wrapped as ``{"V0": ...}``."""
        if set(data) == {"V0"}:
            data = data["V0"]
        delegation = data.get("delegation")
        return cls(
            account_id=data["account_id"],
            update_timestamp=int(data["update_timestamp"]),
            balance=VenearBalance.from_json(data["balance"]),
            delegated_balance=PooledVenearBalance.from_json(data["delegated_balance"]),
            delegation=None if delegation is None else AccountDelegation(delegation["account_id"]),
        )