"""State, checks, getters and veNEAR locking of the lockup contract."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from venear import events, gas
from venear.amounts import ContractError
from venear.lockup_update import LockupUpdate
from venear.runtime import Environment, Promise


class TransactionStatus(enum.Enum):
    """Whether a call to the staking pool is in flight."""

    IDLE = "Idle"
    BUSY = "Busy"


@dataclass
class StakingInformation:
    """The selected staking pool and what is known to be deposited there."""

    staking_pool_account_id: str
    status: TransactionStatus = TransactionStatus.IDLE
    # Actual balance on the pool can be higher because of staking rewards.
    deposit_amount: int = 0


class LockupBase:
    """A lockup holding NEAR that its owner can lock for veNEAR."""

    def __init__(
        self,
        env: Environment,
        owner_account_id: str,
        venear_account_id: str,
        unlock_duration_ns: int,
        staking_pool_whitelist_account_id: str,
        version: int,
        lockup_update_nonce: int,
        min_lockup_deposit: int,
    ) -> None:
        if env.account_balance < min_lockup_deposit:
            raise ContractError("Not enough NEAR for storage")
        self.env = env
        self.owner_account_id = owner_account_id
        self.venear_account_id = venear_account_id
        self.staking_pool_whitelist_account_id = staking_pool_whitelist_account_id
        self.staking_information: Optional[StakingInformation] = None
        self.unlock_duration_ns = unlock_duration_ns
        self.venear_locked_balance = 0
        self.venear_unlock_timestamp = 0
        self.venear_pending_balance = 0
        self.lockup_update_nonce = lockup_update_nonce
        self.version = version
        self.min_lockup_deposit = min_lockup_deposit

    # Internal checks and helpers.

    def get_account_balance(self) -> int:
        """Balance of the account excluding the storage deposit."""
        return max(self.env.account_balance - self.min_lockup_deposit, 0)

    def set_staking_pool_status(self, status: TransactionStatus) -> None:
        if self.staking_information is None:
            raise ContractError("Staking pool should be selected")
        self.staking_information.status = status

    def assert_no_staking_or_idle(self) -> None:
        info = self.staking_information
        if info is not None and info.status is TransactionStatus.BUSY:
            raise ContractError("Contract is currently busy with another operation")

    def assert_staking_pool_is_idle(self) -> None:
        if self.staking_information is None:
            raise ContractError("Staking pool is not selected")
        if self.staking_information.status is TransactionStatus.BUSY:
            raise ContractError("Contract is currently busy with another operation")

    def assert_staking_pool_is_not_selected(self) -> None:
        if self.staking_information is not None:
            raise ContractError("Staking pool is already selected")

    def assert_owner(self) -> None:
        if self.env.predecessor_account_id != self.owner_account_id:
            raise ContractError("Can only be called by the owner")

    def _selected_pool(self) -> StakingInformation:
        if self.staking_information is None:
            raise ContractError("Staking pool is not selected")
        return self.staking_information

    # Getters.

    def get_owner_account_id(self) -> str:
        return self.owner_account_id

    def get_staking_pool_account_id(self) -> Optional[str]:
        info = self.staking_information
        return None if info is None else info.staking_pool_account_id

    def get_known_deposited_balance(self) -> int:
        """Amount known to be deposited on the staking pool."""
        info = self.staking_information
        return 0 if info is None else info.deposit_amount

    def get_owners_balance(self) -> int:
        return self.get_balance()

    def get_balance(self) -> int:
        """Total balance including tokens deposited to the staking pool."""
        return self.env.account_balance + self.get_known_deposited_balance()

    def get_liquid_owners_balance(self) -> int:
        """Amount the owner can transfer out of the account."""
        return self.get_account_balance()

    def get_version(self) -> int:
        return self.version

    # veNEAR locking.

    def venear_liquid_balance(self) -> int:
        """NEAR (on the account and on the pool) that is neither locked nor pending."""
        liquid = (
            self.env.account_balance
            + self.get_known_deposited_balance()
            - self.venear_locked_balance
            - self.venear_pending_balance
        )
        if liquid < 0:
            raise ContractError("Illegal balance")
        return liquid

    def venear_lockup_update(self) -> Promise:
        """Bump the nonce and notify the veNEAR contract of the locked balance."""
        self.lockup_update_nonce += 1
        update = LockupUpdate(
            locked_near_balance=self.get_venear_locked_balance(),
            timestamp=self.env.block_timestamp,
            lockup_update_nonce=self.lockup_update_nonce,
        )
        return Promise(self.venear_account_id).function_call(
            "on_lockup_update",
            {
                "version": self.version,
                "owner_account_id": self.owner_account_id,
                "update": update.to_json(),
            },
            gas.VENEAR_LOCKUP_UPDATE,
            0,
        )

    def get_venear_locked_balance(self) -> int:
        return self.venear_locked_balance

    def get_venear_unlock_timestamp(self) -> int:
        return self.venear_unlock_timestamp

    def get_lockup_update_nonce(self) -> int:
        return self.lockup_update_nonce

    def get_venear_pending_balance(self) -> int:
        return self.venear_pending_balance

    def get_venear_liquid_balance(self) -> int:
        return self.venear_liquid_balance()

    def _owner_call(self) -> None:
        self.assert_owner()
        self.env.assert_one_yocto()

    def lock_near(self, amount: Optional[int] = None) -> Promise:
        """Lock ``amount`` of NEAR, or all liquid NEAR if not given."""
        self._owner_call()
        liquid = self.venear_liquid_balance()
        if amount is None:
            amount = liquid
        if amount > liquid:
            raise ContractError("Invalid amount")
        self.venear_locked_balance += amount
        events.lockup_action(
            self.env.log,
            "lockup_lock_near",
            self.env.current_account_id,
            self.version,
            self.lockup_update_nonce,
            self.env.block_timestamp,
            amount,
        )
        return self.venear_lockup_update()

    def begin_unlock_near(self, amount: Optional[int] = None) -> Promise:
        """Move ``amount`` (or everything) from locked to pending and restart the unlock timer."""
        self._owner_call()
        if amount is None:
            amount = self.venear_locked_balance
        if amount > self.venear_locked_balance:
            raise ContractError("Invalid amount")
        self.venear_locked_balance -= amount
        self.venear_pending_balance += amount
        self.venear_unlock_timestamp = self.env.block_timestamp + self.unlock_duration_ns
        return self.venear_lockup_update()

    def end_unlock_near(self, amount: Optional[int] = None) -> Promise:
        """Release ``amount`` (or everything) of pending NEAR once the unlock time is reached."""
        self._owner_call()
        if amount is None:
            amount = self.venear_pending_balance
        if amount > self.venear_pending_balance:
            raise ContractError("Invalid amount")
        if self.env.block_timestamp < self.venear_unlock_timestamp:
            raise ContractError("Invalid unlock time")
        self.venear_pending_balance -= amount
        return self.venear_lockup_update()

    def lock_pending_near(self, amount: Optional[int] = None) -> Promise:
        """Move ``amount`` (or everything) from pending back to locked."""
        self._owner_call()
        if amount is None:
            amount = self.venear_pending_balance
        if amount > self.venear_pending_balance:
            raise ContractError("Invalid amount")
        self.venear_pending_balance -= amount
        self.venear_locked_balance += amount
        return self.venear_lockup_update()

    def ft_on_transfer(self, sender_id: str, amount: int, msg: str) -> int:
        """Accept tokens only from the selected staking pool; nothing is returned to the sender."""
        if self.env.predecessor_account_id != self.get_staking_pool_account_id():
            raise ContractError("Only currently selected LST is accepted")
        return 0