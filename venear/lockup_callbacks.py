"""Callbacks the lockup receives after calls to the whitelist and the staking pool."""

from __future__ import annotations

from typing import Union

from venear import gas
from venear.amounts import ContractError
from venear.lockup_base import LockupBase, StakingInformation, TransactionStatus
from venear.runtime import Promise


class StakingCallbacks(LockupBase):
    """Lockup state updates that follow the results of staking pool calls.

    Each callback receives whether the preceding call succeeded, or the value
    that call returned.
    """

    def _finish(self) -> StakingInformation:
        self.set_staking_pool_status(TransactionStatus.IDLE)
        return self._selected_pool()

    def on_whitelist_is_whitelisted(
        self, is_whitelisted: bool, staking_pool_account_id: str
    ) -> bool:
        """Select the staking pool once the whitelist has confirmed it."""
        if not is_whitelisted:
            raise ContractError("The given staking pool account ID is not whitelisted")
        self.assert_staking_pool_is_not_selected()
        self.staking_information = StakingInformation(
            staking_pool_account_id=staking_pool_account_id,
            status=TransactionStatus.IDLE,
            deposit_amount=0,
        )
        return True

    def on_staking_pool_deposit(self, amount: int, succeeded: bool) -> bool:
        """Record a deposit to the staking pool if it went through."""
        info = self._finish()
        if succeeded:
            info.deposit_amount += amount
            self.env.log(
                f"The deposit of {amount} to @{info.staking_pool_account_id} succeeded"
            )
        else:
            self.env.log(
                f"The deposit of {amount} to @{info.staking_pool_account_id} has failed"
            )
        return succeeded

    def on_staking_pool_deposit_and_stake(self, amount: int, succeeded: bool) -> bool:
        """Record a deposit-and-stake to the staking pool if it went through."""
        info = self._finish()
        if succeeded:
            info.deposit_amount += amount
            self.env.log(
                f"The deposit and stake of {amount} to @{info.staking_pool_account_id} succeeded"
            )
        else:
            self.env.log(
                f"The deposit and stake of {amount} to @{info.staking_pool_account_id} has failed"
            )
        return succeeded

    def on_staking_pool_withdraw(self, amount: int, succeeded: bool) -> bool:
        """Record a withdrawal; the known deposit never drops below zero."""
        info = self._finish()
        if succeeded:
            # Staking rewards can make withdrawals exceed what was deposited.
            info.deposit_amount = max(info.deposit_amount - amount, 0)
            self.env.log(
                f"The withdrawal of {amount} from @{info.staking_pool_account_id} succeeded"
            )
        else:
            self.env.log(
                f"The withdrawal of {amount} from @{info.staking_pool_account_id} failed"
            )
        return succeeded

    def on_staking_pool_stake(self, amount: int, succeeded: bool) -> bool:
        info = self._finish()
        if succeeded:
            self.env.log(f"Staking of {amount} at @{info.staking_pool_account_id} succeeded")
        else:
            self.env.log(f"Staking {amount} at @{info.staking_pool_account_id} has failed")
        return succeeded

    def on_staking_pool_unstake(self, amount: int, succeeded: bool) -> bool:
        info = self._finish()
        if succeeded:
            self.env.log(f"Unstaking of {amount} at @{info.staking_pool_account_id} succeeded")
        else:
            self.env.log(f"Unstaking {amount} at @{info.staking_pool_account_id} has failed")
        return succeeded

    def on_staking_pool_unstake_all(self, succeeded: bool) -> bool:
        info = self._finish()
        if succeeded:
            self.env.log(f"Unstaking all at @{info.staking_pool_account_id} succeeded")
        else:
            self.env.log(f"Unstaking all at @{info.staking_pool_account_id} has failed")
        return succeeded

    def on_get_account_total_balance(self, total_balance: int) -> None:
        """Replace the known deposit with the total balance reported by the pool."""
        info = self._finish()
        self.env.log(f"The current total balance on the staking pool is {total_balance}")
        info.deposit_amount = total_balance

    def on_get_account_unstaked_balance_to_withdraw_by_owner(
        self, unstaked_balance: int
    ) -> Union[Promise, bool]:
        """Withdraw the whole unstaked balance, or go idle if there is none."""
        if unstaked_balance > 0:
            pool_id = self._selected_pool().staking_pool_account_id
            self.env.log(f"Withdrawing {unstaked_balance} from the staking pool @{pool_id}")
            args = {"amount": str(unstaked_balance)}
            return (
                Promise(pool_id)
                .function_call("withdraw", args, gas.WITHDRAW, 0)
                .then(
                    Promise(self.env.current_account_id).function_call(
                        "on_staking_pool_withdraw", args, gas.ON_STAKING_POOL_WITHDRAW, 0
                    )
                )
            )
        self.env.log("No unstaked balance on the staking pool to withdraw")
        self.set_staking_pool_status(TransactionStatus.IDLE)
        return True