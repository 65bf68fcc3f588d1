"""Owner's methods of the lockup contract: staking, transfers and deletion."""

from __future__ import annotations

from typing import Any, Optional

from venear import events, gas
from venear.amounts import ContractError
from venear.lockup_callbacks import StakingCallbacks
from venear.lockup_base import TransactionStatus
from venear.runtime import Promise, is_valid_account_id


class LockupContract(StakingCallbacks):
    """A lockup whose owner can stake through a whitelisted pool and move NEAR out.

    Every owner's method requires exactly one yoctoNEAR attached.
    """

    def _owner_only(self) -> None:
        self.assert_owner()
        self.env.assert_one_yocto()

    @staticmethod
    def _require_positive(amount: int) -> None:
        if amount <= 0:
            raise ContractError("Amount should be positive")

    def _require_depositable(self, amount: int) -> None:
        if self.get_account_balance() < amount:
            raise ContractError(
                "The balance that can be deposited to the staking pool is lower than "
                "the extra amount"
            )

    def _pool_call(
        self,
        method_name: str,
        args: dict[str, Any],
        call_gas: int,
        callback_name: str,
        callback_args: dict[str, Any],
        callback_gas: int,
        deposit: int = 0,
    ) -> Promise:
        """Mark the pool busy and call it, followed by a callback on this account."""
        pool_id = self._selected_pool().staking_pool_account_id
        self.set_staking_pool_status(TransactionStatus.BUSY)
        if deposit:
            self.env.spend(deposit)
        return (
            Promise(pool_id)
            .function_call(method_name, args, call_gas, deposit)
            .then(
                Promise(self.env.current_account_id).function_call(
                    callback_name, callback_args, callback_gas, 0
                )
            )
        )

    def select_staking_pool(self, staking_pool_account_id: str) -> Promise:
        """Ask the whitelist about the pool; it is selected in the callback."""
        self._owner_only()
        if not is_valid_account_id(staking_pool_account_id):
            raise ContractError("The staking pool account ID is invalid")
        self.assert_staking_pool_is_not_selected()
        self.env.log(
            f"Selecting staking pool @{staking_pool_account_id}. "
            "Going to check whitelist first."
        )
        args = {"staking_pool_account_id": staking_pool_account_id}
        return (
            Promise(self.staking_pool_whitelist_account_id)
            .function_call("is_whitelisted", args, gas.IS_WHITELISTED, 0)
            .then(
                Promise(self.env.current_account_id).function_call(
                    "on_whitelist_is_whitelisted", args, gas.ON_WHITELIST_IS_WHITELISTED, 0
                )
            )
        )

    def unselect_staking_pool(self) -> None:
        """Forget the selected pool; no known deposit may remain on it."""
        self._owner_only()
        self.assert_staking_pool_is_idle()
        info = self._selected_pool()
        # Best effort: rewards may still sit on the pool, which is the owner's call.
        if info.deposit_amount != 0:
            raise ContractError("There is still a deposit on the staking pool")
        self.env.log(f"Unselected current staking pool @{info.staking_pool_account_id}.")
        self.staking_information = None

    def deposit_to_staking_pool(self, amount: int) -> Promise:
        self._owner_only()
        self._require_positive(amount)
        self.assert_staking_pool_is_idle()
        self._require_depositable(amount)
        pool_id = self._selected_pool().staking_pool_account_id
        self.env.log(f"Depositing {amount} to the staking pool @{pool_id}")
        return self._pool_call(
            "deposit",
            {},
            gas.DEPOSIT,
            "on_staking_pool_deposit",
            {"amount": str(amount)},
            gas.ON_STAKING_POOL_DEPOSIT,
            deposit=amount,
        )

    def deposit_and_stake(self, amount: int) -> Promise:
        self._owner_only()
        self._require_positive(amount)
        self.assert_staking_pool_is_idle()
        self._require_depositable(amount)
        pool_id = self._selected_pool().staking_pool_account_id
        self.env.log(f"Depositing and staking {amount} to the staking pool @{pool_id}")
        return self._pool_call(
            "deposit_and_stake",
            {},
            gas.DEPOSIT_AND_STAKE,
            "on_staking_pool_deposit_and_stake",
            {"amount": str(amount)},
            gas.ON_STAKING_POOL_DEPOSIT_AND_STAKE,
            deposit=amount,
        )

    def refresh_staking_pool_balance(self) -> Promise:
        """Query the pool's total balance for this account and remember it."""
        self._owner_only()
        self.assert_staking_pool_is_idle()
        pool_id = self._selected_pool().staking_pool_account_id
        self.env.log(f"Fetching total balance from the staking pool @{pool_id}")
        return self._pool_call(
            "get_account_total_balance",
            {"account_id": self.env.current_account_id},
            gas.GET_ACCOUNT_TOTAL_BALANCE,
            "on_get_account_total_balance",
            {},
            gas.ON_GET_ACCOUNT_TOTAL_BALANCE,
        )

    def withdraw_from_staking_pool(self, amount: int) -> Promise:
        self._owner_only()
        self._require_positive(amount)
        self.assert_staking_pool_is_idle()
        pool_id = self._selected_pool().staking_pool_account_id
        self.env.log(f"Withdrawing {amount} from the staking pool @{pool_id}")
        args = {"amount": str(amount)}
        return self._pool_call(
            "withdraw",
            args,
            gas.WITHDRAW,
            "on_staking_pool_withdraw",
            args,
            gas.ON_STAKING_POOL_WITHDRAW,
        )

    def withdraw_all_from_staking_pool(self) -> Promise:
        """Query the unstaked balance; the callback withdraws all of it."""
        self._owner_only()
        self.assert_staking_pool_is_idle()
        pool_id = self._selected_pool().staking_pool_account_id
        self.env.log(f"Going to query the unstaked balance at the staking pool @{pool_id}")
        return self._pool_call(
            "get_account_unstaked_balance",
            {"account_id": self.env.current_account_id},
            gas.GET_ACCOUNT_UNSTAKED_BALANCE,
            "on_get_account_unstaked_balance_to_withdraw_by_owner",
            {},
            gas.ON_GET_ACCOUNT_UNSTAKED_BALANCE_TO_WITHDRAW_BY_OWNER,
        )

    def stake(self, amount: int) -> Promise:
        self._owner_only()
        self._require_positive(amount)
        self.assert_staking_pool_is_idle()
        pool_id = self._selected_pool().staking_pool_account_id
        self.env.log(f"Staking {amount} at the staking pool @{pool_id}")
        args = {"amount": str(amount)}
        return self._pool_call(
            "stake", args, gas.STAKE, "on_staking_pool_stake", args, gas.ON_STAKING_POOL_STAKE
        )

    def unstake(self, amount: int) -> Promise:
        self._owner_only()
        self._require_positive(amount)
        self.assert_staking_pool_is_idle()
        pool_id = self._selected_pool().staking_pool_account_id
        self.env.log(f"Unstaking {amount} from the staking pool @{pool_id}")
        args = {"amount": str(amount)}
        return self._pool_call(
            "unstake",
            args,
            gas.UNSTAKE,
            "on_staking_pool_unstake",
            args,
            gas.ON_STAKING_POOL_UNSTAKE,
        )

    def unstake_all(self) -> Promise:
        self._owner_only()
        self.assert_staking_pool_is_idle()
        pool_id = self._selected_pool().staking_pool_account_id
        self.env.log(f"Unstaking all tokens from the staking pool @{pool_id}")
        return self._pool_call(
            "unstake_all",
            {},
            gas.UNSTAKE_ALL,
            "on_staking_pool_unstake_all",
            {},
            gas.ON_STAKING_POOL_UNSTAKE_ALL,
        )

    def transfer(self, amount: int, receiver_id: str) -> Promise:
        """Send liquid, unlocked NEAR to ``receiver_id``."""
        self._owner_only()
        self._require_positive(amount)
        if not is_valid_account_id(receiver_id):
            raise ContractError("The receiver account ID is invalid")
        self.assert_no_staking_or_idle()
        liquid = self.get_liquid_owners_balance()
        if liquid < amount:
            raise ContractError(
                f"The available liquid balance {liquid} is smaller than the requested "
                f"transfer amount {amount}"
            )
        unlocked = self.venear_liquid_balance()
        if unlocked < amount:
            raise ContractError(
                f"The available liquid balance {unlocked} is smaller than the requested "
                f"transfer amount {amount}"
            )
        self.env.log(f"Transferring {amount} to account @{receiver_id}")
        self.env.spend(amount)
        return Promise(receiver_id).transfer(amount)

    def delete_lockup(self) -> Promise:
        """Delete this account, sending everything to the owner.

        Nothing may be deposited on a pool, locked or pending.
        """
        self._owner_only()
        self.assert_no_staking_or_idle()
        if self.get_known_deposited_balance() != 0:
            raise ContractError("Can't delete account with non-zero staked NEAR balance")
        if self.venear_locked_balance != 0:
            raise ContractError("Can't delete account with non-zero locked venear balance")
        if self.venear_pending_balance != 0:
            raise ContractError("Can't delete account with non-zero pending venear balance")
        nonce: Optional[int] = self.lockup_update_nonce
        events.lockup_action(
            self.env.log,
            "lockup_delete",
            self.env.predecessor_account_id,
            self.version,
            nonce,
            None,
            None,
        )
        return Promise(self.env.current_account_id).delete_account(self.owner_account_id)