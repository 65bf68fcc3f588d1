"""A minimal model of the execution environment a contract runs in."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

from venear.amounts import ContractError

_ACCOUNT_ID_RE = re.compile(r"^(([a-z\d]+[-_])*[a-z\d]+\.)*([a-z\d]+[-_])*[a-z\d]+$")
MIN_ACCOUNT_ID_LEN = 2
MAX_ACCOUNT_ID_LEN = 64


def is_valid_account_id(account_id: str) -> bool:
    """Return whether ``account_id`` is a well-formed account name."""
    return (
        MIN_ACCOUNT_ID_LEN <= len(account_id) <= MAX_ACCOUNT_ID_LEN
        and _ACCOUNT_ID_RE.match(account_id) is not None
    )


@dataclass
class Environment:
    """The context of one call: who calls, what is attached, balance and logs."""

    current_account_id: str
    predecessor_account_id: str
    account_balance: int = 0
    attached_deposit: int = 0
    block_timestamp: int = 0
    signer_account_id: str = ""
    logs: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.signer_account_id:
            self.signer_account_id = self.predecessor_account_id

    def log(self, message: str) -> None:
        self.logs.append(message)

    def spend(self, amount: int) -> None:
        """Take ``amount`` yoctoNEAR out of the account balance."""
        if amount < 0:
            raise ContractError("Amount must not be negative")
        if amount > self.account_balance:
            raise ContractError("Not enough balance")
        self.account_balance -= amount

    def assert_one_yocto(self) -> None:
        if self.attached_deposit != 1:
            raise ContractError("Requires attached deposit of exactly 1 yoctoNEAR")


@dataclass(frozen=True)
class FunctionCallAction:
    method_name: str
    args: dict[str, Any]
    gas: int
    deposit: int


@dataclass(frozen=True)
class TransferAction:
    amount: int


@dataclass(frozen=True)
class DeleteAccountAction:
    beneficiary_id: str


Action = Union[FunctionCallAction, TransferAction, DeleteAccountAction]


@dataclass
class Promise:
    """Actions scheduled on a receiver, optionally followed by further promises."""

    receiver_id: str
    actions: list[Action] = field(default_factory=list)
    next: Optional[Promise] = None

    def function_call(
        self,
        method_name: str,
        args: Optional[dict[str, Any]] = None,
        gas: int = 0,
        deposit: int = 0,
    ) -> Promise:
        self.actions.append(FunctionCallAction(method_name, dict(args or {}), gas, deposit))
        return self

    def transfer(self, amount: int) -> Promise:
        self.actions.append(TransferAction(amount))
        return self

    def delete_account(self, beneficiary_id: str) -> Promise:
        self.actions.append(DeleteAccountAction(beneficiary_id))
        return self

    def then(self, other: Promise) -> Promise:
        """Schedule ``other`` to run after this chain; return the head of the chain."""
        last = self
        while last.next is not None:
            last = last.next
        last.next = other
        return self

    def __iter__(self) -> Iterator[Promise]:
        promise: Optional[Promise] = self
        while promise is not None:
            yield promise
            promise = promise.next