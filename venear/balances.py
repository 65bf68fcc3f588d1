"""NEAR/veNEAR balances and exact fractions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Protocol

from venear.amounts import (
    U128_MAX,
    ContractError,
    near_add,
    near_sub,
    truncate_near_to_millis,
)


class GrowthConfig(Protocol):
    def calculate(self, previous_timestamp: int, current_timestamp: int, balance: int) -> int:
        ...


@dataclass
class VenearBalance:
    """NEAR balance (which earns growth) plus accumulated extra veNEAR."""

    near_balance: int = 0
    extra_venear_balance: int = 0

    def total(self) -> int:
        return near_add(self.near_balance, self.extra_venear_balance)

    def update(
        self,
        previous_timestamp: int,
        current_timestamp: int,
        venear_growth_config: GrowthConfig,
    ) -> None:
        """Add the veNEAR grown between the two timestamps."""
        growth = venear_growth_config.calculate(
            previous_timestamp, current_timestamp, self.near_balance
        )
        self.extra_venear_balance = near_add(self.extra_venear_balance, growth)

    @classmethod
    def from_near(cls, near_balance: int) -> VenearBalance:
        return cls(near_balance=near_balance, extra_venear_balance=0)

    def __add__(self, other: VenearBalance) -> VenearBalance:
        return VenearBalance(
            near_add(self.near_balance, other.near_balance),
            near_add(self.extra_venear_balance, other.extra_venear_balance),
        )

    def __sub__(self, other: VenearBalance) -> VenearBalance:
        return VenearBalance(
            near_sub(self.near_balance, other.near_balance),
            near_sub(self.extra_venear_balance, other.extra_venear_balance),
        )

    def to_json(self) -> dict[str, str]:
        return {
            "near_balance": str(self.near_balance),
            "extra_venear_balance": str(self.extra_venear_balance),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> VenearBalance:
        return cls(
            near_balance=int(data["near_balance"]),
            extra_venear_balance=int(data["extra_venear_balance"]),
        )


@dataclass
class PooledVenearBalance:
    """Pooled balances whose NEAR part is kept in whole milliNEAR.

    The sub-milliNEAR remainder of every added balance is moved into the
    extra veNEAR part so the total stays exact.
    """

    balance: VenearBalance = field(default_factory=VenearBalance)

    def total(self) -> int:
        return self.balance.total()

    def update(
        self,
        previous_timestamp: int,
        current_timestamp: int,
        venear_growth_config: GrowthConfig,
    ) -> None:
        self.balance.update(previous_timestamp, current_timestamp, venear_growth_config)

    def pooled_add(self, other: VenearBalance) -> PooledVenearBalance:
        truncated = truncate_near_to_millis(other.near_balance)
        difference = near_sub(other.near_balance, truncated)
        return PooledVenearBalance(
            VenearBalance(
                near_add(self.balance.near_balance, truncated),
                near_add(
                    self.balance.extra_venear_balance,
                    near_add(other.extra_venear_balance, difference),
                ),
            )
        )

    def pooled_sub(self, other: VenearBalance) -> PooledVenearBalance:
        truncated = truncate_near_to_millis(other.near_balance)
        difference = near_sub(other.near_balance, truncated)
        return PooledVenearBalance(
            VenearBalance(
                near_sub(self.balance.near_balance, truncated),
                near_sub(
                    self.balance.extra_venear_balance,
                    near_add(other.extra_venear_balance, difference),
                ),
            )
        )

    def to_json(self) -> dict[str, str]:
        return self.balance.to_json()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> PooledVenearBalance:
        return cls(VenearBalance.from_json(data))


def _as_u128(value: int) -> int:
    if value > U128_MAX:
        raise ContractError("Integer overflow when casting to u128")
    return value


@dataclass(frozen=True, eq=False)
class Fraction:
    """A ratio of two unsigned 128-bit integers, compared exactly."""

    numerator: int
    denominator: int

    def _cross(self, other: Fraction) -> tuple[int, int]:
        return self.numerator * other.denominator, self.denominator * other.numerator

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        left, right = self._cross(other)
        return left == right

    def __hash__(self) -> int:
        divisor = math.gcd(self.numerator, self.denominator) or 1
        return hash((self.numerator // divisor, self.denominator // divisor))

    def __lt__(self, other: Fraction) -> bool:
        left, right = self._cross(other)
        return left < right

    def __le__(self, other: Fraction) -> bool:
        left, right = self._cross(other)
        return left <= right

    def __gt__(self, other: Fraction) -> bool:
        left, right = self._cross(other)
        return left > right

    def __ge__(self, other: Fraction) -> bool:
        left, right = self._cross(other)
        return left >= right

    def __mul__(self, rhs: int) -> int:
        if self.denominator == 0:
            raise ContractError("Division by zero")
        return _as_u128(self.numerator * rhs // self.denominator)

    def u384_mul(self, a: int, b: int) -> int:
        """Compute numerator * a * b / denominator, requiring an exact result."""
        if self.denominator == 0:
            raise ContractError("Division by zero")
        numerator = self.numerator * a * b
        if numerator % self.denominator != 0:
            raise ContractError("Rounding error")
        return _as_u128(numerator // self.denominator)

    def to_json(self) -> dict[str, str]:
        return {"numerator": str(self.numerator), "denominator": str(self.denominator)}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Fraction:
        return cls(int(data["numerator"]), int(data["denominator"]))