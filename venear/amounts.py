"""Arithmetic on token amounts (in yoctoNEAR) and timestamps (in nanoseconds)."""

YOCTO_PER_NEAR = 10**24
YOCTO_PER_MILLINEAR = 10**21
NS_PER_SECOND = 10**9
U128_MAX = 2**128 - 1


class ContractError(Exception):
    """Raised when a contract requirement is violated."""


def near_add(a: int, b: int) -> int:
    """Add two yoctoNEAR amounts, failing on 128-bit overflow."""
    result = a + b
    if result > U128_MAX:
        raise ContractError("NEAR amount overflow")
    return result


def near_sub(a: int, b: int) -> int:
    """Subtract two yoctoNEAR amounts, failing on underflow."""
    if b > a:
        raise ContractError("NEAR amount underflow")
    return a - b


def truncate_to_seconds(nanoseconds: int) -> int:
    """Drop the sub-second part of a nanosecond timestamp."""
    return nanoseconds // NS_PER_SECOND * NS_PER_SECOND


def truncate_near_to_millis(near: int) -> int:
    """Drop the part of a yoctoNEAR amount below one milliNEAR."""
    return near // YOCTO_PER_MILLINEAR * YOCTO_PER_MILLINEAR


def from_near(amount: int) -> int:
    """Convert whole NEAR to yoctoNEAR."""
    return amount * YOCTO_PER_NEAR


def from_millinear(amount: int) -> int:
    """Convert milliNEAR to yoctoNEAR."""
    return amount * YOCTO_PER_MILLINEAR