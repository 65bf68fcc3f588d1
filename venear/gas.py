"""Gas attached to cross-contract calls made by the lockup contract."""

TGAS = 10**12


def tgas(amount: int) -> int:
    """Convert teragas to gas units."""
    return amount * TGAS


BASE_GAS = tgas(25)

# Staking pool whitelist.
IS_WHITELISTED = BASE_GAS

# Staking pool calls.
DEPOSIT = BASE_GAS * 2
DEPOSIT_AND_STAKE = BASE_GAS * 3
WITHDRAW = BASE_GAS * 3
STAKE = BASE_GAS * 3
UNSTAKE = BASE_GAS * 3
UNSTAKE_ALL = BASE_GAS * 3
GET_ACCOUNT_STAKED_BALANCE = BASE_GAS
GET_ACCOUNT_UNSTAKED_BALANCE = BASE_GAS
GET_ACCOUNT_TOTAL_BALANCE = BASE_GAS

# Callbacks on the lockup itself.
ON_WHITELIST_IS_WHITELISTED = BASE_GAS
ON_STAKING_POOL_DEPOSIT = BASE_GAS
ON_STAKING_POOL_DEPOSIT_AND_STAKE = BASE_GAS
ON_STAKING_POOL_WITHDRAW = BASE_GAS
ON_STAKING_POOL_STAKE = BASE_GAS
ON_STAKING_POOL_UNSTAKE = BASE_GAS
ON_STAKING_POOL_UNSTAKE_ALL = BASE_GAS
ON_VOTING_GET_RESULT = BASE_GAS
ON_GET_ACCOUNT_TOTAL_BALANCE = BASE_GAS
# The callback may go on to withdraw, so it carries gas for that call and its callback.
ON_GET_ACCOUNT_UNSTAKED_BALANCE_TO_WITHDRAW_BY_OWNER = (
    BASE_GAS + WITHDRAW + ON_STAKING_POOL_WITHDRAW
)

# Notifying the veNEAR contract of a lockup update.
VENEAR_LOCKUP_UPDATE = tgas(20)