# venear

This package does balance accounting for veNEAR. It also models a lockup
contract that holds NEAR, locks it for veNEAR and manages a staking pool.
Every amount is an integer number of yoctoNEAR (10^-24 NEAR). Every timestamp
is an integer number of nanoseconds. The package uses only the standard
library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### Arithmetic and records

- **`venear.amounts`** does checked arithmetic on amounts.
  - `near_add` raises on 128-bit overflow and `near_sub` raises on underflow.
  - `truncate_to_seconds` and `truncate_near_to_millis` round down.
  - `from_near` and `from_millinear` convert to yoctoNEAR.
  - A broken rule raises `ContractError`.
- **`venear.balances`** holds the balance types.
  - `VenearBalance` is a NEAR balance plus the extra veNEAR that has grown on it. Instances support `+` and `-`.
  - `PooledVenearBalance` keeps its NEAR part in whole milliNEAR. The sub-milliNEAR remainder of anything added through `pooled_add` or removed through `pooled_sub` goes into the extra veNEAR part.
  - `Fraction` is an exact ratio with cross-multiplied comparison. `fraction * n` floors the result. `u384_mul(a, b)` raises "Rounding error" unless the result is exact.
- **`venear.growth`**: `VenearGrowthConfigFixedRate.calculate` returns the veNEAR grown on a balance between two timestamps at a fixed rate per nanosecond.
  - Both timestamps must be whole seconds and must not go backwards.
  - The balance is truncated to milliNEAR first.
- **Records** (`venear.account`, `venear.global_state`, `venear.lockup_update`):
  - `Account` and `AccountDelegation` describe an account. `Account.total_balance` reads the balance and `Account.update` accrues growth.
  - `GlobalState` holds the pooled total. Create one with `GlobalState.create` and accrue growth with `update`.
  - `LockupUpdate` carries a lockup's locked balance, timestamp and nonce.
  - Each record has `to_json` and `from_json`, which work on JSON-ready dicts. Large integers are written as decimal strings. Versioned wrappers are `{"V0": ...}` and `{"V1": ...}`.

### Events, environment and gas

- **`venear.events`** builds `EVENT_JSON:` log lines with `format_event`.
  - It has helpers for lockup actions, proposal creation, approval and votes, and NEP-141 `ft_mint` and `ft_burn`.
  - Each helper takes a log sink, for example `Environment.log`.
- **`venear.runtime`** models the call context.
  - `Environment` holds the current and calling accounts, the balance, the attached deposit, the block time and the collected logs.
  - `Promise` records function calls, transfers and account deletions, chained with `then`. Iterating over a promise walks the chain.
  - `is_valid_account_id` checks whether an account name is well formed.
- **`venear.gas`** holds the gas attached to each outgoing call. `tgas` converts teragas to gas units.

### The lockup contract

- **`venear.lockup_base`**: `LockupBase` holds the lockup state and its checks and getters, with `TransactionStatus` and `StakingInformation`.
  - It locks and unlocks NEAR with `lock_near`, `begin_unlock_near`, `end_unlock_near` and `lock_pending_near`.
  - Each of those raises the nonce and returns a promise that calls `on_lockup_update` on the veNEAR account.
  - `ft_on_transfer` accepts calls only from the selected staking pool.
- **`venear.lockup_callbacks`**: `StakingCallbacks` applies the results of whitelist and staking pool calls to the lockup state. Each callback is given the outcome of the call that preceded it.
- **`venear.lockup`**: `LockupContract` adds the owner's methods.
  - Staking methods:
    - `select_staking_pool`, `unselect_staking_pool`
    - `deposit_to_staking_pool`, `deposit_and_stake`
    - `stake`, `unstake`, `unstake_all`
    - `withdraw_from_staking_pool`, `withdraw_all_from_staking_pool`
    - `refresh_staking_pool_balance`
  - Other methods: `transfer` and `delete_lockup`.
  - Every owner's method requires the caller to be the owner and exactly one yoctoNEAR attached.

## Example

```python
from venear.amounts import from_near
from venear.balances import Fraction, VenearBalance
from venear.growth import VenearGrowthConfigFixedRate

# 6% a year, expressed per nanosecond with a 10**30 denominator
config = VenearGrowthConfigFixedRate(
    annual_growth_rate_ns=Fraction(
        numerator=6 * 10**30 // (100 * 365 * 24 * 60 * 60 * 10**9),
        denominator=10**30,
    )
)

balance = VenearBalance.from_near(from_near(100))
balance.update(0, 365 * 24 * 60 * 60 * 10**9, config)
print(balance.total())
```

Calls that break a contract rule raise `ContractError` with the contract's
message. Examples are "Can only be called by the owner" and "Staking pool is
not selected".

## What it does not do

- **Nothing is sent anywhere.** The package does not talk to a network or a chain, and it does not execute promises. A `Promise` only records the intended calls. To move the lockup on, call the matching `StakingCallbacks` method yourself with the result of the outgoing call.
- **Only some balance changes are applied.** The `Environment` balance goes down when a deposit is sent to the pool and when a transfer is made. Incoming funds, such as withdrawals from the pool, must be added to `account_balance` by hand.
- **No veNEAR or voting contract.** The package has no veNEAR contract, Merkle tree or voting contract. It provides their records and event helpers only.