import pytest

from venear import gas


def test_tgas_unit():
    assert gas.tgas(1) == 10**12


def test_tgas_scales_linearly():
    assert gas.tgas(0) == 0
    assert gas.tgas(3) == 3_000_000_000_000


def test_base_gas_is_25_tgas():
    assert gas.BASE_GAS == gas.tgas(25)
    assert gas.tgas(25) == 25_000_000_000_000


def test_venear_lockup_update_is_20_tgas():
    assert gas.VENEAR_LOCKUP_UPDATE == gas.tgas(20)


def test_deposit_is_50_tgas():
    assert gas.DEPOSIT == gas.tgas(50)


@pytest.mark.parametrize(
    "name",
    ["DEPOSIT_AND_STAKE", "WITHDRAW", "STAKE", "UNSTAKE", "UNSTAKE_ALL"],
)
def test_staking_pool_calls_are_75_tgas(name):
    assert getattr(gas, name) == gas.tgas(75)


@pytest.mark.parametrize(
    "name",
    [
        "IS_WHITELISTED",
        "GET_ACCOUNT_STAKED_BALANCE",
        "GET_ACCOUNT_UNSTAKED_BALANCE",
        "GET_ACCOUNT_TOTAL_BALANCE",
        "ON_WHITELIST_IS_WHITELISTED",
        "ON_STAKING_POOL_DEPOSIT",
        "ON_STAKING_POOL_DEPOSIT_AND_STAKE",
        "ON_STAKING_POOL_WITHDRAW",
        "ON_STAKING_POOL_STAKE",
        "ON_STAKING_POOL_UNSTAKE",
        "ON_STAKING_POOL_UNSTAKE_ALL",
        "ON_VOTING_GET_RESULT",
        "ON_GET_ACCOUNT_TOTAL_BALANCE",
    ],
)
def test_views_and_callbacks_use_25_tgas(name):
    assert getattr(gas, name) == gas.tgas(25)


def test_withdraw_all_callback_covers_nested_withdraw():
    assert gas.ON_GET_ACCOUNT_UNSTAKED_BALANCE_TO_WITHDRAW_BY_OWNER == gas.tgas(125)
    assert gas.ON_GET_ACCOUNT_UNSTAKED_BALANCE_TO_WITHDRAW_BY_OWNER > gas.tgas(75)