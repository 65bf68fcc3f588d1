import pytest

from venear.amounts import ContractError, from_near
from venear.balances import Fraction, PooledVenearBalance, VenearBalance
from venear.global_state import GlobalState
from venear.growth import VenearGrowthConfigFixedRate

SECOND = 10**9
CONFIG = VenearGrowthConfigFixedRate(Fraction(10**6, 10**30))


def test_create_truncates_and_starts_empty():
    state = GlobalState.create(7 * SECOND + 999, CONFIG)
    assert state.update_timestamp == 7 * SECOND
    assert state.total_venear_balance == PooledVenearBalance()
    assert state.venear_growth_config == CONFIG


def test_update_accrues_growth():
    state = GlobalState.create(SECOND, CONFIG)
    state.total_venear_balance = state.total_venear_balance.pooled_add(
        VenearBalance.from_near(from_near(100))
    )
    expected_growth = CONFIG.calculate(SECOND, 9 * SECOND, from_near(100))
    state.update(9 * SECOND + 5)
    assert state.update_timestamp == 9 * SECOND
    assert state.total_venear_balance.total() == from_near(100) + expected_growth


def test_update_backwards_rejected():
    state = GlobalState.create(10 * SECOND, CONFIG)
    with pytest.raises(ContractError, match="Timestamp must be increasing"):
        state.update(SECOND)


def test_json_round_trip():
    state = GlobalState.create(3 * SECOND, CONFIG)
    state.total_venear_balance = PooledVenearBalance(VenearBalance(from_near(5), 11))
    data = state.to_json()
    assert data["update_timestamp"] == str(3 * SECOND)
    assert data["venear_growth_config"] == CONFIG.to_json()
    assert GlobalState.from_json(data) == state
    assert GlobalState.from_json({"V0": data}) == state