import pytest

from venear.amounts import U128_MAX, ContractError, from_millinear, from_near
from venear.balances import Fraction, PooledVenearBalance, VenearBalance
from venear.growth import VenearGrowthConfigFixedRate

SECOND = 10**9
CONFIG = VenearGrowthConfigFixedRate(Fraction(10**6, 10**30))


def test_total():
    balance = VenearBalance(near_balance=from_near(3), extra_venear_balance=from_near(2))
    assert balance.total() == from_near(5)


def test_from_near_has_no_extra():
    balance = VenearBalance.from_near(from_near(4))
    assert balance.near_balance == from_near(4)
    assert balance.extra_venear_balance == 0


def test_add_sub_round_trip():
    a = VenearBalance(from_near(10), 17)
    b = VenearBalance(from_near(3), 5)
    assert (a + b) - b == a
    c = VenearBalance(a.near_balance, a.extra_venear_balance)
    c += b
    c -= b
    assert c == a


def test_sub_underflow():
    with pytest.raises(ContractError):
        VenearBalance(1, 0) - VenearBalance(2, 0)


def test_update_adds_growth_to_extra_only():
    balance = VenearBalance.from_near(from_near(100))
    expected = CONFIG.calculate(SECOND, 5 * SECOND, from_near(100))
    balance.update(SECOND, 5 * SECOND, CONFIG)
    assert balance.near_balance == from_near(100)
    assert balance.extra_venear_balance == expected
    assert expected > 0


def test_pooled_add_preserves_total_and_truncates():
    pooled = PooledVenearBalance()
    other = VenearBalance(from_millinear(1500) + 777, 42)
    result = pooled.pooled_add(other)
    assert result.total() == pooled.total() + other.total()
    assert result.balance.near_balance == from_millinear(1500)


def test_pooled_add_then_sub_round_trip():
    start = PooledVenearBalance(VenearBalance(from_near(50), 9))
    other = VenearBalance(from_millinear(2) + 5, 11)
    assert start.pooled_add(other).pooled_sub(other) == start


def test_pooled_sub_underflow():
    with pytest.raises(ContractError):
        PooledVenearBalance().pooled_sub(VenearBalance.from_near(from_near(1)))


def test_pooled_update_grows():
    pooled = PooledVenearBalance(VenearBalance.from_near(from_near(10)))
    before = pooled.total()
    pooled.update(0, 3 * SECOND, CONFIG)
    assert pooled.total() > before


def test_fraction_equality_and_order():
    assert Fraction(1, 2) == Fraction(2, 4)
    assert hash(Fraction(1, 2)) == hash(Fraction(2, 4))
    assert Fraction(1, 3) < Fraction(1, 2)
    assert Fraction(2, 3) >= Fraction(4, 6)
    assert Fraction(3, 4) > Fraction(2, 4)


def test_fraction_mul():
    assert Fraction(1, 3) * 9 == 3


def test_u384_mul_rounding_error():
    with pytest.raises(ContractError, match="Rounding error"):
        Fraction(1, 7).u384_mul(2, 3)


def test_u384_mul_overflow():
    with pytest.raises(ContractError):
        Fraction(U128_MAX, 1).u384_mul(2, 1)


def test_json_formats_and_round_trips():
    balance = VenearBalance.from_near(7)
    assert balance.to_json() == {"near_balance": "7", "extra_venear_balance": "0"}
    assert VenearBalance.from_json(balance.to_json()) == balance
    pooled = PooledVenearBalance(VenearBalance(from_near(2), 3))
    assert pooled.to_json() == pooled.balance.to_json()
    assert PooledVenearBalance.from_json(pooled.to_json()) == pooled
    fraction = Fraction(6, 10**30)
    assert fraction.to_json() == {"numerator": "6", "denominator": str(10**30)}
    restored = Fraction.from_json(fraction.to_json())
    assert (restored.numerator, restored.denominator) == (6, 10**30)