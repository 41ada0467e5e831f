import pytest

from bridgefee.core.utils import ZERO_ADDRESS, format_units, is_zero_address


def test_format_units_ether() -> None:
    assert format_units(0) == "0.0"
    assert format_units(10**18) == "1.0"
    assert format_units(1) == "0.000000000000000001"
    assert format_units(1_234_500_000_000_000_000) == "1.2345"
    assert format_units(-(10**18)) == "-1.0"


def test_format_units_other_decimals() -> None:
    assert format_units(1_500_000, 6) == "1.5"
    assert format_units(42, 0) == "42.0"


def test_format_units_rejects_negative_decimals() -> None:
    with pytest.raises(ValueError):
        format_units(1, -1)


def test_is_zero_address() -> None:
    assert is_zero_address(ZERO_ADDRESS)
    assert is_zero_address("")
    assert is_zero_address(None)
    assert is_zero_address("0x0")
    assert is_zero_address("0x00")
    assert not is_zero_address("0xzz")
    assert not is_zero_address("0x123")
