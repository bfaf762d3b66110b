import pytest

from petlib.bn import Bn

from dfzk.utils import ensure_bn, get_random_int


@pytest.mark.parametrize(
    "value", [0, 1, -1, 2 ** 63, 2 ** 64 + 5, -(2 ** 200) - 7, 3 ** 500]
)
def test_ensure_bn_python_int(value):
    bn = ensure_bn(value)
    assert isinstance(bn, Bn)
    assert int(bn) == value


def test_ensure_bn_keeps_bn():
    x = Bn(42)
    assert ensure_bn(x) is x


def test_get_random_int_large_bound():
    bound = 2 ** 300
    for _ in range(10):
        assert 0 <= int(get_random_int(bound)) < bound


def test_get_random_int_rejects_non_positive():
    with pytest.raises(ValueError):
        get_random_int(0)
