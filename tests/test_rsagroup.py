import pytest

from petlib.bn import Bn

from dfzk.exceptions import GroupMismatchError
from dfzk.rsa_group import RSAGroup, IntPt, qr_trusted_setup


def test_trusted_setup_generators():
    [g, h] = qr_trusted_setup(bits=64, num=2)
    group = g.group
    assert h.group == group
    assert group.is_generator(g)
    assert group.is_generator(h)
    assert g != h


def test_operations_match_modular_arithmetic(group):
    n = group.modulus
    g = group.random_element()
    x, y = n.random(), n.random()
    assert (x * g).pt == pow(g.pt, x, n)
    assert (x * g + y * g) == (x + y) * g
    assert (g + group.infinite()) == g


def test_negative_exponent(group):
    g = group.random_generator()
    x = Bn(12345)
    assert (-x) * g + x * g == group.infinite()


def test_int_exponents(group):
    g = group.random_generator()
    assert 3 * g == Bn(3) * g
    assert 2 ** 200 * g == Bn(2).pow(200) * g


def test_wsum(group):
    g, h = group.random_generator(), group.random_generator()
    assert group.wsum([2, 3], [g, h]) == 2 * g + 3 * h


def test_random_element_is_square(group):
    elem = group.random_element()
    assert 0 < elem.pt < group.modulus


def test_unity_is_not_generator(group):
    assert not group.is_generator(group.infinite())


def test_element_warns_when_unreduced(group):
    with pytest.warns(UserWarning):
        group.element(group.modulus + 1)


def test_group_mismatch(group):
    other = RSAGroup(Bn(35))
    with pytest.raises(GroupMismatchError):
        group.infinite() + other.infinite()
