"""
Subgroup of quadratic residues of an RSA group, QR_N for N = p * q with p and q safe primes.

The order of QR_N is p'q', where p = 2p' + 1 and q = 2q' + 1. It stays hidden from both the
Prover and the Verifier: a trusted setup samples p and q, publishes N and the generators, and
forgets the factorization.

Group elements are written additively to mirror :py:class:`petlib.ec.EcPt`: ``a + b`` is the
modular product and ``e * a`` is modular exponentiation. Exponents are plain integers and are never
reduced, as the group order is unknown.

Example:

>>> [g, h] = qr_trusted_setup(bits=64, num=2)
>>> 3 * g + 4 * h == 4 * h + 3 * g
True
"""
import math
import warnings

from petlib.bn import Bn

from dfzk.consts import DEFAULT_SAFE_PRIME_BITS
from dfzk.exceptions import GroupMismatchError
from dfzk.utils import ensure_bn


def qr_trusted_setup(bits=DEFAULT_SAFE_PRIME_BITS, num=1):
    """
    Set up an RSA group and generators of its subgroup of quadratic residues.

    Example:
    [g, h] = qr_trusted_setup(bits=1024, num=2)
    g and h generate QR_N for N the product of two 1024 bit safe primes.

    Args:
        bits: Bit length of each safe prime.
        num: Number of generators.
    """
    p = Bn.get_prime(bits, safe=1)
    q = Bn.get_prime(bits, safe=1)
    group = RSAGroup(p * q)

    g = group.random_generator()
    res = [g]

    # A multiple of the order of QR_N, only known during the setup.
    order_multiple = (p - 1) * (q - 1)
    num -= 1
    while num > 0:
        elem = order_multiple.random() * g
        if group.is_generator(elem):
            res.append(elem)
            num -= 1
    return res


# This class mimics petlib.ec.EcGroup, but for RSA groups.
class RSAGroup:
    # Must take a Bignum as argument
    def __init__(self, modulus):
        self.modulus = ensure_bn(modulus)

    def infinite(self):
        return IntPt(Bn(1), self)

    def element(self, value):
        """
        Wrap an integer as an element of the group, without reducing it.

        No membership check is done. Values outside :math:`[0, N)` only warn.
        """
        value = ensure_bn(value)
        if value < 0 or value >= self.modulus:
            warnings.warn("Value is not reduced modulo {}".format(self.modulus))
        return IntPt(value, self)

    def random_element(self):
        """Draw a random quadratic residue."""
        while True:
            x = self.modulus.random()
            if x > 0 and math.gcd(int(x), int(self.modulus)) == 1:
                return IntPt((x * x) % self.modulus, self)

    def is_generator(self, elem):
        """
        Check whether an element generates QR_N.

        A quadratic residue has order dividing p'q'. It generates the whole subgroup unless it is
        one modulo p or modulo q.
        """
        if elem.group != self:
            raise GroupMismatchError("Element is not from this group")
        return math.gcd(int(elem.pt - 1), int(self.modulus)) == 1

    def random_generator(self):
        while True:
            g = self.random_element()
            if self.is_generator(g):
                return g

    def wsum(self, weights, elems):
        res = self.infinite()
        for i in range(0, len(elems)):
            res = res + (weights[i] * elems[i])
        return res

    def __eq__(self, other):
        return isinstance(other, RSAGroup) and self.modulus == other.modulus

    def __repr__(self):
        return "RSAGroup({})".format(self.modulus)


# This class mimics petlib.ec.EcPt, but for elements of RSA groups.
class IntPt:
    # Must take one bignum and one RSAGroup as arguments
    def __init__(self, value, group):
        self.pt = value
        self.group = group

    def __add__(self, o):
        if o.group != self.group:
            raise GroupMismatchError("Cannot combine elements of different groups")
        return IntPt((self.pt * o.pt) % self.group.modulus, self.group)

    def __rmul__(self, o):
        o = ensure_bn(o)
        if o < 0:
            return IntPt(
                pow(self.pt.mod_inverse(self.group.modulus), -o, self.group.modulus),
                self.group,
            )
        else:
            return IntPt(pow(self.pt, o, self.group.modulus), self.group)

    def __eq__(self, other):
        if not isinstance(other, IntPt):
            return NotImplemented
        return (self.pt == other.pt) and (self.group == other.group)

    def __repr__(self):
        return "IntPt({})".format(self.pt)
