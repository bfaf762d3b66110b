r"""
Damgård–Fujisaki integer commitments over QR_N.

.. math::

    C = a G + r H

in the additive notation of :py:mod:`dfzk.rsa_group`, that is :math:`C = G^a H^r \bmod N`. The
committed value :math:`a` is any integer with :math:`|a| < T`. The randomness is drawn from
:math:`[0, 2^{B + k})`, where :math:`2^B` bounds the order of QR_N and :math:`k` is the statistical
hiding parameter.

See "`A Statistically-Hiding Integer Commitment Scheme Based on Groups with Hidden Order`_" by
Damgård and Fujisaki, 2002.

.. _`A Statistically-Hiding Integer Commitment Scheme Based on Groups with Hidden Order`:
    https://eprint.iacr.org/2001/064
"""
import logging
import warnings

import attr
from petlib.bn import Bn

from dfzk.consts import (
    DEFAULT_SAFE_PRIME_BITS,
    DEFAULT_SECURITY_PARAM,
    ORDER_BOUND_GAP,
)
from dfzk.exceptions import CommitmentError, GroupMismatchError, ProtocolStateError
from dfzk.rsa_group import qr_trusted_setup
from dfzk.utils import ensure_bn, get_random_num


logger = logging.getLogger(__name__)


@attr.s
class DFParams:
    """
    Public parameters of the commitment scheme.

    Args:
        g: First base :math:`G`
        h: Second base :math:`H`
        value_bound: Committed values must satisfy :math:`|a| < T`
        security_param: Statistical hiding parameter :math:`k`
    """

    g = attr.ib()
    h = attr.ib()
    value_bound = attr.ib(converter=ensure_bn)
    security_param = attr.ib(default=DEFAULT_SECURITY_PARAM)

    def __attrs_post_init__(self):
        if self.g.group != self.h.group:
            raise GroupMismatchError("Bases should come from the same group")
        if self.value_bound <= 0:
            raise ValueError("Value bound must be positive")

    @property
    def group(self):
        return self.g.group

    @property
    def modulus(self):
        return self.group.modulus

    @property
    def n_len(self):
        return self.modulus.num_bits()

    @property
    def order_bits(self):
        """:math:`B`, such that :math:`2^B` is an upper bound on the order of QR_N."""
        return self.n_len - ORDER_BOUND_GAP


def df_trusted_setup(
    bits=DEFAULT_SAFE_PRIME_BITS, security_param=DEFAULT_SECURITY_PARAM, value_bound=None
):
    """
    Generate commitment parameters with a fresh modulus.

    Args:
        bits: Bit length of each safe prime of the modulus.
        security_param: Statistical hiding parameter.
        value_bound: Bound :math:`T` on committed values. Defaults to the modulus.
    """
    g, h = qr_trusted_setup(bits=bits, num=2)
    if value_bound is None:
        value_bound = g.group.modulus
    return DFParams(g, h, value_bound, security_param)


class DamgardFujisaki:
    """
    Common part of the committer and the receiver.
    """

    def __init__(self, params):
        self.params = params
        self.commitment = None

    def compute_commit(self, x, y):
        """Compute :math:`G^x H^y`. Exponents may be negative."""
        return ensure_bn(x) * self.params.g + ensure_bn(y) * self.params.h


class DamgardFujisakiCommitter(DamgardFujisaki):
    """
    Commits to a value and keeps the opening.
    """

    def __init__(self, params):
        super().__init__(params)
        self._committed_value = None
        self._randomness = None

    def commit(self, value, randomness=None):
        """
        Commit to an integer value.

        Args:
            value: Integer with :math:`|value| < T`
            randomness: Optional randomness, drawn from :math:`[0, 2^{B+k})` if omitted.

        Raises:
            CommitmentError: If the value is too big.
        """
        value = ensure_bn(value)
        magnitude = -value if value < 0 else value
        if magnitude >= self.params.value_bound:
            raise CommitmentError("The committed value is too big")

        bound = Bn(2).pow(self.params.order_bits + self.params.security_param)
        if randomness is None:
            randomness = get_random_num(
                self.params.order_bits + self.params.security_param
            )
        else:
            randomness = ensure_bn(randomness)
            if randomness < 0 or randomness >= bound:
                warnings.warn("Randomness outside of [0, 2^(B+k))")

        self._committed_value = value
        self._randomness = randomness
        self.commitment = self.compute_commit(value, randomness)
        logger.debug("Committed to a value of %d bits", value.num_bits())
        return self.commitment

    def get_decommit_msg(self):
        """
        Reveal the opening :math:`(a, r)`.

        Raises:
            ProtocolStateError: If nothing was committed yet.
        """
        if self.commitment is None:
            raise ProtocolStateError("Nothing committed yet")
        return self._committed_value, self._randomness


class DamgardFujisakiReceiver(DamgardFujisaki):
    """
    Holds a commitment and checks openings of it.
    """

    @classmethod
    def from_committer(cls, committer):
        """Build the receiver side from the public data of a committer."""
        if committer.commitment is None:
            raise ProtocolStateError("Committer has not committed yet")
        receiver = cls(committer.params)
        receiver.set_commitment(committer.commitment)
        return receiver

    def set_commitment(self, commitment):
        if commitment.group != self.params.group:
            raise GroupMismatchError("Commitment is not from the parameters' group")
        self.commitment = commitment

    def check_decommitment(self, value, randomness):
        """
        Check an opening against the stored commitment.

        Returns:
            bool: True if :math:`G^a H^r` equals the commitment.
        """
        if self.commitment is None:
            raise ProtocolStateError("No commitment to check against")
        return self.compute_commit(value, randomness) == self.commitment
