"""
Sampling bounds of the opening proof.

All values here are exact integers. None of them is reduced modulo the group
modulus.
"""

from petlib.bn import Bn

from dfzk.exceptions import InvalidChallenge


def challenge_bound(challenge_space_size):
    """
    Exclusive upper bound of the challenge space, :math:`2^k`.

    >>> challenge_bound(3)
    8
    """
    return Bn(2).pow(challenge_space_size)


def r1_bound(value_bound, n_len, challenge_space_size):
    r"""
    Bound masking the committed value: :math:`T \cdot 2^{n + k}`.

    >>> r1_bound(Bn(3), 4, 2)
    192
    """
    return value_bound * Bn(2).pow(n_len + challenge_space_size)


def r2_bound(order_bits, n_len, challenge_space_size):
    r"""
    Bound masking the commitment randomness: :math:`2^{B + 2n + k}`.

    >>> r2_bound(2, 4, 2)
    4096
    """
    return Bn(2).pow(order_bits + 2 * n_len + challenge_space_size)


def check_challenge(challenge, challenge_space_size):
    """
    Check that a challenge is an integer in :math:`[0, 2^k)`.

    Raises:
        InvalidChallenge: If the challenge is not an integer or out of range.
    """
    if isinstance(challenge, bool) or not isinstance(challenge, (int, Bn)):
        raise InvalidChallenge(
            "Challenge must be an integer, got {}".format(type(challenge).__name__)
        )
    # Compare as Python ints, petlib only coerces machine-sized ints.
    if int(challenge) < 0 or int(challenge) >= int(challenge_bound(challenge_space_size)):
        raise InvalidChallenge(
            "Challenge outside of [0, 2^{})".format(challenge_space_size)
        )
