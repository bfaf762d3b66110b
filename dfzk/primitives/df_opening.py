r"""
ZK proof of knowledge of an opening of a Damgård–Fujisaki commitment.

.. math::

    PK\{ (a, r): C = a G + r H \}

where :math:`G, H` generate QR_N for an RSA modulus :math:`N` of unknown factorization.

The protocol has three moves:

1. The prover draws :math:`r_1 \in [0, T 2^{n + k})` and :math:`r_2 \in [0, 2^{B + 2n + k})` and
   sends :math:`t = r_1 G + r_2 H`.
2. The verifier sends a challenge :math:`c \in [0, 2^k)`.
3. The prover sends :math:`s_1 = r_1 + c a` and :math:`s_2 = r_2 + c r`, computed over the
   integers, and the verifier checks :math:`t + c C = s_1 G + s_2 H`.

Here :math:`n` is the bit length of :math:`N`, :math:`T` bounds the committed value,
:math:`2^B` bounds the group order and :math:`k` is the challenge space size. The masks are wide
enough for :math:`s_1, s_2` to be statistically independent of :math:`(a, r)`.

Since the group order is hidden, responses can not be reduced: an honest :math:`s_1, s_2` must be
kept as unbounded integers.

Out-of-range challenges are rejected by the prover with
:py:class:`dfzk.exceptions.InvalidChallenge`.
"""
import logging

from dfzk.base import Prover, Verifier, ProverStage, VerifierStage, require_stage
from dfzk.bounds import challenge_bound, check_challenge, r1_bound, r2_bound
from dfzk.commitments import DamgardFujisakiReceiver
from dfzk.consts import CHALLENGE_LENGTH
from dfzk.exceptions import StatementMismatch, ValidationError
from dfzk.rsa_group import IntPt
from dfzk.utils import ensure_bn, get_random_int


logger = logging.getLogger(__name__)


class DFOpeningProver(Prover):
    """
    Prover of a :py:class:`DFOpeningStmt`.

    Args:
        stmt: The statement.
        committer (:py:class:`dfzk.commitments.DamgardFujisakiCommitter`): Holder of the opening.
    """

    def __init__(self, stmt, committer):
        super().__init__(stmt)
        self.committer = committer
        self._randomizers = None

    def reset(self):
        super().reset()
        self._randomizers = None

    def get_proof_random_data(self):
        """
        Draw fresh randomizers :math:`r_1, r_2` and compute :math:`t = r_1 G + r_2 H`.

        Any pending session is discarded.
        """
        params = self.stmt.params
        k = self.stmt.challenge_space_size
        r1 = get_random_int(r1_bound(params.value_bound, params.n_len, k))
        r2 = get_random_int(r2_bound(params.order_bits, params.n_len, k))
        self._randomizers = (r1, r2)
        self.stage = ProverStage.AWAITING_CHALLENGE
        logger.debug("New opening proof session, k=%d", k)
        return self.committer.compute_commit(r1, r2)

    def get_proof_data(self, challenge):
        """
        Compute the responses :math:`s_1 = r_1 + c a` and :math:`s_2 = r_2 + c r`.

        The randomizers are discarded afterwards: answering a second challenge with the same
        :math:`t` would reveal the opening.

        Raises:
            ProtocolStateError: If no session is pending.
            InvalidChallenge: If the challenge is not in :math:`[0, 2^k)`.
        """
        require_stage(self, ProverStage.AWAITING_CHALLENGE)
        check_challenge(challenge, self.stmt.challenge_space_size)
        challenge = ensure_bn(challenge)

        a, r = self.committer.get_decommit_msg()
        r1, r2 = self._randomizers
        s1 = r1 + challenge * a
        s2 = r2 + challenge * r

        self._randomizers = None
        self.stage = ProverStage.DONE
        return s1, s2


class DFOpeningVerifier(Verifier):
    """
    Verifier of a :py:class:`DFOpeningStmt`.

    Args:
        stmt: The statement.
        receiver (:py:class:`dfzk.commitments.DamgardFujisakiReceiver`): Holder of the commitment.
    """

    def __init__(self, stmt, receiver):
        self.receiver = receiver
        super().__init__(stmt)

    def set_proof_random_data(self, proof_random_data):
        """
        Store :math:`t`.

        The value is kept as is. An invalid :math:`t` only shows up as a failed verification.
        """
        if isinstance(proof_random_data, IntPt):
            value = proof_random_data.pt
        else:
            value = proof_random_data
        super().set_proof_random_data(self.stmt.params.group.element(value))

    def get_challenge(self):
        """
        Draw and store a challenge from :math:`[0, 2^k)`.

        Raises:
            ProtocolStateError: If :math:`t` was not received yet.
        """
        require_stage(self, VerifierStage.AWAITING_CHALLENGE)
        self.challenge = get_random_int(
            challenge_bound(self.stmt.challenge_space_size)
        )
        self.stage = VerifierStage.AWAITING_RESPONSE
        return self.challenge

    def verify(self, s1, s2):
        """
        Check :math:`t + c C = s_1 G + s_2 H`.

        Returns:
            bool: True if verification succeeded, False otherwise.

        Raises:
            ProtocolStateError: If no challenge was issued.
        """
        require_stage(self, VerifierStage.AWAITING_RESPONSE)
        left = self.proof_random_data + self.challenge * self.receiver.commitment
        right = self.receiver.compute_commit(s1, s2)
        result = left == right
        if result:
            self.stage = VerifierStage.VERIFIED
        else:
            self.stage = VerifierStage.REJECTED
            logger.debug("Opening proof rejected")
        return result


class DFOpeningStmt:
    """
    Proof statement for knowledge of an opening of a Damgård–Fujisaki commitment.

    Each call to :py:meth:`get_prover` or :py:meth:`get_verifier` returns a fresh party. Concurrent
    sessions must each use their own.

    Example usage:

    >>> from dfzk.commitments import df_trusted_setup, DamgardFujisakiCommitter
    >>> from dfzk.utils.debug import SigmaProtocol
    >>> params = df_trusted_setup(bits=64, security_param=16)
    >>> committer = DamgardFujisakiCommitter(params)
    >>> com = committer.commit(42)
    >>> stmt = DFOpeningStmt(params, com, challenge_space_size=16)
    >>> SigmaProtocol(stmt.get_verifier(), stmt.get_prover(committer)).verify(verbose=False)
    True

    Args:
        params (:py:class:`dfzk.commitments.DFParams`): Commitment parameters.
        commitment: Commitment value :math:`C`.
        challenge_space_size: Bit size :math:`k` of the challenge space.
    """

    def __init__(self, params, commitment, challenge_space_size=CHALLENGE_LENGTH):
        if challenge_space_size <= 0:
            raise ValueError("Challenge space size must be positive")
        self.params = params
        self.commitment = commitment
        self.challenge_space_size = challenge_space_size

    @classmethod
    def from_receiver(cls, receiver, challenge_space_size=CHALLENGE_LENGTH):
        return cls(receiver.params, receiver.commitment, challenge_space_size)

    def get_prover(self, committer):
        """
        Get a prover for the current proof statement.

        Raises:
            StatementMismatch: If the committer holds a different commitment.
        """
        if committer.params != self.params or committer.commitment != self.commitment:
            raise StatementMismatch("Committer does not hold the statement's commitment")
        return DFOpeningProver(self, committer)

    def get_verifier(self):
        receiver = DamgardFujisakiReceiver(self.params)
        receiver.set_commitment(self.commitment)
        return DFOpeningVerifier(self, receiver)


def extract_opening(challenge_1, responses_1, challenge_2, responses_2):
    r"""
    Knowledge extractor: recover an opening from two accepting transcripts with the same
    :math:`t` and distinct challenges.

    .. math::

        a = \frac{s_1 - s_1'}{c - c'}, \quad r = \frac{s_2 - s_2'}{c - c'}

    Raises:
        ValidationError: If the challenges are equal or the transcripts are not consistent.
    """
    diff = int(challenge_1) - int(challenge_2)
    if diff == 0:
        raise ValidationError("Challenges must differ")
    if len(responses_1) != len(responses_2):
        raise ValidationError("Transcripts have a different number of responses")

    opening = []
    for x, y in zip(responses_1, responses_2):
        num = int(x) - int(y)
        if num % diff != 0:
            raise ValidationError("Responses are not consistent with a single opening")
        opening.append(ensure_bn(num // diff))
    return tuple(opening)
