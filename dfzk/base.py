"""
Common classes, including subclassable basic provers and verifiers.

Both parties are small state machines. Each method checks the stage it is called in and raises
:py:class:`dfzk.exceptions.ProtocolStateError` when called out of order, so that a misbehaving
counterparty cannot produce a meaningless result silently.
"""

import abc
import enum

from dfzk.exceptions import ProtocolStateError


class ProverStage(enum.Enum):
    AWAITING_RANDOM_DATA = "awaiting random data"
    AWAITING_CHALLENGE = "awaiting challenge"
    DONE = "done"


class VerifierStage(enum.Enum):
    AWAITING_RANDOM_DATA = "awaiting random data"
    AWAITING_CHALLENGE = "awaiting challenge"
    AWAITING_RESPONSE = "awaiting response"
    VERIFIED = "verified"
    REJECTED = "rejected"


def require_stage(party, *stages):
    if party.stage not in stages:
        raise ProtocolStateError(
            "{} is {}, expected {}".format(
                party.__class__.__name__,
                party.stage.value,
                " or ".join(s.value for s in stages),
            )
        )


class Prover(metaclass=abc.ABCMeta):
    """
    Abstract interface representing Prover used in sigma protocols.

    Args:
        stmt: The proof statement from which we draw the Prover.
    """

    def __init__(self, stmt):
        self.stmt = stmt
        self.stage = ProverStage.AWAITING_RANDOM_DATA

    def reset(self):
        """Drop the pending session, if any."""
        self.stage = ProverStage.AWAITING_RANDOM_DATA

    @abc.abstractmethod
    def get_proof_random_data(self):
        """
        Start a fresh session and produce the first message.
        """
        pass

    @abc.abstractmethod
    def get_proof_data(self, challenge):
        """
        Answer the challenge of the current session.
        """
        pass


class Verifier(metaclass=abc.ABCMeta):
    """
    An abstract interface representing Verifier used in sigma protocols
    """

    def __init__(self, stmt):
        self.stmt = stmt
        self.reset()

    def reset(self):
        self.stage = VerifierStage.AWAITING_RANDOM_DATA
        self.proof_random_data = None
        self.challenge = None

    def set_proof_random_data(self, proof_random_data):
        """
        Store the prover's first message. Starts a new session.
        """
        self.reset()
        self.proof_random_data = proof_random_data
        self.stage = VerifierStage.AWAITING_CHALLENGE

    @abc.abstractmethod
    def get_challenge(self):
        pass

    @abc.abstractmethod
    def verify(self, *responses):
        """
        Verify the responses of an interactive sigma protocol.

        Returns:
            bool: True if verification succeeded, False otherwise.
        """
        pass
