"""
Utils that can be useful for debugging.
"""


class SigmaProtocol:
    """
    Sigma-protocol runner.

    Passes the three messages between an in-process prover and verifier.

    Args:
        verifier: Verifier object
        prover: Prover object
    """

    def __init__(self, verifier, prover):
        self.verifier = verifier
        self.prover = prover

    def verify(self, verbose=True):
        """Run the verification process."""

        # Funky names.
        victor = self.verifier
        peggy = self.prover

        proof_random_data = peggy.get_proof_random_data()
        victor.set_proof_random_data(proof_random_data)
        challenge = victor.get_challenge()
        s1, s2 = peggy.get_proof_data(challenge)
        result = victor.verify(s1, s2)

        if verbose:
            if result:
                print("Verified for {0}".format(victor.__class__.__name__))
            else:
                print("Not verified for {0}".format(victor.__class__.__name__))

        return result
