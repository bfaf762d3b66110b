"""
Proof of knowledge of an opening of a Damgard-Fujisaki commitment:
PK{ (a, r): c = a * g + r * h }
"""

from dfzk import DamgardFujisakiCommitter, DFOpeningStmt, df_trusted_setup

# Set up the commitment parameters. In practice, use at least 1024 bit safe primes.
params = df_trusted_setup(bits=128, security_param=40)

# The prover commits to a value.
committer = DamgardFujisakiCommitter(params)
commitment = committer.commit(5, randomness=7)

# Setup the proof statement. Both parties know it.
stmt = DFOpeningStmt(params, commitment, challenge_space_size=40)

# Simulate the prover and the verifier interacting.
prover = stmt.get_prover(committer)
verifier = stmt.get_verifier()

t = prover.get_proof_random_data()
verifier.set_proof_random_data(t)
challenge = verifier.get_challenge()
s1, s2 = prover.get_proof_data(challenge)
assert verifier.verify(s1, s2)
