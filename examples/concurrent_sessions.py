"""
Several verifiers checking the same commitment, each with its own session.
"""

from dfzk import DamgardFujisakiCommitter, DFOpeningStmt, df_trusted_setup
from dfzk.utils.debug import SigmaProtocol

params = df_trusted_setup(bits=128, security_param=40)
committer = DamgardFujisakiCommitter(params)
commitment = committer.commit(-1234)

stmt = DFOpeningStmt(params, commitment, challenge_space_size=40)

# Every session gets a dedicated prover and verifier.
sessions = [SigmaProtocol(stmt.get_verifier(), stmt.get_prover(committer)) for _ in range(3)]
assert all(session.verify(verbose=False) for session in sessions)
