"""
Default security parameters.
"""

# Bit size of the challenge space, k. Soundness error is about 2^-k.
CHALLENGE_LENGTH = 80

# Statistical hiding parameter of the commitment randomness.
DEFAULT_SECURITY_PARAM = 80

# Bit size of each safe prime factor of the modulus.
DEFAULT_SAFE_PRIME_BITS = 1024

# 2^B is taken as the upper bound on the order of QR_N, with B = len(N) - gap.
ORDER_BOUND_GAP = 2
