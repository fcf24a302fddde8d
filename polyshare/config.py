"""Global configuration for polyshare."""

import os

# ---------- Finite-field prime (largest prime below 2^32) ----------
# All threshold-scheme arithmetic is mod PRIME.
PRIME = 2**32 - 5

# ---------- Randomness ----------
# Width of one raw draw; rejection sampling discards draws at or above
# the largest multiple of PRIME below 2**RANDOM_BITS.
RANDOM_BITS = 32

# ---------- Rational (illustrative) scheme ----------
# Characters per secret.  Exact arithmetic never overflows, so this is a
# protocol limit: the polynomial degree and share count both equal it.
MAX_SECRET_LENGTH = int(os.environ.get("POLYSHARE_MAX_SECRET_LENGTH", "6"))

# Sample abscissas are drawn without replacement from [1, SAMPLE_X_BOUND).
SAMPLE_X_BOUND = int(os.environ.get("POLYSHARE_SAMPLE_X_BOUND", "100"))

# Largest code point a decoded coefficient may map to.
MAX_CODE_POINT = 0x10FFFF
