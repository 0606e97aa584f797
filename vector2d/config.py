"""Numeric configuration constants."""

import math

import numpy as np

# Storage type of vector components (32-bit IEEE-754 float)
COMPONENT_DTYPE = np.float32

# Full turn in component precision, modulus of wide angles
TAU = COMPONENT_DTYPE(2.0 * math.pi)

# Default tolerance of the approximate-equality assertion helpers
APPROX_DELTA = 1e-4
