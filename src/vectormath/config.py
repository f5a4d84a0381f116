# config.py
"""
Global constants for vectormath.
"""

# Magic constant for the fast inverse square root bit trick.
FAST_INV_SQRT_MAGIC = 0x5F3759DF

# Newton-Raphson refinement steps applied after the bit trick.
NEWTON_ITERATIONS = 1

# Inclusive range for sampled integer components.
RAND_LOW = -10
RAND_HIGH = 10

# Significant digits when printing vector components (matches C++ stream defaults).
DISPLAY_PRECISION = 6

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'
