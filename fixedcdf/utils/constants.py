"""
Numerical constants, domain bounds and tolerances for fixed-point evaluation.

All values carrying a real-number meaning are integers scaled by the unit
named in their comment (WAD = 1e18, PRECISION = 1e36). Nothing here is a
float: the core never touches hardware floating point.
"""

# Fixed-point scales
WAD = 10**18  # 18 fractional decimal digits, the public representation
HALF_WAD = WAD // 2
PRECISION = 10**36  # Internal working scale (18 guard digits over WAD)
WAD_TO_PRECISION = PRECISION // WAD

# Representation contract: a FixedPoint18 is a signed 256-bit integer
INT256_MAX = 2**255 - 1
INT256_MIN = -(2**255)

# Domain bounds (raw scaled units, inclusive)
MIN_STD_DEV = 1  # 1e-18 in real terms
MAX_STD_DEV = 10**19  # 10.0
MIN_MEAN = -(10**20)  # -100.0
MAX_MEAN = 10**20  # 100.0

# Normal distribution bounds
# Beyond ±9σ the tail mass (< 1.2e-19) rounds to zero at 18 decimals,
# so the saturated branch agrees bit-for-bit with the series branch.
Z_SATURATION = 9 * WAD
PDF_CUTOFF = 10 * WAD  # φ(10) ≈ 7.7e-23, below one raw unit

# Exponential limits (WAD)
EXP_MAX_INPUT = 135_305_999_368_893_231_589  # e**x * 1e18 overflows int256 here

# Iteration bounds for the series evaluations
MAX_SERIES_TERMS = 256  # S(z) needs ~170 terms at z = 9 to reach 1e-36
MAX_EXP_TERMS = 64  # Taylor series of e**r for |r| <= ln2/2 needs ~30

# Mathematical constants at PRECISION (36 decimals, rounded half up)
LN2 = 693_147_180_559_945_309_417_232_121_458_176_568
SQRT2 = 1_414_213_562_373_095_048_801_688_724_209_698_079
INV_SQRT_2PI = 398_942_280_401_432_677_939_946_059_934_381_868

# Accuracy diagnostics
ACCURACY_TOLERANCE = 1e-8  # Maximum absolute error against the float oracle
SWEEP_X_START = -(10**23)
SWEEP_X_END = 10**23
SWEEP_STD_DEV_FACTOR = 10  # Geometric step for standard deviation sweeps
DEFAULT_SWEEP_POINTS = 1000
DEFAULT_GRID_X_POINTS = 100
DEFAULT_GRID_MEAN_POINTS = 11
