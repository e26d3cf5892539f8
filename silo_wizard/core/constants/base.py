DEFAULT_HTTP_TIMEOUT = 30.0  # HTTP client timeout (seconds)

MANTISSA = 10**18

# Wizard storage and on-chain percentages: percentage * 10^16
PERCENT_DECIMALS = 16
PERCENT_SCALE = 10**PERCENT_DECIMALS

# Fee inputs take two decimal places: round(percentage * 100) basis points * 10^14
BP2DP_NORMALIZATION = 10 ** (18 - 4)

E18_DECIMALS = 18

# Integers with at least this many digits do not survive an IEEE-754 round trip
LARGE_INTEGER_DIGITS = 16

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Largest value an on-chain uint256 slot can hold, and its decimal length
MAX_UINT256 = 2**256 - 1
MAX_UINT256_DIGITS = len(str(MAX_UINT256))
