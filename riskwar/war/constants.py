"""War-specific constants and default configuration."""

# Cards dealt face down and discarded at the start of every war
BURN_COUNT = 3

# Names picked for the CPU opponent
CPU_NAMES = (
    "Ada",
    "Babbage",
    "Colossus",
    "Deep Blue",
    "ENIAC",
    "HAL",
    "Turing",
    "Watson",
)

DEFAULT_CONFIG = {
    "starting_cash": 1000,
    "seed": None,
}
