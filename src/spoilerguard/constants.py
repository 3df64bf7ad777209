from __future__ import annotations

# Time-clock sports: seconds per regulation period
NFL_PERIOD_SECONDS = 15 * 60
NBA_PERIOD_SECONDS = 12 * 60
NHL_PERIOD_SECONDS = 20 * 60

# Regulation period counts
NFL_REGULATION_PERIODS = 4
NBA_REGULATION_PERIODS = 4
NHL_REGULATION_PERIODS = 3
MLB_REGULATION_INNINGS = 9

# End of regulation, encoded
NFL_MAX = NFL_PERIOD_SECONDS * NFL_REGULATION_PERIODS    # 3600
NBA_MAX = NBA_PERIOD_SECONDS * NBA_REGULATION_PERIODS    # 2880
NHL_MAX = NHL_PERIOD_SECONDS * NHL_REGULATION_PERIODS    # 3600

# Half-inning slots: 0, 1, 2 outs and "end of half"
MLB_SLOTS_PER_HALF = 4
MLB_SLOTS_PER_INNING = 2 * MLB_SLOTS_PER_HALF            # 8
MLB_END_OF_HALF_OUTS = 3
MLB_MAX = MLB_REGULATION_INNINGS * MLB_SLOTS_PER_INNING - 1  # 71, Bottom 9th end

# Outs-based elapsed approximation used for baseball score lookups
MLB_OUTS_PER_HALF = 3
MLB_OUTS_PER_INNING = 2 * MLB_OUTS_PER_HALF

SECONDS_PER_MINUTE = 60
