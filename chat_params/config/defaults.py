"""chat_params.config.defaults
===========================

Central place for the numeric bounds enforced by the validation engine.

Bounds are ``(low, high)`` tuples where ``None`` marks an open end. Inclusivity
is recorded separately for the few bounds that are not closed intervals.
This module intentionally imports nothing from the rest of the package to
prevent circular dependencies.
"""

from __future__ import annotations

# ---- Sampling ----
TEMPERATURE_RANGE = (0.0, 2.0)
# top_p is exclusive at zero: (0, 1]
TOP_P_RANGE = (0.0, 1.0)
TOP_P_LOW_INCLUSIVE = False

# ---- Penalties ----
PRESENCE_PENALTY_RANGE = (-2.0, 2.0)
FREQUENCY_PENALTY_RANGE = (-2.0, 2.0)
LOGIT_BIAS_RANGE = (-100.0, 100.0)

# ---- Counts ----
N_RANGE = (1, None)
MAX_TOKENS_RANGE = (0, None)

# ---- Stop sequences ----
# Longer lists are logged, never rejected.
STOP_SEQUENCE_LIMIT = 4

# ---- Policy ----
DEFAULT_FAIL_FAST = False
DEFAULT_STRICT_FUNCTION_CALL = True

__all__ = [
    "TEMPERATURE_RANGE",
    "TOP_P_RANGE",
    "TOP_P_LOW_INCLUSIVE",
    "PRESENCE_PENALTY_RANGE",
    "FREQUENCY_PENALTY_RANGE",
    "LOGIT_BIAS_RANGE",
    "N_RANGE",
    "MAX_TOKENS_RANGE",
    "STOP_SEQUENCE_LIMIT",
    "DEFAULT_FAIL_FAST",
    "DEFAULT_STRICT_FUNCTION_CALL",
]
