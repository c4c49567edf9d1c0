"""examples/basic_usage.py - xloglib quick tour.

Demonstrates:
    Scenario A: default levels, DEBUG and VERBOSE are dropped
    Scenario B: operator override via the log.tag.<AppTag> property
    Scenario C: obfuscation and diagnostic dumps

Run:
    python examples/basic_usage.py
    log.tag.xLogLib=VERBOSE python examples/basic_usage.py   # env override
"""

import xloglib
from xloglib import SimpleNumberObfuscator, system_properties

APP_TAG = "xLogLib"
TAG = "LogTest"


def charge(card: str, amount: int) -> None:
    if amount <= 0:
        raise ValueError(f"amount must be positive, got {amount}")
    xloglib.i(TAG, "charged %d to card %s", amount, card)


# ---------------------------------------------------------------------------
# Initialise once, at startup
# ---------------------------------------------------------------------------
xloglib.init(f"  {APP_TAG} ")


# ===========================================================================
# Scenario A: default levels (INFO and above)
# ===========================================================================
print("--- Scenario A: default minimum is INFO ---")
print("d() returned", xloglib.d(TAG, "Log level - DEBUG"))   # -1, dropped
xloglib.i(TAG, "Log level - INFO")
xloglib.w(TAG, "Log level - WARN")
try:
    charge("4111111111111111", 0)
except ValueError as exc:
    xloglib.e(TAG, "payment failed", exc)


# ===========================================================================
# Scenario B: lower the threshold without touching call sites
# ===========================================================================
print("--- Scenario B: log.tag.xLogLib=VERBOSE ---")
system_properties.setprop(f"log.tag.{APP_TAG}", "VERBOSE")
xloglib.v(TAG, "Log level - VERBOSE")
xloglib.d(TAG, "is_debug() -> %s", xloglib.is_debug())


# ===========================================================================
# Scenario C: obfuscation and diagnostics
# ===========================================================================
print("--- Scenario C: obfuscation and dumps ---")
xloglib.set_obfuscator(SimpleNumberObfuscator())
xloglib.set_obfuscate_by_default(True)
charge("4111111111111111", 25)                       # digits masked
xloglib.d(TAG, "Ivanov: +71234567890", False)        # bypassed for this call

xloglib.print_stack_trace(TAG, xloglib.DEBUG)
xloglib.print_threads(TAG, xloglib.DEBUG)
xloglib.print_memory_info(xloglib.INFO)
