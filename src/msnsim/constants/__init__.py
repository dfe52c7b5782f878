"""
Centralized constants for msnsim.

Usage:
======
    from msnsim.constants.msn import MSN_V_T, MSN_TAU_NMDA
"""

from __future__ import annotations

from .msn import *  # noqa: F401,F403
