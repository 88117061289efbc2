"""Hardware probing subsystem for hwgate.

Reads core count, clock speed, memory size and free disk space from the
host.  Used by ``hwgate serve`` on every request and by ``hwgate check``.
"""

from __future__ import annotations

from ._probe import GIB, HardwareProbe, probe_hardware
from ._types import HardwareSnapshot

__all__ = [
    "GIB",
    "HardwareProbe",
    "HardwareSnapshot",
    "probe_hardware",
]
