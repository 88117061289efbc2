"""Host hardware probe using psutil.

Every query is independent: when the host cannot answer one of them the
value degrades to zero, a warning is logged and the reason is kept on the
probe.  Nothing raised by psutil escapes :meth:`HardwareProbe.snapshot`.
"""

from __future__ import annotations

import logging
import os

from ._types import HardwareSnapshot

logger = logging.getLogger(__name__)

GIB = 1024**3


def _default_root() -> str:
    # "/" on POSIX, the current drive anchor (e.g. "C:\\") on Windows.
    return os.path.abspath(os.sep)


class HardwareProbe:
    """Collects the four metrics the requirement check needs.

    A probe instance accumulates diagnostics, so build a new one for every
    snapshot rather than sharing it between requests.
    """

    def __init__(self, root: str | None = None) -> None:
        self._root = root or _default_root()
        self._diagnostics: list[str] = []

    @property
    def root(self) -> str:
        return self._root

    @property
    def diagnostics(self) -> list[str]:
        return list(self._diagnostics)

    def _degrade(self, metric: str, reason: object) -> None:
        logger.warning("Error getting %s: %s", metric, reason)
        self._diagnostics.append(f"{metric}: {reason}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def core_count(self) -> int:
        """Logical processor count, 0 when unknown."""
        import psutil

        try:
            count = psutil.cpu_count(logical=True)
        except Exception as exc:
            self._degrade("CPU cores", exc)
            return 0
        if not count:
            self._degrade("CPU cores", "not reported by host")
            return 0
        return int(count)

    def clock_speed_ghz(self) -> float:
        """Clock speed of the first CPU the host reports, in GHz.

        Uses the rated (maximum) frequency of that descriptor, so an idle
        CPU throttled below its nominal speed still reports the same value.
        The live frequency is used only when the host reports no maximum.

        NOTE: this is the reading of a single representative core, not a
        minimum, maximum or average over all cores.  On multi-socket or
        hybrid (performance/efficiency core) machines the first descriptor
        may not be representative.  Kept as-is on purpose; an aggregate
        would change which hosts pass.
        """
        import psutil

        try:
            per_cpu = psutil.cpu_freq(percpu=True)
            first = per_cpu[0] if per_cpu else psutil.cpu_freq()
        except Exception as exc:
            self._degrade("CPU clock speed", exc)
            return 0.0
        if first is None:
            logger.debug("No CPU frequency descriptor available")
            return 0.0
        mhz = first.max or first.current
        return float(mhz) / 1000.0

    def memory_gb(self) -> int:
        """Total physical memory in whole GiB (truncated)."""
        import psutil

        try:
            total = psutil.virtual_memory().total
        except Exception as exc:
            self._degrade("memory info", exc)
            return 0
        return int(total) // GIB

    def free_disk_gb(self) -> int:
        """Free space on the root volume in whole GiB (truncated)."""
        import psutil

        try:
            free = psutil.disk_usage(self._root).free
        except Exception as exc:
            self._degrade("disk space", exc)
            return 0
        return int(free) // GIB

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def snapshot(self) -> HardwareSnapshot:
        """Run all four queries and bundle them into a snapshot."""
        cores = self.core_count()
        clock = self.clock_speed_ghz()
        memory = self.memory_gb()
        disk = self.free_disk_gb()

        logger.info(
            "Detected system configuration: cores=%d, clock_speed=%.2fGHz, "
            "memory=%dGB, disk_space=%dGB",
            cores,
            clock,
            memory,
            disk,
        )

        return HardwareSnapshot(
            cores=cores,
            clock_ghz=clock,
            memory_gb=memory,
            disk_gb=disk,
            diagnostics=self.diagnostics,
        )


def probe_hardware(root: str | None = None) -> HardwareSnapshot:
    """One-liner API: take a fresh hardware snapshot.  Never cached."""
    return HardwareProbe(root=root).snapshot()
