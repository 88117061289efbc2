"""Shared dataclasses for hardware probing."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HardwareSnapshot:
    """A single point-in-time reading of the four hardware metrics.

    A metric that could not be collected is reported as zero; the reason is
    kept in ``diagnostics``.
    """

    cores: int
    clock_ghz: float
    memory_gb: int
    disk_gb: int
    diagnostics: list[str] = field(default_factory=list, compare=False)

    @property
    def degraded(self) -> bool:
        return bool(self.diagnostics)

    def to_dict(self) -> dict[str, object]:
        return {
            "cores": self.cores,
            "clock_speed_ghz": self.clock_ghz,
            "memory_gb": self.memory_gb,
            "disk_space_gb": self.disk_gb,
            "diagnostics": list(self.diagnostics),
        }
