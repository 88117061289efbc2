"""Minimum hardware requirements."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Requirements:
    min_cores: int
    min_clock_ghz: float
    min_memory_gb: int
    min_disk_gb: int

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value!r}")

    def to_dict(self) -> dict[str, object]:
        return {
            "cores": self.min_cores,
            "clock_speed_ghz": self.min_clock_ghz,
            "memory_gb": self.min_memory_gb,
            "disk_space_gb": self.min_disk_gb,
        }


DEFAULT_REQUIREMENTS = Requirements(
    min_cores=4,
    min_clock_ghz=2.1,
    min_memory_gb=6,
    min_disk_gb=20,
)
