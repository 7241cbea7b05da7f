from dataclasses import dataclass


@dataclass
class Quota:
    """Resources allocated to a new VDS."""

    cpu_count: int
    hdd_quota: int
    memory: int

    @classmethod
    def from_dict(cls, quota: dict) -> "Quota":
        """Builds a quota from a mapping with cpu_count, hdd_quota and memory keys."""
        return cls(
            cpu_count=quota["cpu_count"],
            hdd_quota=quota["hdd_quota"],
            memory=quota["memory"],
        )

    def to_api_dict(self) -> dict:
        """Converts to dict for VDS API."""
        return {
            "cpu-count": self.cpu_count,
            "hdd-quota": self.hdd_quota,
            "memory": self.memory,
        }
