from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ServiceId(str, Enum):
    BRIDAL_MAKEUP = "bridal-makeup"
    LASH_LIFT = "lash-lift"
    BROW_LIFT = "brow-lift"
    THREADING = "threading"
    MAKEUP = "makeup"
    MEHENDI = "mehendi"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str) -> "ServiceId":
        """Map a raw service tag to a ServiceId. Matching is exact after trimming; anything else is OTHER."""
        key = (raw or "").strip()
        for member in cls:
            if member is not cls.OTHER and member.value == key:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class WholeDay:
    pass


@dataclass(frozen=True)
class FixedDuration:
    hours: int


@dataclass(frozen=True)
class ConfigurableDuration:
    default_hours: int = 1


@dataclass(frozen=True)
class NoBlock:
    pass


BlockingPolicy = WholeDay | FixedDuration | ConfigurableDuration | NoBlock


_POLICIES: dict[ServiceId, BlockingPolicy] = {
    ServiceId.BRIDAL_MAKEUP: WholeDay(),
    ServiceId.LASH_LIFT: FixedDuration(1),
    ServiceId.BROW_LIFT: FixedDuration(1),
    ServiceId.THREADING: FixedDuration(1),
    ServiceId.MAKEUP: FixedDuration(3),
    ServiceId.MEHENDI: ConfigurableDuration(),
    ServiceId.OTHER: NoBlock(),
}


def policy_for(service: ServiceId) -> BlockingPolicy:
    return _POLICIES[service]
