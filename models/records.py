"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict


class EquipmentStatus(str, Enum):
    """Operating state reported by the pump controller."""

    normal = "Normal"
    warning = "Warning"
    critical = "Critical"
    maintenance_required = "MaintenanceRequired"


# Literals accepted in the status column; matching is exact and case-sensitive.
STATUS_BY_NAME: Dict[str, EquipmentStatus] = {
    "Normal": EquipmentStatus.normal,
    "Warning": EquipmentStatus.warning,
    "Critical": EquipmentStatus.critical,
    "MaintenanceRequired": EquipmentStatus.maintenance_required,
}


@dataclass(frozen=True, slots=True)
class Reading:
    """A single pump sensor reading parsed from a data file."""

    timestamp: datetime
    pressure: float
    temperature: float
    vibration: float
    status: EquipmentStatus
