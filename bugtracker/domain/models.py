"""
models.py - Domain models
Single responsibility: typed containers for core entities and their wire form.
"""
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Optional


class Role(str, Enum):
    ADMIN = "admin"
    DEVELOPER = "developer"


class BugStatus(str, Enum):
    REPORTED = "reported"
    PROCESSING = "processing"
    COMPLETED = "completed"


class BugPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    role: Role

    def __getitem__(self, key):
        return getattr(self, key)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "role": self.role.value}

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=_wire_id(data["id"]),
            name=_wire_text(data, "name"),
            role=Role(data["role"]),
        )


def _wire_id(value) -> str:
    # older records stored numeric ids
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"id must be a string, got {type(value).__name__}")
    return str(value)


def _wire_text(data: dict, key: str, required: bool = True) -> str | None:
    value = data.get(key) if not required else data[key]
    if value is None and not required:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


# attribute name -> stored key (camelCase, as written by earlier versions)
_BUG_WIRE_KEYS = {
    "id": "id",
    "title": "title",
    "description": "description",
    "steps": "steps",
    "priority": "priority",
    "status": "status",
    "reported_by": "reportedBy",
    "reported_at": "reportedAt",
    "verified_by": "verifiedBy",
    "verified_at": "verifiedAt",
    "completed_at": "completedAt",
}

_OPTIONAL_FIELDS = ("verified_by", "verified_at", "completed_at")


@dataclass(frozen=True)
class Bug:
    id: str
    title: str
    description: str
    steps: str
    priority: BugPriority
    status: BugStatus
    reported_by: str
    reported_at: str
    verified_by: Optional[str] = None
    verified_at: Optional[str] = None
    completed_at: Optional[str] = None

    def __getitem__(self, key):
        return getattr(self, key)

    def evolve(self, **changes) -> "Bug":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Serialize with camelCase keys; unset optional fields are omitted."""
        data: dict = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            data[_BUG_WIRE_KEYS[f.name]] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Bug":
        kwargs = {
            attr: _wire_text(data, key, required=attr not in _OPTIONAL_FIELDS)
            for attr, key in _BUG_WIRE_KEYS.items()
            if attr not in ("id", "priority", "status")
        }
        return cls(
            id=_wire_id(data["id"]),
            priority=BugPriority(data["priority"]),
            status=BugStatus(data["status"]),
            **kwargs,
        )
