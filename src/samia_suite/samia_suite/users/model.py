from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ActivityAction, Role, Site


@dataclass(frozen=True)
class User:
    """Entité du domaine: opérateur connecté.

    Note: c'est aussi le contenu du jeton de session (sérialisé en JSON).
    """

    email: str
    name: str
    role: Role
    site: Site

    @property
    def is_boss(self) -> bool:
        return self.role == Role.BOSS

    def to_dict(self) -> dict:
        return {"email": self.email, "name": self.name, "role": self.role.value, "site": self.site.value}

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            email=str(data["email"]),
            name=str(data["name"]),
            role=Role(data["role"]),
            site=Site(data["site"]),
        )


@dataclass(frozen=True)
class DirectoryEntry:
    user: User
    password_hash: str

    def to_dict(self) -> dict:
        return {"user": self.user.to_dict(), "password_hash": self.password_hash}

    @classmethod
    def from_dict(cls, data: dict) -> "DirectoryEntry":
        return cls(user=User.from_dict(data["user"]), password_hash=str(data["password_hash"]))


@dataclass(frozen=True)
class ActivityLog:
    id: str
    user_name: str
    user_role: str
    action: ActivityAction
    timestamp: str
    site: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_name": self.user_name,
            "user_role": self.user_role,
            "action": self.action.value,
            "timestamp": self.timestamp,
            "site": self.site,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ActivityLog":
        return cls(
            id=str(data["id"]),
            user_name=str(data["user_name"]),
            user_role=str(data["user_role"]),
            action=ActivityAction(data["action"]),
            timestamp=str(data["timestamp"]),
            site=str(data["site"]),
        )
