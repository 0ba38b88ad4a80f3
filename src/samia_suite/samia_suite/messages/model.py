from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role, Site


@dataclass(frozen=True)
class InternalMessage:
    id: str
    sender_name: str
    sender_role: Role
    sender_site: Site
    recipient_role: Role
    recipient_site: Site
    content: str
    timestamp: str
    is_read: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sender_name": self.sender_name,
            "sender_role": self.sender_role.value,
            "sender_site": self.sender_site.value,
            "recipient_role": self.recipient_role.value,
            "recipient_site": self.recipient_site.value,
            "content": self.content,
            "timestamp": self.timestamp,
            "is_read": self.is_read,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InternalMessage":
        return cls(
            id=str(data["id"]),
            sender_name=str(data.get("sender_name", "")),
            sender_role=Role(data["sender_role"]),
            sender_site=Site(data["sender_site"]),
            recipient_role=Role(data["recipient_role"]),
            recipient_site=Site(data["recipient_site"]),
            content=str(data.get("content", "")),
            timestamp=str(data.get("timestamp", "")),
            is_read=bool(data.get("is_read", False)),
        )
