from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.enums import Role, Site
from ..core.exceptions import ValidationError
from ..users.model import User
from .model import InternalMessage
from .repository import MessageRepository

logger = logging.getLogger(__name__)


def _addressed_to(msg: InternalMessage, user: User) -> bool:
    if msg.recipient_role != user.role:
        return False
    # The Boss is not tied to a site.
    return user.is_boss or msg.recipient_site == user.site


class MessageService:
    def __init__(self, messages: MessageRepository):
        self._messages = messages

    def send(
        self,
        *,
        sender: User,
        recipient_role: Role,
        recipient_site: Site,
        content: str,
        now: Optional[datetime] = None,
    ) -> InternalMessage:
        content = require_non_empty(content, "Message")
        if recipient_site not in Site.operational() and recipient_role != Role.BOSS:
            raise ValidationError("Site destinataire invalide")

        msg = InternalMessage(
            id=new_id(),
            sender_name=sender.name,
            sender_role=sender.role,
            sender_site=sender.site,
            recipient_role=recipient_role,
            recipient_site=recipient_site,
            content=content,
            timestamp=(now or now_local()).isoformat(timespec="seconds"),
        )
        self._messages.save_all([msg, *self._messages.list_all()])
        logger.info("Message %s -> %s (%s)", sender.role.value, recipient_role.value, recipient_site.value)
        return msg

    def visible_for(self, user: User) -> list[InternalMessage]:
        messages = self._messages.list_all()
        if user.is_boss:
            return messages
        return [
            m
            for m in messages
            if _addressed_to(m, user) or (m.sender_name == user.name and m.sender_role == user.role)
        ]

    def unread_count(self, user: User) -> int:
        return sum(1 for m in self._messages.list_all() if _addressed_to(m, user) and not m.is_read)

    def mark_read(self, user: User) -> int:
        messages = self._messages.list_all()
        changed = 0
        for idx, m in enumerate(messages):
            if _addressed_to(m, user) and not m.is_read:
                messages[idx] = replace(m, is_read=True)
                changed += 1
        if changed:
            self._messages.save_all(messages)
        return changed
