"""Chat transcript renderer.

Each :class:`MessageKind` maps to one CSS class so the front-end stylesheet
can tell commands, responses and errors apart. Command echoes get a ``> ``
prompt prefix. All message text is HTML-escaped.

The container is a reversed flex column (see ``app/styles.css``), which keeps
the newest entry scrolled into view without any script.
"""

import html
from typing import Dict, Iterable

from grid_adventure.components import ChatMessage
from grid_adventure.types import MessageKind


CHAT_CSS_CLASSES: Dict[MessageKind, str] = {
    MessageKind.COMMAND: "chat-command",
    MessageKind.RESPONSE: "chat-response",
    MessageKind.ERROR: "chat-error",
}

COMMAND_PREFIX = "> "


def render_chat_line(message: ChatMessage) -> str:
    prefix = COMMAND_PREFIX if message.kind == MessageKind.COMMAND else ""
    css_class = CHAT_CSS_CLASSES[message.kind]
    return f'<div class="chat-line {css_class}">{html.escape(prefix + message.text)}</div>'


def render_chat_html(messages: Iterable[ChatMessage]) -> str:
    """Whole transcript as one HTML fragment.

    Lines are emitted newest first because the container uses
    ``flex-direction: column-reverse``; on screen they read oldest to newest.
    """
    lines = [render_chat_line(message) for message in messages]
    body = "".join(reversed(lines))
    return f'<div class="chat-log">{body}</div>'
