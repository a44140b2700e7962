"""
Message content extraction.

Flattens message content (a plain string or an ordered list of typed parts)
into the text a backend receives, and collects embedded image references.
Parts may be ``ContentPart`` models or their plain dict form; missing or
non-string fields are read as empty strings.
"""

from typing import Any, List, Optional

from ...config.constants import THINKING_LINE_PREFIX
from ...models.messages import MessageContent, RequestMessage


def _field(part: Any, name: str) -> Any:
    if isinstance(part, dict):
        return part.get(name)
    return getattr(part, name, None)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _parts(content: Any) -> List[Any]:
    # Anything other than a part sequence carries no parts
    if isinstance(content, (list, tuple)):
        return list(content)
    return []


def _part_text(part: Any) -> str:
    return _as_text(_field(part, "text"))


def _part_image_url(part: Any) -> str:
    image_url = _field(part, "image_url")
    if image_url is None:
        return ""
    return _as_text(_field(image_url, "url"))


def _is_text(part: Any) -> bool:
    return _field(part, "type") == "text"


def _is_image(part: Any) -> bool:
    return _field(part, "type") == "image_url"


def get_text_content(content: Optional[MessageContent]) -> str:
    """
    Flatten content into plain text.

    A string is returned verbatim. For a part list, the text of every
    ``"text"`` part is concatenated in order, space separated, and the
    result is trimmed. Any other value yields "".
    """
    if isinstance(content, str):
        return content

    combined = ""
    for part in _parts(content):
        if _is_text(part):
            combined += _part_text(part) + " "
    return combined.strip()


def get_message_text_content(message: RequestMessage) -> str:
    return get_text_content(message.content)


def get_message_text_content_without_thinking(message: RequestMessage) -> str:
    """
    Text of the message with thinking lines removed.

    Only the first text part of multimodal content is considered. Lines
    starting with "> " and blank lines are dropped.
    """
    content = ""
    if isinstance(message.content, str):
        content = message.content
    else:
        for part in _parts(message.content):
            if _is_text(part):
                content = _part_text(part)
                break

    lines = [
        line for line in content.split("\n")
        if not line.startswith(THINKING_LINE_PREFIX) and line.strip() != ""
    ]
    return "\n".join(lines).strip()


def get_message_images(message: RequestMessage) -> List[str]:
    """Image urls of every ``"image_url"`` part, in order; [] for string content."""
    return [_part_image_url(part) for part in _parts(message.content) if _is_image(part)]
