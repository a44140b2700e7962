"""Content shaping layer.

This layer handles:
- Flattening message content into prompt text
- Stripping thinking lines and collecting image references
- Composing web search prompts from attached results
- Cleaning generated conversation topics
"""

from .extractor import (
    get_message_images,
    get_message_text_content,
    get_message_text_content_without_thinking,
    get_text_content,
)
from .topics import trim_topic
from .web_search import (
    fill_template,
    format_local_datetime,
    get_web_reference_message_text_content,
    get_web_search_template,
    render_search_results,
)

__all__ = [
    "get_text_content",
    "get_message_text_content",
    "get_message_text_content_without_thinking",
    "get_message_images",
    "get_web_reference_message_text_content",
    "get_web_search_template",
    "render_search_results",
    "fill_template",
    "format_local_datetime",
    "trim_topic",
]
