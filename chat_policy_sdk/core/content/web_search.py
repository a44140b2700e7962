"""
Web search prompt composition.

When a message carries web search results, its text is wrapped into a
localized answer template that embeds the numbered results.
"""

import re
from datetime import datetime
from typing import Dict, List, Optional

from ...config.constants import CHINESE_LANG
from ...config.settings import get_lang
from ...models.messages import RequestMessage, WebSearchResult
from .extractor import get_message_text_content
from .prompts import WEB_SEARCH_ANSWER_EN_PROMPT, WEB_SEARCH_ANSWER_ZH_PROMPT

_PLACEHOLDER_PATTERN = re.compile(r"\{(cur_date|search_results|question)\}")


def format_local_datetime(now: Optional[datetime] = None) -> str:
    """Local date/time as "M/D/YYYY, h:mm:ss AM"."""
    now = now or datetime.now()
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now.minute:02d}:{now.second:02d} {meridiem}"


def render_search_results(results: List[WebSearchResult]) -> str:
    """Render results as numbered [webpage N begin]...[webpage N end] blocks."""
    blocks = []
    for index, result in enumerate(results, start=1):
        blocks.append(
            f"[webpage {index} begin]\n"
            f"[webpage title]{result.title}\n"
            f"[webpage url]{result.url}\n"
            f"[webpage content begin]\n"
            f"{result.content}\n"
            f"[webpage content end]\n"
            f"[webpage {index} end]\n"
        )
    return "\n".join(blocks)


def get_web_search_template(lang: Optional[str] = None) -> str:
    """Chinese template for the "cn" locale, English for every other one."""
    lang = lang if lang is not None else get_lang()
    return WEB_SEARCH_ANSWER_ZH_PROMPT if lang == CHINESE_LANG else WEB_SEARCH_ANSWER_EN_PROMPT


def fill_template(template: str, values: Dict[str, str]) -> str:
    """
    Replace the first occurrence of each ``{name}`` placeholder.

    Substitution is a single pass over the template, so placeholder-like text
    inside substituted values is left untouched.
    """
    used = set()

    def _replace(match):
        name = match.group(1)
        if name in used or name not in values:
            return match.group(0)
        used.add(name)
        return values[name]

    return _PLACEHOLDER_PATTERN.sub(_replace, template)


def get_web_reference_message_text_content(
    message: RequestMessage,
    lang: Optional[str] = None,
    now: Optional[datetime] = None
) -> str:
    """
    Text of the message, wrapped in the web search template when it has results.

    Args:
        message: Message possibly carrying web search references
        lang: Locale override; the configured locale if omitted
        now: Timestamp for {cur_date}; the current local time if omitted

    Returns:
        The composed prompt, or the plain message text without references
    """
    prompt = get_message_text_content(message)
    references = message.web_search_references
    if references is None or not references.results:
        return prompt

    return fill_template(
        get_web_search_template(lang),
        {
            "cur_date": format_local_datetime(now),
            "search_results": render_search_results(references.results),
            "question": prompt,
        }
    )
