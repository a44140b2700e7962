import re

_WRAPPING_QUOTES = re.compile(r'^["“”*]+|["“”*]+\Z')
_TRAILING_PUNCTUATION = re.compile(r'[，。！？”“"、,.!?*]*\Z')


def trim_topic(topic: str) -> str:
    """Strip wrapping quotes/asterisks and trailing punctuation from a generated topic."""
    # Some models wrap the topic in quotes or bold markers
    topic = _WRAPPING_QUOTES.sub("", topic)
    return _TRAILING_PUNCTUATION.sub("", topic, count=1)
