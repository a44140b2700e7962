"""
Capability rule tables.

Each table is plain data consumed by the classifier. Matching is
case-sensitive. Update the tables as providers ship new models.
"""

# Vision: substring keywords
VISION_KEYWORDS = (
    "vision",
    "claude-3",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
    "gemini-exp-1114",
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4.5-preview",
    "gpt-4.5-preview-2025-02-27",
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
    "gpt-4.1-2025-04-14",
    "o1",
    "o3",
    "o4-mini-2025-04-16",
)

# Vision: gpt-4-turbo counts, its preview snapshots do not
GPT4_TURBO_MARKER = "gpt-4-turbo"
PREVIEW_MARKER = "preview"

# Vision: every model served by these registry providers (substring match)
VISION_REGISTRY_PROVIDERS = ("google",)

DALLE3_MODEL = "dall-e-3"

# Retrieval augmentation: always supported
RAG_SPECIAL_MODELS = (
    "gpt-4-turbo",
    "gpt-4-turbo-2024-04-09",
    "gpt-4o",
    "gpt-4o-2024-05-13",
    "gpt-4o-mini",
    "gpt-4o-mini-2024-07-18",
    "gpt-4.5-preview",
    "gpt-4.5-preview-2025-02-27",
)

# Retrieval augmentation: otherwise any exact model of this provider
RAG_REGISTRY_PROVIDER = "openai"

# Function calling: always supported
FUNCTION_CALL_SPECIAL_MODELS = (
    "gpt-3.5-turbo",
    "gpt-3.5-turbo-1106",
    "gpt-3.5-turbo-0125",
    "gpt-4",
    "gpt-4-0613",
    "gpt-4-32k",
    "gpt-4-32k-0613",
    "gpt-4-turbo",
    "gpt-4-turbo-preview",
    "gpt-4o",
    "gpt-4o-2024-05-13",
    "gpt-4o-mini",
    "gpt-4o-mini-2024-07-18",
    "gpt-4-turbo-2024-04-09",
    "gpt-4-1106-preview",
    "gpt-4.5-preview",
    "gpt-4.5-preview-2025-02-27",
    "claude-3-sonnet-20240229",
    "claude-3-opus-20240229",
    "claude-3-haiku-20240307",
    "claude-3-5-sonnet-20240620",
    "claude-3-5-sonnet-20241022",
    "claude-3-5-sonnet-latest",
    "claude-3-5-haiku-latest",
    "claude-3-7-sonnet-20250219",
    "claude-3-7-sonnet-latest",
    "gpt-4.1-2025-04-14",
    "o1",
    "o3",
    "o4-mini-2025-04-16",
)

# Function calling: otherwise any exact model of this provider, minus names containing the marker
FUNCTION_CALL_REGISTRY_PROVIDER = "openai"
FUNCTION_CALL_EXCLUDED_SUBSTRING = "o2"

CLAUDE_THINKING_MODELS = (
    "claude-3-7-sonnet-20250219",
    "claude-3-7-sonnet-latest",
)

IMAGE_GENERATION_MODELS = (
    "gemini-2.0-flash-exp",
)
