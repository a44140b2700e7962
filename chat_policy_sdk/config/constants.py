"""
Request Policy Constants

Central location for timeout budgets, locale defaults and the environment
variable names used to override them.
"""

# Request timeout budgets (milliseconds)
REQUEST_TIMEOUT_MS = 60000
REQUEST_TIMEOUT_MS_FOR_THINKING = REQUEST_TIMEOUT_MS * 5  # Reasoning models stream slowly
REQUEST_TIMEOUT_MS_FOR_IMAGE_GENERATION = REQUEST_TIMEOUT_MS * 2

# Locale
DEFAULT_LANG = "en"
CHINESE_LANG = "cn"

# Thinking output convention: each reasoning line is quoted
THINKING_LINE_PREFIX = "> "

# Environment variables
LANG_ENV_VAR = "CHAT_POLICY_LANG"
MODELS_FILE_ENV_VAR = "CHAT_POLICY_MODELS_FILE"
REQUEST_TIMEOUT_ENV_VAR = "CHAT_POLICY_REQUEST_TIMEOUT_MS"
THINKING_TIMEOUT_ENV_VAR = "CHAT_POLICY_THINKING_TIMEOUT_MS"
IMAGE_TIMEOUT_ENV_VAR = "CHAT_POLICY_IMAGE_TIMEOUT_MS"
