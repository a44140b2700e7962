# Built-in model registry using provider family inheritance
from .model_families import create_model_descriptors

OPENAI_MODELS = [
    "gpt-3.5-turbo",
    "gpt-3.5-turbo-1106",
    "gpt-3.5-turbo-0125",
    "gpt-4",
    "gpt-4-0613",
    "gpt-4-32k",
    "gpt-4-32k-0613",
    "gpt-4-turbo",
    "gpt-4-turbo-preview",
    "gpt-4.1",
    "gpt-4.1-2025-04-14",
    "gpt-4.1-mini",
    "gpt-4.1-mini-2025-04-14",
    "gpt-4.1-nano",
    "gpt-4.1-nano-2025-04-14",
    "gpt-4.5-preview",
    "gpt-4.5-preview-2025-02-27",
    "gpt-4o",
    "gpt-4o-2024-05-13",
    "gpt-4o-2024-08-06",
    "gpt-4o-2024-11-20",
    "chatgpt-4o-latest",
    "gpt-4o-mini",
    "gpt-4o-mini-2024-07-18",
    "gpt-4-vision-preview",
    "gpt-4-turbo-2024-04-09",
    "gpt-4-1106-preview",
    "dall-e-3",
    "o1-mini",
    "o1-preview",
    "o3-mini",
    "o3",
    "o4-mini",
]

GOOGLE_MODELS = [
    "gemini-1.0-pro",
    "gemini-1.5-pro-latest",
    "gemini-1.5-flash-latest",
    "gemini-2.0-flash",
    "gemini-2.0-flash-exp",
    "gemini-2.0-flash-thinking-exp",
    "gemini-2.0-pro-exp",
    "gemini-pro-vision",
]

ANTHROPIC_MODELS = [
    "claude-instant-1.2",
    "claude-2.0",
    "claude-2.1",
    "claude-3-sonnet-20240229",
    "claude-3-opus-20240229",
    "claude-3-opus-latest",
    "claude-3-haiku-20240307",
    "claude-3-5-haiku-20241022",
    "claude-3-5-haiku-latest",
    "claude-3-5-sonnet-20240620",
    "claude-3-5-sonnet-20241022",
    "claude-3-5-sonnet-latest",
    "claude-3-7-sonnet-20250219",
    "claude-3-7-sonnet-latest",
]

BAIDU_MODELS = [
    "ernie-4.0-turbo-8k",
    "ernie-3.5-8k",
    "ernie-speed-128k",
]

BYTEDANCE_MODELS = [
    "Doubao-lite-4k",
    "Doubao-pro-32k",
]

ALIBABA_MODELS = [
    "qwen-turbo",
    "qwen-plus",
    "qwen-max",
    "qwen-vl-plus",
]

TENCENT_MODELS = [
    "hunyuan-pro",
    "hunyuan-lite",
    "hunyuan-vision",
]

MOONSHOT_MODELS = [
    "moonshot-v1-8k",
    "moonshot-v1-32k",
    "moonshot-v1-128k",
]

IFLYTEK_MODELS = [
    "general",
    "generalv3",
    "pro-128k",
    "4.0Ultra",
]

XAI_MODELS = [
    "grok-beta",
    "grok-2",
    "grok-2-vision-1212",
]

CHATGLM_MODELS = [
    "glm-4-plus",
    "glm-4-flash",
    "glm-4v",
    "cogview-3",
]

DEEPSEEK_MODELS = [
    "deepseek-chat",
    "deepseek-coder",
    "deepseek-reasoner",
]

SILICONFLOW_MODELS = [
    "deepseek-ai/DeepSeek-V3",
    "deepseek-ai/DeepSeek-R1",
]

# Ordered registry, grouped by provider
DEFAULT_MODELS = [
    *create_model_descriptors("openai", OPENAI_MODELS),
    *create_model_descriptors("azure", OPENAI_MODELS),
    *create_model_descriptors("google", GOOGLE_MODELS),
    *create_model_descriptors("anthropic", ANTHROPIC_MODELS),
    *create_model_descriptors("baidu", BAIDU_MODELS),
    *create_model_descriptors("bytedance", BYTEDANCE_MODELS),
    *create_model_descriptors("alibaba", ALIBABA_MODELS),
    *create_model_descriptors("tencent", TENCENT_MODELS),
    *create_model_descriptors("moonshot", MOONSHOT_MODELS),
    *create_model_descriptors("iflytek", IFLYTEK_MODELS),
    *create_model_descriptors("xai", XAI_MODELS),
    *create_model_descriptors("chatglm", CHATGLM_MODELS),
    *create_model_descriptors("deepseek", DEEPSEEK_MODELS),
    *create_model_descriptors("siliconflow", SILICONFLOW_MODELS),
]

DEFAULT_MODEL = "gpt-4o-mini"
