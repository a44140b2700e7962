# Provider family base configurations
from typing import Dict, Any, List

# Provider metadata shared by every model of the family
PROVIDER_FAMILIES = {
    "openai": {
        "id": "openai",
        "providerName": "OpenAI",
        "providerType": "openai",
        "sorted": 1,
    },
    "azure": {
        "id": "azure",
        "providerName": "Azure",
        "providerType": "azure",
        "sorted": 2,
    },
    "google": {
        "id": "google",
        "providerName": "Google",
        "providerType": "google",
        "sorted": 3,
    },
    "anthropic": {
        "id": "anthropic",
        "providerName": "Anthropic",
        "providerType": "anthropic",
        "sorted": 4,
    },
    "baidu": {
        "id": "baidu",
        "providerName": "Baidu",
        "providerType": "baidu",
        "sorted": 5,
    },
    "bytedance": {
        "id": "bytedance",
        "providerName": "ByteDance",
        "providerType": "bytedance",
        "sorted": 6,
    },
    "alibaba": {
        "id": "alibaba",
        "providerName": "Alibaba",
        "providerType": "alibaba",
        "sorted": 7,
    },
    "tencent": {
        "id": "tencent",
        "providerName": "Tencent",
        "providerType": "tencent",
        "sorted": 8,
    },
    "moonshot": {
        "id": "moonshot",
        "providerName": "Moonshot",
        "providerType": "moonshot",
        "sorted": 9,
    },
    "iflytek": {
        "id": "iflytek",
        "providerName": "Iflytek",
        "providerType": "iflytek",
        "sorted": 10,
    },
    "xai": {
        "id": "xai",
        "providerName": "XAI",
        "providerType": "xai",
        "sorted": 11,
    },
    "chatglm": {
        "id": "chatglm",
        "providerName": "ChatGLM",
        "providerType": "chatglm",
        "sorted": 12,
    },
    "deepseek": {
        "id": "deepseek",
        "providerName": "DeepSeek",
        "providerType": "deepseek",
        "sorted": 13,
    },
    "siliconflow": {
        "id": "siliconflow",
        "providerName": "SiliconFlow",
        "providerType": "siliconflow",
        "sorted": 14,
    },
}


def create_model_descriptors(family: str, names: List[str], start: int = 1000) -> List[Dict[str, Any]]:
    """Create raw model descriptors for every name of a provider family."""
    if family not in PROVIDER_FAMILIES:
        raise ValueError(f"Unknown provider family: {family}")

    provider = PROVIDER_FAMILIES[family]
    return [
        {
            "name": name,
            "available": True,
            "sorted": start + index,
            "provider": dict(provider),
        }
        for index, name in enumerate(names)
    ]
