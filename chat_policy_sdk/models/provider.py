from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class ServiceProvider(str, Enum):
    """Backend vendor families a model can be served by."""
    OPENAI = "OpenAI"
    AZURE = "Azure"
    GOOGLE = "Google"
    ANTHROPIC = "Anthropic"
    BAIDU = "Baidu"
    BYTEDANCE = "ByteDance"
    ALIBABA = "Alibaba"
    TENCENT = "Tencent"
    MOONSHOT = "Moonshot"
    STABILITY = "Stability"
    IFLYTEK = "Iflytek"
    XAI = "XAI"
    CHATGLM = "ChatGLM"
    DEEPSEEK = "DeepSeek"
    SILICONFLOW = "SiliconFlow"

    @property
    def id(self) -> str:
        """Registry provider id (e.g. "google")."""
        return self.value.lower()

    @classmethod
    def from_id(cls, provider_id: Optional[str]) -> Optional["ServiceProvider"]:
        """Map a registry provider id or display name to a member; None if unknown."""
        if not provider_id:
            return None
        key = provider_id.strip().lower()
        for member in cls:
            if member.id == key:
                return member
        return None


class ProviderInfo(BaseModel):
    """Provider block of a registry entry."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: str
    provider_name: str = Field("", alias="providerName")
    provider_type: str = Field("", alias="providerType")
    sorted: int = 0


class ModelDescriptor(BaseModel):
    """A known model and the provider serving it."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    name: str
    available: bool = True
    sorted: int = 0
    provider: ProviderInfo

    @property
    def service_provider(self) -> Optional[ServiceProvider]:
        return ServiceProvider.from_id(self.provider.id)
