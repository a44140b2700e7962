"""
Capability snapshot model.

Capabilities are derived from a model identifier on demand; this model only
carries the result of one classification so callers can pass it around.
"""

from pydantic import BaseModel, Field, ConfigDict


class ModelCapabilities(BaseModel):
    """Capabilities of a model identifier, as decided by the classifier."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    model: str = Field(..., description="Model identifier the flags were computed for")
    vision: bool = Field(False, description="Accepts image inputs")
    function_call: bool = Field(False, description="Tool/function calling support")
    rag: bool = Field(False, description="Retrieval-augmented context can be requested")
    claude_thinking: bool = Field(False, description="Anthropic extended thinking mode")
    image_generation: bool = Field(False, description="Generates images in chat responses")
    dalle3: bool = Field(False, description="Is the DALL-E 3 image model")
