from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """One turn of a conversation as sent to the provider."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who wrote the turn")
    content: str = Field(description="Turn text")


class LLMResponse(BaseModel):
    """Provider answer to a chat-completion request."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Reply text, empty when the provider returned none")
    model: str = Field(description="Model that answered")
    usage: dict[str, int] | None = Field(
        default=None,
        description="prompt/completion/total token counts when reported"
    )
