from .gemini import GeminiProvider
from .groq import GroqProvider
from .openai import OpenAIProvider

__all__ = ["GeminiProvider", "GroqProvider", "OpenAIProvider"]
