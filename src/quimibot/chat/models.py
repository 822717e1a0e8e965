"""Display-side models for the chat panel."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DisplayRole = Literal["user", "bot"]

WELCOME_MESSAGE = (
    "¡Hola! Soy **QuimiBot** ⚗️ Tu asistente de química universitaria.\n"
    "Puedo explicarte cualquier elemento, comparar dos entre sí, o ayudarte "
    "con ejercicios. ¿Por dónde empezamos?"
)

MISSING_KEY_MESSAGE = (
    "Para activar QuimiBot, configura **{env_var}** en `.env` con la API key "
    "de tu proveedor."
)

ERROR_TEMPLATE = (
    "❌ **Error:** `{message}`\n\n"
    "*Si el error es de cuota, espera un momento y vuelve a intentar.*"
)


class DisplayMessage(BaseModel):
    """One bubble in the chat transcript."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Identifier unique within one panel")
    role: DisplayRole
    text: str


class QuickAction(BaseModel):
    """Canned question offered as a one-click button."""

    model_config = ConfigDict(frozen=True)

    icon: str
    label: str
    prompt: str


QUICK_ACTIONS: tuple[QuickAction, ...] = (
    QuickAction(
        icon="⚗️",
        label="Explícame",
        prompt="Explícame las propiedades más importantes y datos curiosos de este elemento",
    ),
    QuickAction(
        icon="⚖️",
        label="Similitudes",
        prompt="¿Con qué elementos es más similar y cuáles son las diferencias clave?",
    ),
    QuickAction(
        icon="🧪",
        label="Quiz",
        prompt="Dame un ejercicio universitario sobre este elemento o la tabla periódica",
    ),
    QuickAction(
        icon="🏭",
        label="Industria",
        prompt="¿Cuáles son los principales usos industriales y aplicaciones modernas?",
    ),
)
