"""Prompt rendering and token hint"""

import math
from collections.abc import Sequence

# Instruction text is always Spanish, whatever the `language` option says.
TONE_INSTRUCTIONS = {
    "friendly": "amistoso y cálido",
    "professional": "profesional y formal",
    "casual": "relajado y casual",
}

CHARS_PER_TOKEN = 4

_TEMPLATE = """TAREA: Generar un resumen {tone} de reseñas de clientes.

RESEÑAS A RESUMIR:
{reviews}{context}

REGLAS ESTRICTAS:
1. Genera ÚNICAMENTE un resumen conciso de las reseñas proporcionadas
2. NO agregues saludos, despedidas o comentarios adicionales
3. NO incluyas información que no esté en las reseñas originales
4. Mantén un tono {tone}
5. Máximo {max_characters} caracteres
6. Enfócate en los puntos más mencionados por los clientes
7. Si hay críticas, preséntalas de manera constructiva
8. Usa lenguaje claro y directo
9. Responde SOLO con el resumen, sin texto adicional

RESUMEN:"""


def build_prompt(
    reviews: Sequence[str],
    tone: str,
    max_characters: int,
    context: str | None = None,
) -> str:
    """Render the instruction prompt. Raises KeyError for an unknown tone."""
    tone_text = TONE_INSTRUCTIONS[tone]
    context_text = f"\nContexto adicional: {context}" if context else ""
    return _TEMPLATE.format(
        tone=tone_text,
        reviews="\n\n".join(reviews),
        context=context_text,
        max_characters=max_characters,
    )


def estimate_max_tokens(max_characters: int) -> int:
    """Rough output-length hint: ~4 characters per token, rounded up."""
    return math.ceil(max_characters / CHARS_PER_TOKEN)
