"""Token savings estimate for TOON vs compact JSON."""

from typing import Any

from toonbridge.codec.encoder import ToonEncoder
from toonbridge.codec.json_text import dumps

# Rough approximation used throughout: ~4 characters per token
CHARS_PER_TOKEN = 4


def estimate_token_savings(data: Any, encoder: ToonEncoder | None = None) -> dict[str, Any]:
    """Estimate token savings from using TOON vs JSON.

    Args:
        data: A JSON array of objects.
        encoder: Optional ToonEncoder instance.

    Returns:
        Dict with json_tokens, toon_tokens, savings_percent, and recommendation.
        If the data cannot be encoded, a dict with ``error`` and a ``json``
        recommendation.
    """
    if encoder is None:
        encoder = ToonEncoder()

    try:
        toon_str = encoder.encode(data)
        json_str = dumps(data)
    except Exception as e:
        return {
            "error": str(e),
            "recommendation": "json",
        }

    json_tokens = len(json_str) // CHARS_PER_TOKEN
    toon_tokens = len(toon_str) // CHARS_PER_TOKEN

    savings_percent = (
        (json_tokens - toon_tokens) / json_tokens * 100 if json_tokens > 0 else 0
    )

    recommendation = (
        "toon" if savings_percent >= 20 else "json" if savings_percent < 10 else "either"
    )

    return {
        "json_tokens": json_tokens,
        "toon_tokens": toon_tokens,
        "savings_percent": round(savings_percent, 1),
        "recommendation": recommendation,
        "json_chars": len(json_str),
        "toon_chars": len(toon_str),
    }
