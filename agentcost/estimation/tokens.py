"""
Unit conversion: character counts to token counts per language, tokens to USD.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from agentcost.estimation.data_model import Language

# Tokens per character. Japanese uses the conservative end of its 1.0-1.5 range.
TOKEN_CONVERSION_RATES: Mapping[str, float] = MappingProxyType(
    {
        "ja": 1.5,
        "en": 0.25,
        "mixed": 0.7,
    }
)

TOKENS_PER_PRICE_UNIT = 1_000_000


def round_half_up(value: float) -> int:
    # Half-up, not banker's rounding: 2.5 -> 3
    return int(math.floor(value + 0.5))


def tokens_from_chars(chars: float, language: Language) -> int:
    """
    Convert a character count to an estimated token count.

    Returns round(chars * rate[language]) with halves rounded up.
    chars=0 always yields 0.
    """
    return round_half_up(chars * TOKEN_CONVERSION_RATES[language])


def token_cost(tokens: float, price_per_m_tokens: float) -> float:
    """USD cost of tokens at a per-1M-token price."""
    return tokens / TOKENS_PER_PRICE_UNIT * price_per_m_tokens
