"""LLM client implementations for E-Pay Pro."""

from epay_pro.clients.gemini import GeminiClient

__all__ = ["GeminiClient"]
