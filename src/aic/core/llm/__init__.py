"""LLM integration module for aic."""

from .factory import PROVIDER_TYPES, AICProvider, ProviderType, create_adapter
from .prompts import Prompt

__all__ = ["AICProvider", "PROVIDER_TYPES", "Prompt", "ProviderType", "create_adapter"]
