"""AI provider clients.

Both providers expose the same small surface, ``generate(prompt, ...) -> str``,
so the optimization, insights and cover letter services never talk to a vendor
SDK directly. Providers are constructed per request by ``get_llm`` and passed
in, which keeps the services testable with fakes.
"""
import logging
from typing import Optional

from google import genai
from google.genai import types
from openai import OpenAI

from smartresume.core.config import Settings, settings as default_settings
from smartresume.core.exceptions import AIProviderError

logger = logging.getLogger(__name__)


class LLMProvider:
    """Interface shared by the provider implementations."""

    name = "base"

    def generate(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        json_output: bool = False,
        temperature: float = 0.7,
    ) -> str:
        raise NotImplementedError


class GeminiProvider(LLMProvider):
    name = "gemini"

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", timeout_seconds: float = 60.0):
        self.model = model
        # google-genai takes the HTTP timeout in milliseconds
        self.client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
        )

    def generate(self, prompt, *, system=None, json_output=False, temperature=0.7):
        config = types.GenerateContentConfig(
            temperature=temperature,
            system_instruction=system,
            response_mime_type="application/json" if json_output else None,
        )
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
            return response.text or ""
        except Exception as e:
            raise AIProviderError(f"Gemini request failed: {e}") from e


class OpenAIProvider(LLMProvider):
    name = "openai"

    def __init__(self, api_key: str, model: str = "gpt-4o", timeout_seconds: float = 60.0):
        self.model = model
        # No retries: every failure is reported once, immediately
        self.client = OpenAI(api_key=api_key, timeout=timeout_seconds, max_retries=0)

    def generate(self, prompt, *, system=None, json_output=False, temperature=0.7):
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs = {}
        if json_output:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                **kwargs,
            )
            return response.choices[0].message.content or ""
        except Exception as e:
            raise AIProviderError(f"OpenAI request failed: {e}") from e


class UnconfiguredProvider(LLMProvider):
    """Stands in when the selected provider has no API key; every call fails as a provider error."""

    name = "unconfigured"

    def __init__(self, reason: str):
        self.reason = reason

    def generate(self, prompt, *, system=None, json_output=False, temperature=0.7):
        raise AIProviderError(self.reason)


def get_llm(config: Optional[Settings] = None) -> LLMProvider:
    """
    Factory function to create the configured provider.
    Centralized so services and endpoints never create SDK clients directly.

    A missing API key does not fail here: endpoints that never call the model
    keep working and the failure surfaces on the first generate() call.
    """
    config = config or default_settings

    if config.AI_PROVIDER == "openai":
        if not config.OPENAI_API_KEY:
            logger.warning("AI_PROVIDER is openai but OPENAI_API_KEY is not set")
            return UnconfiguredProvider("OPENAI_API_KEY is not configured")
        return OpenAIProvider(
            api_key=config.OPENAI_API_KEY,
            model=config.OPENAI_MODEL,
            timeout_seconds=config.AI_TIMEOUT_SECONDS,
        )

    if not config.GOOGLE_API_KEY:
        logger.warning("AI_PROVIDER is gemini but GOOGLE_API_KEY is not set")
        return UnconfiguredProvider("GOOGLE_API_KEY is not configured")
    return GeminiProvider(
        api_key=config.GOOGLE_API_KEY,
        model=config.GEMINI_MODEL,
        timeout_seconds=config.AI_TIMEOUT_SECONDS,
    )
