"""
Text-generation provider client
- OpenAI-compatible /chat/completions (Groq by default)
- one request per call, no automatic retry
- every provider/network failure surfaces as LLMTransportError
"""
from typing import Optional

import httpx

from src.config import config
from src.utils.logger import logger


class LLMTransportError(Exception):
    """Raised when the provider call fails outright (network, auth, rate limit, bad body)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LLMClient:
    """Async client for a single system+user chat completion."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        temperature: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = config.LLM_API_KEY if api_key is None else api_key
        self.base_url = (base_url or config.LLM_BASE_URL).rstrip("/")
        self.timeout = config.LLM_TIMEOUT if timeout is None else timeout
        self.temperature = config.LLM_TEMPERATURE if temperature is None else temperature
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, system_prompt: str, user_prompt: str, model: str) -> str:
        """
        Returns the first choice's message content, or "" when the provider sent none.
        Raises LLMTransportError for anything that is not a usable 2xx JSON body.
        """
        if not self.is_configured:
            raise LLMTransportError("LLM API key is not configured")

        payload = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.temperature,
        }

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            ) as client:
                response = await client.post(
                    "/chat/completions",
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "content-type": "application/json",
                    },
                    json=payload,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"Provider returned HTTP {status} for model={model}")
            raise LLMTransportError(f"Provider request failed ({status})", status_code=status) from e
        except httpx.TimeoutException as e:
            raise LLMTransportError(f"Provider request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise LLMTransportError(f"Provider connection error: {e}") from e
        except ValueError as e:
            raise LLMTransportError("Provider returned a non-JSON body") from e

        return self._extract_content(data)

    @staticmethod
    def _extract_content(data) -> str:
        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            return ""
        if not isinstance(choices, list) or not isinstance(choices[0], dict):
            raise LLMTransportError("Provider returned an unexpected body")
        message = choices[0].get("message") or {}
        if not isinstance(message, dict):
            raise LLMTransportError("Provider returned an unexpected body")
        content = message.get("content") or ""
        if not isinstance(content, str):
            raise LLMTransportError("Provider returned an unexpected body")
        return content
