"""
AI-powered script generator.
Turns a GenerationRequest into a GenerationResult: build prompts, call the provider once, parse.

Faults are split in two so the caller can tell them apart:
- EngineFaultError: the provider call itself failed
- EmptyResultError: the call worked but produced nothing usable
"""

from typing import Optional

from src.config import config
from src.models.script import GenerationRequest, GenerationResult
from src.services.llm_client import LLMClient, LLMTransportError
from src.services.parser_service import parse_model_response
from src.services.prompt_service import SYSTEM_INSTRUCTION, build_user_prompt
from src.utils.logger import logger


class GenerationError(Exception):
    code = "GENERATION_FAILED"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EngineFaultError(GenerationError):
    code = "ENGINE_FAULT"


class EmptyResultError(GenerationError):
    code = "EMPTY_RESULT"


ENGINE_FAULT_MESSAGE = "Failed to engineer script module. The engine encountered a verification fault."
EMPTY_RESPONSE_MESSAGE = "The engine returned an empty response."
EMPTY_SCRIPT_MESSAGE = "Script generation failed to produce a valid code block."


async def generate_script(
    request: GenerationRequest,
    client: Optional[LLMClient] = None,
    model: Optional[str] = None,
) -> GenerationResult:
    """
    Generate a script package from a request.
    Raises EngineFaultError or EmptyResultError; never returns a result without a script.
    """
    client = client or LLMClient()
    model = model or config.MODEL_NAME

    try:
        text = await client.generate(SYSTEM_INSTRUCTION, build_user_prompt(request), model)
    except LLMTransportError as e:
        logger.error(f"Provider call failed: {e}", exc_info=True)
        raise EngineFaultError(ENGINE_FAULT_MESSAGE) from e

    if not text or not text.strip():
        logger.warning(f"Provider returned empty text: model={model}")
        raise EmptyResultError(EMPTY_RESPONSE_MESSAGE)

    result = parse_model_response(text)
    if not result.script:
        logger.warning(f"No script section recovered from {len(text)} chars of output")
        raise EmptyResultError(EMPTY_SCRIPT_MESSAGE)

    logger.info(
        f"Generation success: language={request.language.value}, "
        f"script_chars={len(result.script)}, failures={len(result.failure_simulations)}, "
        f"time_saved={result.metrics.time_saved_minutes}"
    )
    return result
