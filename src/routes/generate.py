"""
Script generation endpoints
- POST / -- natural-language request -> parsed script package (one provider call)
- POST /parse -- parse provider output that was captured elsewhere
"""

from fastapi import APIRouter

from src.models.common import APIResponse
from src.models.generate import ParseRequest
from src.models.script import GenerationRequest
from src.services.generate_service import GenerationError, generate_script
from src.services.parser_service import parse_model_response

router = APIRouter()


@router.post("/", response_model=APIResponse)
async def generate(req: GenerationRequest):
    """Generate script, tests, Dockerfile, CI workflow, failure simulations and metrics."""
    try:
        result = await generate_script(req)
        return APIResponse(success=True, data=result.model_dump())
    except GenerationError as e:
        return APIResponse(success=False, error=e.code, message=e.message)


@router.post("/parse", response_model=APIResponse)
async def parse(req: ParseRequest):
    """Run the response parser on raw provider text."""
    if not req.text.strip():
        return APIResponse(success=False, error="EMPTY_RESULT", message="Nothing to parse.")
    result = parse_model_response(req.text)
    return APIResponse(success=True, data=result.model_dump())
