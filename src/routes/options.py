from fastapi import APIRouter

from src.models.common import APIResponse
from src.models.script import Environment, GenerationRequest, Language, SafetyLevel, ScriptType

router = APIRouter()

# Allowed values for each categorical request field, in display order
OPTIONS = {
    "languages": [item.value for item in Language],
    "environments": [item.value for item in Environment],
    "safety_levels": [item.value for item in SafetyLevel],
    "script_types": [item.value for item in ScriptType],
}


def _defaults() -> dict:
    fields = GenerationRequest.model_fields
    return {
        name: (f.default.value if hasattr(f.default, "value") else f.default)
        for name, f in fields.items()
        if name != "description"
    }


@router.get("/", response_model=APIResponse)
async def list_options():
    """Form options and defaults for a generation request."""
    return APIResponse(success=True, data={**OPTIONS, "defaults": _defaults()})
