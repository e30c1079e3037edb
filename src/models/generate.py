from pydantic import BaseModel, Field

from src.models.script import GenerationResult, Language, ScriptType


class ParseRequest(BaseModel):
    text: str = Field(min_length=1, max_length=200_000)


class ExportFileRequest(BaseModel):
    result: GenerationResult
    language: Language = Language.PYTHON


class ExportArchiveRequest(ExportFileRequest):
    script_type: ScriptType = ScriptType.AUTOMATION


class GistRequest(ExportFileRequest):
    description: str = Field(min_length=1, max_length=4000)
