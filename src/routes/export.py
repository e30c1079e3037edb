"""
Export endpoints -- serialize a generated package for download.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from src.models.common import APIResponse
from src.models.generate import ExportArchiveRequest, ExportFileRequest, GistRequest
from src.services.export_service import (
    ARCHIVE_FILENAME,
    ExportError,
    build_archive,
    build_gist_payload,
    export_section,
)

router = APIRouter()


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.post("/archive")
async def export_archive(req: ExportArchiveRequest):
    """ZIP package with script, tests, Dockerfile, workflow and README."""
    try:
        content = build_archive(req.result, req.language, req.script_type)
    except ExportError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return Response(content=content, media_type="application/zip", headers=_attachment(ARCHIVE_FILENAME))


@router.post("/file/{section}")
async def export_file(section: str, req: ExportFileRequest):
    """Single section as a plain-text download."""
    try:
        filename, content = export_section(req.result, section, req.language)
    except ExportError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(content=content, media_type="text/plain; charset=utf-8", headers=_attachment(filename))


@router.post("/gist", response_model=APIResponse)
async def export_gist(req: GistRequest):
    """GitHub gist payload (JSON body for POST /gists)."""
    if not req.result.script:
        raise HTTPException(status_code=400, detail="Nothing to export: script is empty")
    return APIResponse(success=True, data=build_gist_payload(req.result, req.description, req.language))
