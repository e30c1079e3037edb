from typing import Any, Optional

from pydantic import BaseModel


class APIResponse(BaseModel):
    """Envelope shared by every JSON endpoint."""

    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error: Optional[str] = None
