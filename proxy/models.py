"""
Pydantic models for the persona endpoints.
"""
from typing import List, Optional
from pydantic import BaseModel


class PersonaMergeResponse(BaseModel):
    ok: bool = True
    mergedCount: int
    totalSections: int


class PersonaClearResponse(BaseModel):
    ok: bool = True
    totalSections: int = 0


class PersonaSnapshotResponse(BaseModel):
    """Debug view of the persona state"""
    spice: Optional[int] = None
    spicePolicy: str
    hasStaticPersona: bool
    totalSections: int
    sectionTitles: List[str]
    instructionsLength: int
    preview: str
