"""
Runtime persona endpoints: merge sections, clear them, inspect the result.
"""
import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from persona import PersonaComposer
from ..dependencies import get_composer
from ..models import PersonaClearResponse, PersonaMergeResponse, PersonaSnapshotResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/persona", tags=["persona"])


async def read_json_body(request: Request) -> dict:
    """Parse the body leniently; anything that is not a JSON object is empty"""
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Ignoring non-JSON persona merge body")
        return {}
    return body if isinstance(body, dict) else {}


@router.post("/merge", response_model=PersonaMergeResponse)
async def merge_persona(request: Request, composer: PersonaComposer = Depends(get_composer)):
    """Append sections to the runtime persona; malformed entries are dropped"""
    body = await read_json_body(request)
    result = composer.merge(body.get("sections"))
    return PersonaMergeResponse(mergedCount=result.merged_count, totalSections=result.total_sections)


@router.post("/clear", response_model=PersonaClearResponse)
async def clear_persona(composer: PersonaComposer = Depends(get_composer)):
    """Drop every runtime section"""
    return PersonaClearResponse(totalSections=composer.clear())


@router.get("", response_model=PersonaSnapshotResponse)
async def persona_snapshot(spice: Optional[str] = None, composer: PersonaComposer = Depends(get_composer)):
    """Debug snapshot of the current persona"""
    snapshot = composer.snapshot(spice)
    return PersonaSnapshotResponse(
        spice=snapshot["spice"],
        spicePolicy=snapshot["spice_policy"],
        hasStaticPersona=snapshot["has_static_persona"],
        totalSections=snapshot["total_sections"],
        sectionTitles=snapshot["section_titles"],
        instructionsLength=snapshot["instructions_length"],
        preview=snapshot["preview"],
    )
