"""
OpenAI Realtime ephemeral session endpoint.

Mints a short-lived client secret so browsers and apps can open a realtime
voice session without ever seeing the long-lived API key. The session is
created with Kira's composed persona as its instructions.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from persona import PersonaComposer
from settings import Settings
from upstream import UpstreamClient
from ..dependencies import get_composer, get_settings, get_upstream
from ..exceptions import ConfigMissingError

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/realtime-ephemeral")
async def realtime_ephemeral(
    voice: Optional[str] = None,
    model: Optional[str] = None,
    spice: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    composer: PersonaComposer = Depends(get_composer),
    upstream: UpstreamClient = Depends(get_upstream),
):
    """Create a realtime session and relay its client secret"""
    if not settings.realtime_configured:
        raise ConfigMissingError("Missing OPENAI_API_KEY env var")

    voice = voice or settings.default_voice
    model = model or settings.default_model
    instructions = composer.compose(spice)

    logger.debug(f"Minting realtime session: model={model} voice={voice} instructions={len(instructions)} chars")
    session = await upstream.create_realtime_session(model=model, voice=voice, instructions=instructions)

    # Shape: { client_secret: { value: "<ephemeral-token>", expires_at: ... } }
    return {"client_secret": session.get("client_secret")}
