"""
Health check and banner endpoints.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

BANNER = "DecipherAlgo Realtime server active. /health • /realtime-ephemeral • /tiktok/login"


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Plain-text banner listing the main routes"""
    return BANNER


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"ok": True}
