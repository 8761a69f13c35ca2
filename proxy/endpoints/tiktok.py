"""
TikTok OAuth login/callback and pass-through API helpers.
"""
import html
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from oauth import TikTokOAuth, TokenPair, mask_token
from upstream import UpstreamClient, UpstreamError
from ..dependencies import get_tiktok_oauth, get_upstream
from ..exceptions import ClientInputError, upstream_body_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tiktok", tags=["tiktok"])

CONNECTED_PAGE = """
<html>
  <body style="font-family: -apple-system, system-ui; padding: 24px;">
    <h2>TikTok Connected ✅</h2>
    <p>Access Token: <code>{access_token}</code></p>
    <p>Refresh Token: <code>{refresh_token}</code></p>
    <p>You can close this tab and return to the app.</p>
  </body>
</html>
"""


def render_connected_page(tokens: TokenPair) -> str:
    """Confirmation page; only masked token previews are rendered"""
    return CONNECTED_PAGE.format(
        access_token=html.escape(mask_token(tokens.access_token)),
        refresh_token=html.escape(mask_token(tokens.refresh_token)),
    )


def require_access_token(access_token: Optional[str]) -> str:
    if not access_token:
        raise ClientInputError("Missing access_token")
    return access_token


@router.get("/login")
async def login(oauth: TikTokOAuth = Depends(get_tiktok_oauth)):
    """Step 1: redirect the user to TikTok's consent screen"""
    authorize_url = oauth.start_login()
    logger.info("Redirecting to TikTok consent screen")
    return RedirectResponse(authorize_url, status_code=302)


@router.get("/callback")
async def callback(
    code: Optional[str] = None,
    state: Optional[str] = None,
    oauth: TikTokOAuth = Depends(get_tiktok_oauth),
):
    """Step 2: TikTok redirects back with ?code=&state="""
    try:
        tokens = await oauth.handle_callback(code, state)
    except UpstreamError as e:
        logger.error(f"TikTok token exchange failed with HTTP {e.status_code}")
        return upstream_body_response(500, e.body)

    return HTMLResponse(render_connected_page(tokens))


@router.get("/me")
async def me(
    access_token: Optional[str] = None,
    upstream: UpstreamClient = Depends(get_upstream),
):
    """Basic profile of the user owning the bearer token"""
    return await upstream.get_user_info(require_access_token(access_token))


@router.get("/videos")
async def videos(
    access_token: Optional[str] = None,
    cursor: str = "0",
    upstream: UpstreamClient = Depends(get_upstream),
):
    """One page of the user's video listing"""
    return await upstream.list_videos(require_access_token(access_token), cursor=cursor)
