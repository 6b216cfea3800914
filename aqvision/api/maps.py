"""Redirect to the Google Maps script so the browser never embeds the key."""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from aqvision.api.dependencies import Upstreams, get_upstreams
from aqvision.core import credentials as keys
from aqvision.core.maps import maps_script_url

router = APIRouter(tags=["maps"])


@router.get("/maps")
async def maps_script(upstreams: Upstreams = Depends(get_upstreams)):
    url = maps_script_url(
        upstreams.maps_script_url, upstreams.credentials.value(keys.GOOGLE_MAPS)
    )
    return RedirectResponse(url, status_code=302)
