"""Google Maps JavaScript loader URL, keeping the key out of the front-end bundle."""

from urllib.parse import quote

MAPS_LIBRARIES = "places,drawing,geometry"


def maps_script_url(base_url: str, api_key: str) -> str:
    return (
        f"{base_url}?key={quote(api_key, safe='')}"
        f"&libraries={quote(MAPS_LIBRARIES, safe=',')}&v=weekly"
    )
