from typing import Dict

from fastapi import Response

CORS_PROFILES: Dict[str, Dict[str, str]] = {
    "standard": {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    },
    # Wider set for browsers that send framework headers on the preflight
    "extended": {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
        "Access-Control-Allow-Headers": (
            "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
            "Content-MD5, Content-Type, Date, X-Api-Version"
        ),
    },
}


def cors_headers(profile: str) -> Dict[str, str]:
    try:
        return dict(CORS_PROFILES[profile.strip().lower()])
    except KeyError:
        raise ValueError(f"Unknown CORS profile: {profile!r}") from None


def apply_cors(response: Response, profile: str) -> Response:
    response.headers.update(cors_headers(profile))
    return response
