# app/routers/contact.py
import asyncio
import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from app.core.mailer import SmtpConfig, send_submission
from app.core.settings import get_settings, settings
from app.lib.contact_validation import Submission, validate_submission
from app.lib.cors import apply_cors

router = APIRouter(tags=["contact"])
log = logging.getLogger("uvicorn.error")

GENERIC_ERROR = "An error occurred while processing your request"


async def _read_payload(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        log.warning("[contact] request body is not valid JSON")
        return {}


def _server_error(detail: Optional[str], development: bool) -> JSONResponse:
    content = {"success": False, "message": GENERIC_ERROR}
    if development and detail:
        content["error"] = detail
    return JSONResponse(status_code=500, content=content)


async def handle_contact(request: Request, cors_profile: str) -> Response:
    if request.method == "OPTIONS":
        return apply_cors(Response(status_code=200), cors_profile)

    if request.method != "POST":
        return apply_cors(
            JSONResponse(status_code=405, content={"success": False, "message": "Method not allowed"}),
            cors_profile,
        )

    # Until the per-request config loads, fall back to the startup flag
    development = settings.is_development
    try:
        app_settings = get_settings()
        development = app_settings.is_development
        config = SmtpConfig.from_settings(app_settings)

        submission = Submission.from_payload(await _read_payload(request))
        log.info(f"[contact] Received form submission from {submission.email!r}")

        validation = validate_submission(submission)
        if not validation.valid:
            log.info(f"[contact] validation failed: {sorted(validation.errors)}")
            response = JSONResponse(
                status_code=400,
                content={"success": False, "message": "Validation error", "errors": validation.errors},
            )
            return apply_cors(response, cors_profile)

        result = await asyncio.to_thread(send_submission, submission, config)
        if not result.ok:
            log.error(f"[contact] relay failed ({result.failure.value}): {result.detail}")
            return apply_cors(_server_error(result.detail, development), cors_profile)
    except Exception as exc:
        log.exception("[contact] Error processing contact form")
        return apply_cors(_server_error(str(exc), development), cors_profile)

    return apply_cors(
        JSONResponse(status_code=200, content={"success": True, "message": "Form submitted successfully"}),
        cors_profile,
    )


# Plain routes with no method filter: every verb reaches the gate above.
async def contact(request: Request):
    return await handle_contact(request, settings.cors_profile)


async def contact_cors_fixed(request: Request):
    return await handle_contact(request, "extended")


router.add_route("/api/contact", contact)
router.add_route("/api/contact-cors-fixed", contact_cors_fixed)
