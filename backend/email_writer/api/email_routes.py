from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from email_writer.config import Settings
from email_writer.models.email_models import EmailRequest
from email_writer.services.email_service import EmailReplyService
from email_writer.utils.dependencies import get_email_service, get_settings

router = APIRouter()


@router.post("/generate", response_class=PlainTextResponse)
async def generate_email_reply(
    req: EmailRequest,
    service: EmailReplyService = Depends(get_email_service),
    settings: Settings = Depends(get_settings),
):
    """
    Generate a reply to the given email.

    Failures come back in the body as "Error: ..." with status 200,
    unless surface_error_status is enabled (then 502).
    """
    result = await service.generate_reply(req)
    status_code = 200
    if not result.ok and settings.surface_error_status:
        status_code = 502
    return PlainTextResponse(result.as_text(), status_code=status_code)
