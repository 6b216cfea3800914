"""AI summary endpoint backed by Gemini, with a demo fallback."""

import logging
from typing import Optional
from fastapi import APIRouter, Depends

from aqvision.api.dependencies import get_gemini_client
from aqvision.core.errors import GatewayError, InternalFault
from aqvision.core.llm_client import GeminiClient
from aqvision.models.summary import SummaryRequest, SummaryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["summary"])


@router.post("/gemini", response_model=SummaryResponse)
async def gemini_summary(
    summary_request: Optional[SummaryRequest] = None,
    client: GeminiClient = Depends(get_gemini_client),
):
    """
    Generates a summary for the prompt. Answers with canned demo text when no
    Gemini key is configured rather than failing.
    """
    summary_request = summary_request or SummaryRequest()
    try:
        text = await client.summarize(
            summary_request.prompt, summary_request.system_instruction
        )
        return SummaryResponse(text=text)
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"Gemini proxy error: {e}", exc_info=True)
        raise InternalFault(str(e))
