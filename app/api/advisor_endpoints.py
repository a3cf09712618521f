"""
Advisor API endpoints - chat with the local guide persona
"""
from typing import List
from fastapi import APIRouter, Depends

from app.core.dependencies import get_advisor
from app.models.api_models import Envelope
from app.schemas.guide import ChatMessage, ChatRequest
from app.services.advisor_service import AdvisorService

router = APIRouter(prefix="/advisor", tags=["advisor"])


@router.post("/chat", response_model=Envelope[List[ChatMessage]])
async def chat(
    body: ChatRequest,
    advisor: AdvisorService = Depends(get_advisor),
):
    """
    Ask the advisor a question

    Returns the exchange as two messages: the user's prompt and the
    advisor's Markdown answer. A failed request still answers, with a
    fallback message.
    """
    reply = await advisor.ask(body.prompt)
    return Envelope(
        status="ok",
        data=[
            ChatMessage(role="user", text=body.prompt),
            ChatMessage(role="model", text=reply),
        ],
    )
