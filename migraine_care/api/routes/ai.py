"""
Migraine Care — AI Routes

POST /ai/consult     — проста схема
POST /ia/consultar   — клінічна схема
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from ..dependencies import get_consultant
from ...schemas import SessionKPIs
from ...services import AIConsultant

router = APIRouter(tags=["AI"])


@router.post("/ai/consult")
async def consult(
    session: Dict[str, Any] = Body(...),
    consultant: AIConsultant = Depends(get_consultant),
) -> dict:
    """
    Консультація DeepSeek + OpenAI за KPI сесії.

    Відповідь:
    ```json
    {
        "deepseek": "текст аналізу",
        "openai": {"error": true, "message": "..."}
    }
    ```
    """
    try:
        kpis = SessionKPIs.model_validate(session.get("kpis") or {})
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"kpis: {e.errors()[0]['msg']}") from e
    report = await run_in_threadpool(consultant.consult, kpis)
    return report.to_payload()


@router.post("/ia/consultar")
async def consult_clinical(
    payload: Dict[str, Any] = Body(...),
    consultant: AIConsultant = Depends(get_consultant),
) -> dict:
    """
    Консультація для клінічної сесії.

    Відповідь: {"ia1": {"diagnostico", "tratamiento", "confianza"}, "ia2": {...}}
    """
    try:
        result = await run_in_threadpool(consultant.consult_clinical, payload)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"kpis: {e.errors()[0]['msg']}") from e
    return result.to_payload()
