from __future__ import annotations

import base64
import binascii
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from linktrade.errors import BAD_ATTACHMENT_ENCODING, TradeError
from linktrade.models import Advisory, IntakeResult, PokeRoutineType, Rejected, serialize_entity
from linktrade.pipeline import TradeIntakePipeline
from linktrade.interfaces import TradeQueue


# -------------------------------------------------------------------------
# Pydantic 모델 정의
# -------------------------------------------------------------------------
class TradeTextRequest(BaseModel):
    content: str
    requester_name: str
    code: Optional[int] = None
    is_privileged: bool = False


class TradeAttachmentRequest(BaseModel):
    data: str  # base64 로 인코딩된 첨부 파일
    requester_name: str
    code: Optional[int] = None
    is_privileged: bool = False


# -------------------------------------------------------------------------
# 응답 헬퍼
# -------------------------------------------------------------------------
def _trade_error_response(error: TradeError) -> JSONResponse:
    payload = {
        "ok": False,
        "error": {
            "code": error.code,
            "message": error.message,
            "details": error.details,
        },
    }
    return JSONResponse(status_code=400, content=payload)


def _intake_response(result: IntakeResult):
    if isinstance(result, Rejected):
        return _trade_error_response(result.error)
    if isinstance(result, Advisory):
        return JSONResponse(
            status_code=422,
            content={
                "ok": False,
                "message": result.message,
                "error": {"code": result.error.code, "message": result.error.message},
                "advisory": serialize_entity(result.entity),
            },
        )
    return {
        "ok": True,
        "code": result.request.code,
        "message": result.admission.message,
        "position": result.admission.position,
    }


def create_app(pipeline: TradeIntakePipeline, queue: TradeQueue) -> FastAPI:
    app = FastAPI(title="Link Trade Intake")

    # -------------------------------------------------------------------------
    # 트레이드 API
    # -------------------------------------------------------------------------
    @app.post("/api/trade/text")
    async def api_trade_text(req: TradeTextRequest):
        result = pipeline.submit_text(
            req.content,
            req.requester_name,
            code=req.code,
            is_privileged=req.is_privileged,
        )
        return _intake_response(result)

    @app.post("/api/trade/attachment")
    async def api_trade_attachment(req: TradeAttachmentRequest):
        try:
            blob = base64.b64decode(req.data, validate=True)
        except (binascii.Error, ValueError):
            return _trade_error_response(
                TradeError(BAD_ATTACHMENT_ENCODING, "Attachment data must be base64")
            )
        result = pipeline.submit_attachment(
            blob,
            req.requester_name,
            code=req.code,
            is_privileged=req.is_privileged,
        )
        return _intake_response(result)

    @app.get("/api/trade/list")
    async def api_trade_list():
        return {"ok": True, "pending": queue.describe_pending(PokeRoutineType.LINK_TRADE)}

    return app
