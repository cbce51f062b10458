"""Ticket check endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from xoso_checker.api.deps import get_db
from xoso_checker.schemas.lottery import CheckRequest, CheckResponse
from xoso_checker.services.errors import CheckError
from xoso_checker.services.lottery_service import check_ticket

router = APIRouter()


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = CheckResponse(success=False, error_code=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@router.post("", response_model=CheckResponse)
async def check_endpoint(
    request: CheckRequest,
    db: AsyncSession = Depends(get_db),
):
    """Dò vé số: tra kết quả của đài/ngày và so khớp với số vé."""
    try:
        return await check_ticket(
            db, request.ticket_number, request.station_code, request.draw_date
        )
    except CheckError as e:
        return _error_response(e.status_code, e.code, e.message)
    except Exception as e:
        logger.exception("Check API error: {}", e)
        return _error_response(500, "DB_ERROR", "Đã xảy ra lỗi. Vui lòng thử lại.")
