from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.reports import ExportRequest, ProfitReportExportRequest
from app.services import export_service

router = APIRouter(prefix="/exports", tags=["exports"])
logger = get_logger(module="exports")


def _attachment(content: bytes, filename: str, media_type: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/data")
def export_data(
    request: ExportRequest,
    db: Session = Depends(get_db),
):
    try:
        content = export_service.export_data(
            db=db,
            format=request.format,
            entity_type=request.entity_type,
            filters=request.filters,
        )
    except AppError as exc:
        logger.warning(
            "Exportación rechazada",
            entity_type=request.entity_type,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info(
        "Exportación servida",
        entity_type=request.entity_type,
        format=request.format.value,
    )

    return _attachment(
        content,
        export_service.export_filename(request.entity_type, request.format),
        export_service.MEDIA_TYPES[request.format],
    )


@router.post("/profit-report")
def export_profit_report(
    request: ProfitReportExportRequest,
    db: Session = Depends(get_db),
):
    content = export_service.export_profit_report(
        db=db,
        format=request.format,
        start_date=request.start_date,
        end_date=request.end_date,
    )

    logger.info(
        "Informe de beneficios exportado",
        format=request.format.value,
        start_date=str(request.start_date),
        end_date=str(request.end_date),
    )

    return _attachment(
        content,
        export_service.export_filename("profit_report", request.format),
        export_service.MEDIA_TYPES[request.format],
    )
