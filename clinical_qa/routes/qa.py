"""QA analysis API routes"""
import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from ..analyzer import QaAnalyzer
from ..config import settings
from ..formatting import generate_qa_summary
from ..models import MODALITIES, QaReport
from ..storage import MinIOReportStore, ReportNotFoundError, ReportStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/qa", tags=["QA"])


@lru_cache()
def get_analyzer() -> QaAnalyzer:
    return QaAnalyzer()


@lru_cache()
def get_report_store() -> ReportStore:
    return MinIOReportStore(settings)


@router.post("/analyze", response_model=QaReport)
async def analyze_upload(
    file: UploadFile = File(...),
    modality: Optional[str] = Form(None),
    upload_id: Optional[str] = Form(None),
    analyzer: QaAnalyzer = Depends(get_analyzer),
    store: ReportStore = Depends(get_report_store)
):
    """Analyze an uploaded CSV file and optionally store the report"""
    if modality and modality not in MODALITIES:
        raise HTTPException(
            status_code=422,
            detail=f"Unsupported modality: {modality}. Supported: {', '.join(MODALITIES)}"
        )

    data = await file.read()
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File is too large: {len(data)} bytes (maximum: {settings.MAX_UPLOAD_BYTES} bytes)"
        )

    report = analyzer.analyze_file(file.filename or "upload.csv", data, modality)

    if upload_id:
        try:
            store.save_report(upload_id, report)
        except Exception as e:
            logger.exception(f"Failed to store QA report for upload {upload_id}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Failed to store QA report: {str(e)}"
            )

    return report


@router.get("/reports/{upload_id}", response_model=QaReport)
async def get_report(upload_id: str, store: ReportStore = Depends(get_report_store)):
    """Fetch the stored report of an upload"""
    try:
        return store.load_report(upload_id)
    except ReportNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/reports/{upload_id}/summary")
async def get_report_summary(upload_id: str, store: ReportStore = Depends(get_report_store)):
    """One-line summary of the stored report of an upload"""
    try:
        report = store.load_report(upload_id)
    except ReportNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"upload_id": upload_id, "isValid": report.isValid, "summary": generate_qa_summary(report)}
