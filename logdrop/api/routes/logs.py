"""
Log submission, retrieval and management endpoints.

Paths mirror the device-facing contract:
- POST /api/logs/upload   multipart form, optional ``logfile`` attachment
- GET  /api/logs/read     decoded artifact content by logical path
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from loguru import logger
from pydantic import BaseModel

from logdrop.api.dependencies import get_services
from logdrop.application.dto.log_submission import LogSubmission
from logdrop.domain.errors import InvalidSubmissionError
from logdrop.domain.value_objects.log_filter import LogFilter
from logdrop.domain.value_objects.log_level import LogLevel
from logdrop.domain.value_objects.log_status import LogStatus
from logdrop.infrastructure.service_factory import LogdropServices

router = APIRouter()


class StatusUpdate(BaseModel):
    status: LogStatus


def _parse_tags(raw: str | None) -> Any:
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidSubmissionError(f"tags must be valid JSON: {e.msg}") from e


@router.post("/upload")
async def upload_log(
    device_id: str = Form(..., alias="deviceId"),
    level: LogLevel = Form(LogLevel.INFO),
    message: str = Form(""),
    timestamp: datetime | None = Form(None),
    tags: str | None = Form(None),
    logfile: UploadFile | None = File(None),
    services: LogdropServices = Depends(get_services),
) -> dict[str, Any]:
    """Accept a log submission with an optional attachment."""
    attachment: bytes | None = None
    declared_type: str | None = None

    # Browsers send an empty, unnamed part when no file was picked
    if logfile is not None and logfile.filename:
        limit = services.config.max_upload_bytes
        # Read at most one byte past the limit
        attachment = await logfile.read(limit + 1)
        if len(attachment) > limit:
            raise HTTPException(
                status_code=413,
                detail=f"Upload too large. Max is {limit} bytes.",
            )
        declared_type = logfile.content_type

    submission = LogSubmission(
        device_id=device_id,
        level=level,
        message=message,
        timestamp=timestamp,
        tags=_parse_tags(tags),
        declared_type=declared_type,
        attachment=attachment,
    )
    record = await services.submit_log.execute(submission)

    return {
        "success": True,
        "id": record.id,
        "fileSaved": record.has_attachment,
        "filePath": record.file_path,
    }


@router.get("/read")
async def read_log_file(
    file_path: str | None = Query(None, alias="filePath"),
    services: LogdropServices = Depends(get_services),
) -> dict[str, str]:
    """Return the decoded text of a stored artifact."""
    if not file_path:
        raise HTTPException(status_code=400, detail="Missing filePath")

    logger.debug("Read requested for {!r}", file_path)
    content = await services.retrieve_artifact.execute(file_path)
    return {"content": content}


@router.get("")
async def list_logs(
    device_id: str | None = Query(None, alias="deviceId"),
    level: LogLevel | None = None,
    status: LogStatus | None = None,
    search: str | None = None,
    has_attachment: bool | None = Query(None, alias="hasAttachment"),
    limit: int | None = Query(None, gt=0),
    services: LogdropServices = Depends(get_services),
) -> dict[str, Any]:
    filters = LogFilter(
        device_id=device_id,
        level=level,
        status=status,
        search=search,
        has_attachment=has_attachment,
        limit=limit,
    )
    records = await services.list_logs.execute(filters)
    return {"logs": [r.model_dump(mode="json") for r in records]}


@router.get("/{record_id}")
async def get_log(
    record_id: int,
    services: LogdropServices = Depends(get_services),
) -> dict[str, Any]:
    record = await services.get_log.execute(record_id)
    return record.model_dump(mode="json")


@router.patch("/{record_id}/status")
async def update_log_status(
    record_id: int,
    body: StatusUpdate,
    services: LogdropServices = Depends(get_services),
) -> dict[str, Any]:
    record = await services.update_log_status.execute(record_id, body.status)
    return record.model_dump(mode="json")


@router.delete("/{record_id}")
async def delete_log(
    record_id: int,
    services: LogdropServices = Depends(get_services),
) -> dict[str, Any]:
    record = await services.delete_log.execute(record_id)
    return {"success": True, "id": record.id}
