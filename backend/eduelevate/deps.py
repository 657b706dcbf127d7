from __future__ import annotations
from typing import Optional, TypeVar

from fastapi import HTTPException, Request, UploadFile

from .attachments import Attachment, encode_attachment
from .gateway import CoachingGateway
from .lessons import LessonCatalog
from .reports import AnalysisFailed
from .roster import StudentStore
from .settings import settings

R = TypeVar("R")


def get_store(request: Request) -> StudentStore:
	return request.app.state.store


def get_catalog(request: Request) -> LessonCatalog:
	return request.app.state.catalog


def get_gateway(request: Request) -> CoachingGateway:
	return request.app.state.gateway


def unwrap_report(result: R | AnalysisFailed) -> R:
	# Every failure looks the same to the caller
	if isinstance(result, AnalysisFailed):
		raise HTTPException(status_code=502, detail="Analysis failed.")
	return result


async def read_upload_bytes(file: UploadFile) -> bytes:
	"""Read at most max_upload_bytes; anything bigger is a 413."""
	limit = settings.max_upload_bytes
	if file.size is None or file.size <= limit:
		content = await file.read(limit + 1)
		if len(content) <= limit:
			return content
	raise HTTPException(status_code=413, detail=f"{file.filename or 'upload'} is too large")


async def read_upload(file: Optional[UploadFile]) -> Optional[Attachment]:
	if file is None:
		return None
	content = await read_upload_bytes(file)
	if not content:
		return None
	return encode_attachment(content, file.content_type)
