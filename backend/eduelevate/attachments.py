from __future__ import annotations
import base64
from typing import Any, Dict, Optional

from pydantic import BaseModel

DEFAULT_MIME_TYPE = "application/octet-stream"


class Attachment(BaseModel):
	mime_type: str
	data: str  # base64, no data: URL prefix

	def to_part(self) -> Dict[str, Any]:
		return {"inline_data": {"mime_type": self.mime_type, "data": self.data}}


def encode_attachment(content: bytes, mime_type: Optional[str]) -> Attachment:
	return Attachment(
		mime_type=(mime_type or "").strip() or DEFAULT_MIME_TYPE,
		data=base64.b64encode(content).decode("ascii"),
	)
