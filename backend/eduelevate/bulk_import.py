from __future__ import annotations
from typing import Iterable, List, Optional

from .models import StudentDraft

# Only an exact, case-sensitive "Name" first field is treated as a header row
HEADER_TOKEN = "Name"


def clean_name(candidate: Optional[str]) -> Optional[str]:
    """Trim a candidate name; None when it is blank or the header token."""
    name = (candidate or "").strip()
    if not name or name == HEADER_TOKEN:
        return None
    return name


def filter_names(candidates: Iterable[Optional[str]]) -> List[str]:
    names: List[str] = []
    for candidate in candidates:
        # A name may arrive as a whole row ("Ben,1"); keep only its first field
        name = clean_name((candidate or "").split(",")[0])
        if name is not None:
            names.append(name)
    return names


def parse_roster_names(text: str) -> List[str]:
    # A row without a comma is one field equal to the whole line
    return filter_names(text.split("\n"))


def parse_roster(text: str) -> List[StudentDraft]:
    return [StudentDraft(name=name) for name in parse_roster_names(text)]


def decode_upload(content: bytes) -> str:
    # Spreadsheet exports often carry a BOM; stray bytes must not abort the import
    return content.decode("utf-8-sig", errors="replace")
