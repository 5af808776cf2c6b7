from typing import Optional

from pydantic import BaseModel


class SearchResult(BaseModel):
    title: str = ""
    url: str = ""
    snippet: Optional[str] = None
    date: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: object) -> "SearchResult":
        if not isinstance(raw, dict):
            return cls()
        return cls(
            title=_as_text(raw.get("title")),
            url=_as_text(raw.get("url")),
            snippet=_optional_text(raw.get("snippet")),
            date=_optional_text(raw.get("date")),
        )


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_text(value: object) -> Optional[str]:
    # falsy values (None, "", 0, False) mean the field is absent
    if not value:
        return None
    return _as_text(value)
