"""Persisted settings record."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Config:
    """Settings stored in the user's config file.

    Keys this version does not know about are kept in ``extra`` so that
    rewriting the file never drops them.
    """

    token: str | None = None
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Build a Config from decoded JSON, tolerating missing or odd values."""
        if not isinstance(data, dict):
            return cls()
        extra = {k: v for k, v in data.items() if k != "token"}
        token = data.get("token")
        if not isinstance(token, str) or not token:
            token = None
        return cls(token=token, extra=extra)

    def to_dict(self) -> dict:
        data = dict(self.extra)
        if self.token:
            data["token"] = self.token
        return data
