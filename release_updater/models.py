from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import UsageError


class TargetMode(str, Enum):
    ALL = "all"
    SINGLE = "single"


@dataclass
class Release:
    id: int
    tag_name: str
    body: str = ""
    name: str | None = None
    draft: bool = False
    prerelease: bool = False

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Release":
        return cls(
            id=int(payload["id"]),
            tag_name=payload.get("tag_name") or "",
            body=payload.get("body") or "",
            name=payload.get("name"),
            draft=bool(payload.get("draft")),
            prerelease=bool(payload.get("prerelease")),
        )

    def to_edit_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "tag_name": self.tag_name,
            "body": self.body,
            "draft": self.draft,
            "prerelease": self.prerelease,
        }
        if self.name is not None:
            payload["name"] = self.name
        return payload


@dataclass(frozen=True)
class UpdateRequest:
    owner: str
    repo: str
    value: str
    replacement: str
    token: str
    all_releases: bool = False
    tag: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def target_mode(self) -> TargetMode:
        self.validate()
        return TargetMode.ALL if self.all_releases else TargetMode.SINGLE

    def validate(self) -> None:
        if not self.value:
            raise UsageError("--value must not be empty")
        if self.all_releases and self.tag:
            raise UsageError("cannot specify both --all and --release")
        if not self.all_releases and not self.tag:
            raise UsageError("must specify either --all or --release")


@dataclass
class RunResult:
    aborted: bool = False
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
