from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TEAM_NAME = "Team"

FALLBACK_TEAM_ID = "default"
FALLBACK_TEAM_NAME = "Default Env/Global"


@dataclass(frozen=True)
class Team:
    token: str
    account_id: str
    name: str = DEFAULT_TEAM_NAME
    id: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "accountId": self.account_id,
            "token": self.token,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Team:
        return cls(
            id=data.get("id") or "",
            token=data["token"],
            account_id=data["accountId"],
            name=data.get("name") or "",
        )
