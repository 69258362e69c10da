"""CrewMember Entity"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CrewMember:
    """
    映画のクルーメンバー（エンティティ）

    movieId + crewRole で識別される。テーブル上のその他の属性は
    attributes にそのまま保持する。names を持たないアイテム
    （インデックス射影など）は names=None のまま扱う。
    """

    movie_id: int
    crew_role: str
    names: list[str] | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> CrewMember:
        """DynamoDB アイテムから復元"""
        known = {"movieId", "crewRole", "names"}
        names = item.get("names")
        if isinstance(names, (set, frozenset)):
            names = sorted(names)
        elif names is not None:
            names = list(names)
        return cls(
            movie_id=int(item["movieId"]),
            crew_role=item["crewRole"],
            names=names,
            attributes={k: v for k, v in item.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        result = {
            **self.attributes,
            "movieId": self.movie_id,
            "crewRole": self.crew_role,
        }
        if self.names is not None:
            result["names"] = list(self.names)
        return result
