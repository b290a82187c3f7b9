from dataclasses import dataclass


@dataclass
class Category:
    id: int
    name: str
    created_at: str | None = None   # opaque, server-assigned
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, payload: dict) -> "Category":
        """Build a Category from an API object, unwrapping a {"data": {...}} envelope."""
        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            payload = payload["data"]
        if not isinstance(payload, dict) or "id" not in payload or "name" not in payload:
            raise ValueError(f"Not a category object: {payload!r}")
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            created_at=payload.get("created_at"),
            updated_at=payload.get("updated_at"),
        )
