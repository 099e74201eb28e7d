"""
Domain model for user accounts.
"""

from typing import Any, Dict, Iterable, List, Mapping

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A user account as exposed to callers. `password` holds the bcrypt hash."""
    model_config = ConfigDict(extra="ignore")

    id: str
    email: str
    username: str
    password: str
    articles: List[str] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "User":
        """Build a User from a raw store document, converting `_id` to a string."""
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        data["articles"] = list(data.get("articles") or [])
        return cls.model_validate(data)

    @classmethod
    def from_documents(cls, documents: Iterable[Mapping[str, Any]]) -> List["User"]:
        return [cls.from_document(document) for document in documents]

    def public_dict(self) -> Dict[str, Any]:
        """Serializable view without the password hash."""
        return self.model_dump(exclude={"password"})
