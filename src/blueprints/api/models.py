"""Response envelope shared by every blueprint operation."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """Uniform response: status code, message, payload and hypermedia links.

    Serialized form:
        {"code": 200, "message": "execute ok", "data": {...},
         "_links": {"self": ".../john/house", "all-blueprints": "..."}}
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: int
    message: str
    data: Any = None
    links: Dict[str, str] = Field(default_factory=dict, alias="_links")

    def with_links(self, links: Optional[Dict[str, str]]) -> "ApiResponse":
        return self.model_copy(update={"links": dict(links or {})})

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def ok(cls, data: Any) -> "ApiResponse":
        return cls(code=200, message="execute ok", data=data)

    @classmethod
    def created(cls, data: Any) -> "ApiResponse":
        return cls(code=201, message="resource created", data=data)

    @classmethod
    def accepted(cls, data: Any = None) -> "ApiResponse":
        return cls(code=202, message="update accepted", data=data)

    @classmethod
    def bad_request(cls, message: str) -> "ApiResponse":
        return cls(code=400, message=message)

    @classmethod
    def not_found(cls, message: str) -> "ApiResponse":
        return cls(code=404, message=message)

    @classmethod
    def conflict(cls, message: str) -> "ApiResponse":
        return cls(code=409, message=message)
