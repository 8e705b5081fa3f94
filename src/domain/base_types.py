from __future__ import annotations

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    model_serializer,
    model_validator,
)

# Validation context flag set by the wire decoders: the tag is then mandatory.
WIRE_CONTEXT = {"wire": True}


class TaggedVariant(BaseModel):
    """One arm of an externally tagged union: ``{"<TAG>": {...fields}}`` on the wire.

    Direct construction with keyword arguments works as for any model. Data
    validated with ``WIRE_CONTEXT`` must carry the tag.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    TAG: ClassVar[str] = ""

    @model_validator(mode="before")
    @classmethod
    def _unwrap_tag(cls, data: Any, info: ValidationInfo) -> Any:
        if isinstance(data, dict) and set(data) == {cls.TAG}:
            return data[cls.TAG]
        if info.context and info.context.get("wire"):
            raise ValueError(f"expected an object tagged `{cls.TAG}`")
        return data

    @model_serializer(mode="wrap")
    def _wrap_tag(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {self.TAG: handler(self)}


__all__ = ["WIRE_CONTEXT", "TaggedVariant"]
