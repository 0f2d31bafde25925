"""Pydantic model for a stored selection of identifiers.

``IdentifierSet`` validates identifiers on construction and converts to and
from the length-prefixed bitmask and its base64 text form.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Any, Optional, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.fields import FieldInfo

from ..codec.bitmask import decode_bitmask, encode_bitmask
from ..config import BitmaskLimits
from ..framing.basic import BytesLike
from ..transport.text import decode_from_base64, encode_to_base64


def Identifier(**kwargs: Any) -> FieldInfo:
    """Create a non-negative identifier field.

    Example:
        >>> class Selection(BaseModel):
        ...     ids: tuple[Annotated[int, Identifier()], ...]
    """
    return cast(FieldInfo, Field(ge=0, **kwargs))


class IdentifierSet(BaseModel):
    """An immutable, sorted set of non-negative identifiers.

    Example:
        >>> selection = IdentifierSet(ids=[5, 1, 3, 3])
        >>> selection.ids
        (1, 3, 5)
        >>> selection.to_base64()
        'AAAABio='
        >>> IdentifierSet.from_base64("AAAABio=") == selection
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ids: tuple[Annotated[int, Identifier()], ...] = ()

    @field_validator("ids")
    @classmethod
    def sort_unique(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        return tuple(sorted(set(value)))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.ids)

    def to_bitmask(self, limits: Optional[BitmaskLimits] = None) -> bytes:
        """Encode as a length-prefixed bitmask."""
        return encode_bitmask(self.ids, limits=limits)

    @classmethod
    def from_bitmask(cls, data: BytesLike) -> IdentifierSet:
        """Decode a length-prefixed bitmask."""
        return cls(ids=decode_bitmask(data))

    def to_base64(self, limits: Optional[BitmaskLimits] = None) -> str:
        """Encode as base64 text of the length-prefixed bitmask."""
        return encode_to_base64(self.to_bitmask(limits))

    @classmethod
    def from_base64(cls, text: str) -> IdentifierSet:
        """Decode base64 text produced by ``to_base64``."""
        return cls.from_bitmask(decode_from_base64(text))
