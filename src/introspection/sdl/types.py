from typing import List, Optional

from pydantic import BaseModel, Field


class GQLField(BaseModel):
    """Field declaration of a modeled type.

    Attributes:
        name: Field name.
        type: Type token, without the required marker.
        is_required: Whether the field is rendered with a trailing "!".
        directives: Directive strings in emission order.
        comment: Trailing inline comment.
        is_supported: False when the column type could not be mapped.
    """

    name: str
    type: str
    is_required: bool = False
    directives: List[str] = Field(default_factory=list)
    comment: Optional[str] = None
    is_supported: bool = True


class GQLType(BaseModel):
    """Type declaration derived from a table."""

    name: str
    fields: List[GQLField] = Field(default_factory=list)
    directives: List[str] = Field(default_factory=list)
    is_embedded: bool = False


class SDL(BaseModel):
    """Schema document: an ordered sequence of type declarations."""

    types: List[GQLType] = Field(default_factory=list)
