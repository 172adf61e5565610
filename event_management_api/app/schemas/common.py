"""
Shared schema building blocks.

``DocumentModel`` is the base for every record schema.  Known fields
are declared on subclasses; unknown fields are accepted and kept
(``extra="allow"``).  Numbers and booleans sent for text fields are
stored as strings (``1`` -> ``"1"``, ``true`` -> ``"true"``), mirroring
how a document store casts loosely typed input.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

_TEXT_ANNOTATIONS = (str, Optional[str])


class DocumentModel(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _cast_bool_to_text(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, bool) and info.field_name is not None:
            field = cls.model_fields.get(info.field_name)
            if field is not None and field.annotation in _TEXT_ANNOTATIONS:
                return "true" if value else "false"
        return value

    def provided_fields(self) -> Dict[str, Any]:
        """Return only the fields present in the request, extras included.

        Omitted fields stay absent instead of being stored as ``null``.
        """
        provided = set(self.model_fields_set) | set(self.model_extra or {})
        return {key: value for key, value in self.model_dump().items() if key in provided}


class Message(BaseModel):
    """Plain message body used for deletions and errors."""

    message: str = Field(..., examples=["Event not found"])
