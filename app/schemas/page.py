from pydantic import (
    BaseModel, ConfigDict, Field, AliasChoices, field_validator, field_serializer, model_serializer,
    SerializerFunctionWrapHandler,
)
from datetime import datetime, timezone
from typing import Optional, List, Any, Generic, TypeVar

# Schemas pour les pages

SLUG_PATTERN = r"^[A-Za-z0-9/-]+$"
# /pages/id/<x> est toujours résolu comme une lecture par id
RESERVED_SLUG_PREFIX = "id/"

T = TypeVar("T")


class PageMetadata(BaseModel):
    description: Optional[str] = None
    keywords: Optional[List[str]] = None
    og_image: Optional[str] = Field(default=None, alias="ogImage")

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """Champs absents omis, jamais remplacés par une valeur par défaut"""
        return self.model_dump(by_alias=True, exclude_none=True)


class PageCreate(BaseModel):
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    title: str = Field(..., min_length=1, max_length=255)
    metadata: Optional[PageMetadata] = None
    # arbre non typé ici, validé par component_validator avant écriture
    components: List[Any] = Field(..., min_length=1)

    @field_validator("slug")
    @classmethod
    def slug_not_reserved(cls, value: str) -> str:
        if value.startswith(RESERVED_SLUG_PREFIX):
            raise ValueError(f"slug cannot start with the reserved segment '{RESERVED_SLUG_PREFIX}'")
        return value


class PageUpdate(PageCreate):
    """Même payload que la création (remplacement complet)"""


class PageResponse(BaseModel):
    id: str
    slug: str
    title: str
    metadata: Optional[dict[str, Any]] = Field(
        default=None, validation_alias=AliasChoices("page_metadata", "metadata")
    )
    components: List[dict[str, Any]]
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"), serialization_alias="createdAt"
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"), serialization_alias="updatedAt"
    )

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at")
    def _utc_timestamp(self, value: datetime) -> str:
        # colonnes naïves = UTC, rendu "2026-01-01T12:00:00.000Z"
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @model_serializer(mode="wrap")
    def _omit_absent_metadata(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        # pas de metadata : clé absente plutôt que null
        if data.get("metadata") is None:
            data.pop("metadata", None)
        return data


class DeleteConfirmation(BaseModel):
    message: str = "Page deleted successfully"


class ApiResponse(BaseModel, Generic[T]):
    """Enveloppe commune à toutes les réponses réussies"""
    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
