"""Pydantic models describing the Traduora API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_to_empty(value: object) -> object:
    return "" if value is None else value


class TraduoraBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TokenResponse(TraduoraBaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int | str | None = None


class TermPayload(TraduoraBaseModel):
    id: str
    value: str


class TranslationPayload(TraduoraBaseModel):
    term_id: str = Field(alias="termId")
    value: str

    _normalize_value = field_validator("value", mode="before")(_none_to_empty)


class TermsResponse(TraduoraBaseModel):
    data: list[TermPayload]


class TermResponse(TraduoraBaseModel):
    data: TermPayload


class TranslationsResponse(TraduoraBaseModel):
    data: list[TranslationPayload]


class ErrorDetail(TraduoraBaseModel):
    code: str | None = None
    message: str | None = None


class ErrorResponse(TraduoraBaseModel):
    error: ErrorDetail
