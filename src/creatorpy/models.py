"""Pydantic v2 models for creator credentials and sessions."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from creatorpy.headers import build_cookie


class Session(BaseModel):
    """Validated identity of an authenticated creator account.

    Created once by ``CreatorBuilder.build`` and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    user_agent: str
    xbc: str = Field(repr=False)
    auth_id: str
    two_factor: str | None = Field(default=None, repr=False)
    session_token: str = Field(repr=False)

    @property
    def has_two_factor(self) -> bool:
        return self.two_factor is not None

    @property
    def cookie(self) -> str:
        """Cookie header value for this session."""
        return build_cookie(self.session_token, self.auth_id, self.two_factor)


class Credentials(BaseModel):
    """Credential fragments as stored in a credentials file.

    Every field is optional here; completeness is checked by the builder.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_agent: str | None = Field(
        default=None, validation_alias=AliasChoices("user_agent", "user-agent")
    )
    xbc: str | None = Field(
        default=None, validation_alias=AliasChoices("xbc", "x_bc", "x-bc")
    )
    auth_id: str | None = Field(
        default=None, validation_alias=AliasChoices("auth_id", "user_id", "user-id")
    )
    two_factor: str | None = Field(
        default=None, validation_alias=AliasChoices("two_factor", "auth_uid")
    )
    session_token: str | None = Field(
        default=None, validation_alias=AliasChoices("session_token", "sess")
    )
    proxy: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, v: object) -> object:
        if v is None:
            return None
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, str) and not v.strip():
            return None
        return v
