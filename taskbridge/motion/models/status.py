"""Normalized workflow status."""

from pydantic import BaseModel, ConfigDict, Field


class NormalizedStatus(BaseModel):
    """Task or project status in canonical form.

    The Motion API delivers status either as a bare name (``"Todo"``) or as an
    object (``{"name": "Todo", "isDefaultStatus": true, ...}``). Both collapse
    to this model; ``name`` is None when the status is absent or unreadable.
    """

    name: str | None = Field(default=None)
    is_default_status: bool | None = Field(default=None, alias="isDefaultStatus")
    is_resolved_status: bool | None = Field(default=None, alias="isResolvedStatus")

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    @property
    def has_detail(self) -> bool:
        """Whether the upstream supplied the structured form."""
        return self.is_default_status is not None or self.is_resolved_status is not None
