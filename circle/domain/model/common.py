"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; state changes produce a new validated instance.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes):
        """Return a copy with ``changes`` applied, re-running validation.

        Unlike ``model_copy(update=...)`` this enforces every field and model
        validator on the new state.
        """
        return type(self)(**{**dict(self), **changes})
