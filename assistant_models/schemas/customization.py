"""Customization (fine-tuned model) references."""

from __future__ import annotations

from assistant_models.schemas.base import WireModel


class Customization(WireModel):
    """Named reference to a customization resource.

    ``arn`` is an opaque resource identifier and is passed through unchanged.
    """

    arn: str
    name: str | None = None

    def with_name(self, name: str) -> Customization:
        return self._with(name=name)
