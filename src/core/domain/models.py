"""Command models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at construction time: an empty scope list or an empty
  client id never reaches the translator.
- Frozen models give us immutable values that are consumed once and dropped.

Note:
- These models describe *what* the user asked for, not *how* the helper is
  invoked. That lives in `core.services.translator`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, StringConstraints, TypeAdapter
from pydantic.config import ConfigDict

from core.domain.action import Action

Identifier = Annotated[str, StringConstraints(min_length=1)]
Scope = Annotated[str, StringConstraints(min_length=1)]


class AuthTarget(BaseModel):
    """Who the token is for and what it should be valid for.

    Shared by every command variant.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    client: Identifier = Field(
        ...,
        description="Client (application) id, opaque to this tool.",
    )
    tenant: Identifier = Field(
        ...,
        description="Tenant id, opaque to this tool.",
    )
    scopes: tuple[Scope, ...] = Field(
        ...,
        min_length=1,
        description="Requested scopes, in the order they are passed to the helper.",
    )


class AcquireCommand(AuthTarget):
    """Acquire (or reuse) a cached token."""

    action: Literal["acquire"] = Action.ACQUIRE.value


class ClearCommand(AuthTarget):
    """Clear the cached token."""

    action: Literal["clear"] = Action.CLEAR.value


Command = Annotated[Union[AcquireCommand, ClearCommand], Field(discriminator="action")]

_COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)

_VARIANTS: dict[Action, type[AuthTarget]] = {
    Action.ACQUIRE: AcquireCommand,
    Action.CLEAR: ClearCommand,
}


def build_command(
    action: Action,
    *,
    client: str,
    tenant: str,
    scopes: Iterable[str],
) -> AcquireCommand | ClearCommand:
    """Build the command variant that matches `action`."""

    model = _VARIANTS[Action(action)]
    return model(client=client, tenant=tenant, scopes=tuple(scopes))  # type: ignore[return-value]


def parse_command(data: Mapping[str, Any]) -> AcquireCommand | ClearCommand:
    """Validate a plain mapping (with an `action` key) into a command."""

    return _COMMAND_ADAPTER.validate_python(dict(data))
