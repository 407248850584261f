"""Domain models used throughout the package."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ClientType(Enum):
    """The kinds of queue client a definition can construct.

    Each member's value is the type identifier of the client it stands for.
    """

    SQS = "SqsClient"
    BUFFERED_SQS = "BufferedSqsClient"

    @property
    def type_id(self) -> str:
        return self.value


@dataclass(frozen=True)
class Definition:
    """Describes how to construct a client, not the client itself.

    Attributes:
        client_type: The kind of client this definition constructs.
        constructor_args: Ordered constructor arguments. An argument may itself be
            a Definition, constructed inline rather than looked up by name.
        properties: Named settings applied to the constructed client. Read-only.
    """

    client_type: ClientType
    constructor_args: tuple[Any, ...] = ()
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def decorated_by(self, client_type: ClientType) -> "Definition":
        """Return a definition of ``client_type`` wrapping this one as its sole argument.

        Example:
            >>> plain = Definition(ClientType.SQS)
            >>> buffered = plain.decorated_by(ClientType.BUFFERED_SQS)
            >>> buffered.constructor_args == (plain,)
            True
        """
        return Definition(client_type, (self,))
