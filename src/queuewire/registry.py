"""Named store of client definitions."""

import logging
from typing import Mapping, Optional

from queuewire.domain import ClientType, Definition
from queuewire.errors import ConfigurationError, DuplicateDefinitionError, MissingDefinitionError

__all__ = ["DefinitionRegistry"]

logger = logging.getLogger(__name__)


class DefinitionRegistry:
    """Registry of definitions keyed by unique name.

    The registry is mutated only through explicit calls. It performs no locking:
    callers loading configuration must serialize access themselves.

    Example:
        >>> registry = DefinitionRegistry()
        >>> registry.register("sqsClient", Definition(ClientType.SQS))
        >>> "sqsClient" in registry
        True
        >>> _ = registry.remove("sqsClient")
        >>> registry.register("sqsClient", Definition(ClientType.BUFFERED_SQS))
    """

    def __init__(self, definitions: Optional[Mapping[str, Definition]] = None):
        self._definitions: dict[str, Definition] = {}
        for name, definition in (definitions or {}).items():
            self.register(name, definition)

    def register(self, name: str, definition: Definition):
        """Register a definition under a name.

        Args:
            name: The unique name to register under.
            definition: The definition to store.

        Raises:
            ConfigurationError: If the name is blank.
            DuplicateDefinitionError: If the name is already registered. To replace
                a definition, remove it first.
        """
        if not name or not name.strip():
            raise ConfigurationError("Definition name must not be blank")
        if name in self._definitions:
            raise DuplicateDefinitionError(
                f"A definition is already registered under name '{name}'"
            )
        self._definitions[name] = definition
        logger.debug("Registered %s definition '%s'", definition.client_type.type_id, name)

    def get(self, name: str) -> Definition:
        """Look up the definition registered under a name.

        Raises:
            MissingDefinitionError: If nothing is registered under the name.
        """
        try:
            return self._definitions[name]
        except KeyError:
            raise MissingDefinitionError(name) from None

    def remove(self, name: str) -> Definition:
        """Remove and return the definition registered under a name.

        Raises:
            MissingDefinitionError: If nothing is registered under the name.
        """
        if name not in self._definitions:
            raise MissingDefinitionError(name)
        definition = self._definitions.pop(name)
        logger.debug("Removed definition '%s'", name)
        return definition

    def contains(self, name: str) -> bool:
        return name in self._definitions

    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._definitions)

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self._definitions)
