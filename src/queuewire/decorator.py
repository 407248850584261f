"""Wrapping of default queue clients in a buffered client decorator.

A messaging element either names its own client, which is used as given, or
falls back to the default client. The default is rewritten in the registry so
that the definition under its name is a buffered client wrapping the original
plain client. The plain definition is inlined as the decorator's constructor
argument rather than registered under a name of its own, so anything referring
to the default name picks up the buffered client.
"""

import logging

from queuewire.defaults import DefaultClientResolver, resolve_or_create_default
from queuewire.domain import ClientType
from queuewire.element import ConfigElement
from queuewire.registry import DefinitionRegistry

__all__ = ["ClientDecoratorResolver", "custom_client_or_decorated_default", "SQS_CLIENT_ATTRIBUTE"]

logger = logging.getLogger(__name__)

SQS_CLIENT_ATTRIBUTE = "amazon-sqs"


class ClientDecoratorResolver:
    """Resolve the client an element uses, decorating the default client when needed.

    Example:
        >>> registry = DefinitionRegistry()
        >>> resolver = ClientDecoratorResolver()
        >>> resolver.resolve(ConfigElement({}), registry)
        'sqsClient'
        >>> resolver.resolve(ConfigElement({"amazon-sqs": "myCustomClient"}), registry)
        'myCustomClient'
    """

    def __init__(
        self,
        default_resolver: DefaultClientResolver = resolve_or_create_default,
        attribute_name: str = SQS_CLIENT_ATTRIBUTE,
    ):
        self._default_resolver = default_resolver
        self._attribute_name = attribute_name

    def resolve(self, element: ConfigElement, registry: DefinitionRegistry) -> str:
        """Return the name of the client definition the element should use.

        When the element does not name its own client, the definition under the
        returned name is guaranteed to be a buffered client. A plain definition
        found there is replaced by a buffered one wrapping it; a buffered one is
        left alone, so resolving repeatedly never wraps twice.

        Args:
            element: The configuration element being wired.
            registry: The registry holding client definitions. Mutated only when
                a plain default definition has to be wrapped.

        Returns:
            The name under which the client definition is registered.

        Raises:
            MissingDefinitionError: If the default resolver returned a name with
                no registered definition.
        """
        bean_name = self._default_resolver(
            element, registry, self._attribute_name, ClientType.SQS
        )
        if element.has_text(self._attribute_name):
            logger.debug("Using explicitly configured client '%s'", bean_name)
            return bean_name

        definition = registry.get(bean_name)
        if definition.client_type is ClientType.BUFFERED_SQS:
            return bean_name

        registry.remove(bean_name)
        registry.register(bean_name, definition.decorated_by(ClientType.BUFFERED_SQS))
        logger.debug(
            "Decorated %s definition '%s' with %s",
            definition.client_type.type_id,
            bean_name,
            ClientType.BUFFERED_SQS.type_id,
        )
        return bean_name


def custom_client_or_decorated_default(
    element: ConfigElement, registry: DefinitionRegistry
) -> str:
    """Resolve the element's queue client using the default collaborators.

    See :meth:`ClientDecoratorResolver.resolve`.
    """
    return ClientDecoratorResolver().resolve(element, registry)
