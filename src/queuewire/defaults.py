"""Resolution of user-supplied or default client definitions."""

import logging
from typing import Callable

from queuewire.domain import ClientType, Definition
from queuewire.element import ConfigElement
from queuewire.errors import ConfigurationError
from queuewire.registry import DefinitionRegistry

__all__ = ["DefaultClientResolver", "default_bean_name", "resolve_or_create_default"]

logger = logging.getLogger(__name__)

REGION_ATTRIBUTE = "region"
REGION_PROVIDER_ATTRIBUTE = "region-provider"

DefaultClientResolver = Callable[[ConfigElement, DefinitionRegistry, str, ClientType], str]
"""Maps a configuration element to the name of the client definition it uses.

Called with the element, the registry, the name of the attribute that may name
a user-supplied client, and the client type to create if it does not.
"""


def default_bean_name(client_type: ClientType) -> str:
    """Derive the name of the default definition for a client type.

    Example:
        >>> default_bean_name(ClientType.SQS)
        'sqsClient'
    """
    type_id = client_type.type_id
    return type_id[:1].lower() + type_id[1:]


def resolve_or_create_default(
    element: ConfigElement,
    registry: DefinitionRegistry,
    attribute_name: str,
    client_type: ClientType,
) -> str:
    """Return the user's client name, or the name of a default client definition.

    If the element names a client in ``attribute_name``, that name is returned
    without consulting the registry. Otherwise the default definition for
    ``client_type`` is returned, registering it first if no element has done so
    yet. Elements without an explicit client therefore share one default, and
    region settings on an element that reuses it are ignored with a warning.

    Args:
        element: The configuration element being wired.
        registry: The registry holding client definitions.
        attribute_name: Attribute that may name a user-supplied client definition.
        client_type: The type of client to create by default.

    Returns:
        The name under which the client definition is registered.

    Raises:
        ConfigurationError: If the element sets both a region and a region provider.
    """
    if element.has_text(attribute_name):
        return element.attribute(attribute_name)

    properties = _region_properties(element)
    bean_name = default_bean_name(client_type)
    if bean_name in registry:
        logger.debug("Reusing default client definition '%s'", bean_name)
        existing = _innermost(registry.get(bean_name))
        if properties and properties != existing.properties:
            logger.warning(
                "Element '%s' sets %s but shares default client '%s' configured with %s; "
                "name a client in '%s' to use different settings",
                element.tag,
                properties,
                bean_name,
                dict(existing.properties),
                attribute_name,
            )
        return bean_name

    registry.register(bean_name, Definition(client_type, properties=properties))
    logger.debug("Created default %s definition '%s'", client_type.type_id, bean_name)
    return bean_name


def _innermost(definition: Definition) -> Definition:
    """Follow decorator definitions down to the client they wrap."""
    while definition.constructor_args and isinstance(definition.constructor_args[0], Definition):
        definition = definition.constructor_args[0]
    return definition


def _region_properties(element: ConfigElement) -> dict[str, str]:
    has_region = element.has_text(REGION_ATTRIBUTE)
    has_region_provider = element.has_text(REGION_PROVIDER_ATTRIBUTE)
    if has_region and has_region_provider:
        raise ConfigurationError(
            f"Element '{element.tag}' must not set both "
            f"'{REGION_ATTRIBUTE}' and '{REGION_PROVIDER_ATTRIBUTE}'"
        )
    if has_region:
        return {"region": element.attribute(REGION_ATTRIBUTE)}
    if has_region_provider:
        return {"region_provider": element.attribute(REGION_PROVIDER_ATTRIBUTE)}
    return {}
