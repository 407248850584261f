"""Queuewire: declarative wiring of queue client definitions.

Queuewire decides which queue client definition a messaging configuration
element should use. An explicitly named client is used untouched; otherwise a
default client definition is created (or reused) and wrapped, exactly once, in
a buffered client decorator definition registered under the same name.

Definitions only describe how to construct a client. Nothing here instantiates
clients, talks to a broker or buffers messages.

Basic Usage:
    >>> from queuewire.decorator import custom_client_or_decorated_default
    >>> from queuewire.element import ConfigElement
    >>> from queuewire.registry import DefinitionRegistry
    >>>
    >>> registry = DefinitionRegistry()
    >>> element = ConfigElement.from_string('<annotation-driven-queue-listener region="eu-west-1"/>')
    >>> custom_client_or_decorated_default(element, registry)
    'sqsClient'
    >>> registry.get("sqsClient").client_type
    <ClientType.BUFFERED_SQS: 'BufferedSqsClient'>

The package consists of:
    - domain: Core domain models (ClientType, Definition)
    - registry: Named store of definitions
    - element: Read-only view of a configuration element
    - defaults: Default client resolution
    - decorator: Buffered client decoration
    - errors: Package-specific exceptions
"""
