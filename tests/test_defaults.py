import logging

import pytest

from queuewire.defaults import default_bean_name, resolve_or_create_default
from queuewire.domain import ClientType, Definition
from queuewire.element import ConfigElement
from queuewire.errors import ConfigurationError
from queuewire.registry import DefinitionRegistry


@pytest.fixture
def registry():
    return DefinitionRegistry()


def resolve(element: ConfigElement, registry: DefinitionRegistry) -> str:
    return resolve_or_create_default(element, registry, "amazon-sqs", ClientType.SQS)


def test_default_bean_names():
    assert default_bean_name(ClientType.SQS) == "sqsClient"
    assert default_bean_name(ClientType.BUFFERED_SQS) == "bufferedSqsClient"


def test_explicit_client_is_returned_without_registering(registry):
    assert resolve(ConfigElement({"amazon-sqs": "myCustomClient"}), registry) == "myCustomClient"
    assert len(registry) == 0


def test_default_client_is_registered(registry):
    assert resolve(ConfigElement({}), registry) == "sqsClient"
    assert registry.get("sqsClient") == Definition(ClientType.SQS)


def test_blank_attribute_falls_back_to_default(registry):
    assert resolve(ConfigElement({"amazon-sqs": " "}), registry) == "sqsClient"
    assert "sqsClient" in registry


def test_existing_default_is_reused(registry):
    existing = Definition(ClientType.BUFFERED_SQS, (Definition(ClientType.SQS),))
    registry.register("sqsClient", existing)

    assert resolve(ConfigElement({"region": "us-east-1"}), registry) == "sqsClient"
    assert registry.get("sqsClient") is existing
    assert registry.names() == ["sqsClient"]


def test_region_is_carried_onto_default(registry):
    resolve(ConfigElement({"region": "eu-west-1"}), registry)

    assert registry.get("sqsClient").properties == {"region": "eu-west-1"}


def test_region_provider_is_carried_onto_default(registry):
    resolve(ConfigElement({"region-provider": "regionProvider"}), registry)

    assert registry.get("sqsClient").properties == {"region_provider": "regionProvider"}


def test_region_and_region_provider_together_raise(registry):
    element = ConfigElement({"region": "eu-west-1", "region-provider": "regionProvider"}, "listener")

    with pytest.raises(ConfigurationError, match="Element 'listener' must not set both"):
        resolve(element, registry)

    assert len(registry) == 0


def test_conflicting_region_raises_when_default_already_exists(registry):
    resolve(ConfigElement({}), registry)

    element = ConfigElement({"region": "eu-west-1", "region-provider": "regionProvider"}, "listener")
    with pytest.raises(ConfigurationError, match="Element 'listener' must not set both"):
        resolve(element, registry)

    assert registry.get("sqsClient") == Definition(ClientType.SQS)


def test_ignored_region_on_reused_default_is_logged(registry, caplog):
    registry.register(
        "sqsClient",
        Definition(ClientType.SQS, properties={"region": "eu-west-1"}).decorated_by(ClientType.BUFFERED_SQS),
    )

    with caplog.at_level(logging.WARNING, logger="queuewire.defaults"):
        assert resolve(ConfigElement({"region": "us-east-1"}, "listener"), registry) == "sqsClient"

    assert "Element 'listener' sets {'region': 'us-east-1'}" in caplog.text
    assert "configured with {'region': 'eu-west-1'}" in caplog.text


def test_matching_region_on_reused_default_is_not_logged(registry, caplog):
    resolve(ConfigElement({"region": "eu-west-1"}), registry)

    with caplog.at_level(logging.WARNING, logger="queuewire.defaults"):
        resolve(ConfigElement({"region": "eu-west-1"}), registry)

    assert caplog.records == []
