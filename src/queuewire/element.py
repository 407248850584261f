"""Read-only view of a parsed configuration element.

Configuration loaders hand each messaging element to the wiring code as a
:class:`ConfigElement`. Attribute lookup mirrors DOM semantics: an absent
attribute reads as the empty string, so callers test for text rather than
for presence.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from xml.etree import ElementTree

from queuewire.errors import ConfigurationError

__all__ = ["ConfigElement"]


@dataclass(frozen=True)
class ConfigElement:
    """Immutable attribute map of a single configuration element.

    Attributes:
        attributes: Attribute names mapped to their raw string values.
        tag: The element's tag name, if known. Used only for messages.
    """

    attributes: Mapping[str, str] = field(default_factory=dict)
    tag: str = ""

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @staticmethod
    def from_xml(element: ElementTree.Element) -> "ConfigElement":
        """Build a view of an already-parsed XML element, ignoring its children."""
        return ConfigElement(dict(element.attrib), _local_name(element.tag))

    @staticmethod
    def from_string(text: str) -> "ConfigElement":
        """Parse a single XML element from text.

        Raises:
            ConfigurationError: If the text is not well-formed XML.
        """
        try:
            return ConfigElement.from_xml(ElementTree.fromstring(text))
        except ElementTree.ParseError as e:
            raise ConfigurationError(f"Malformed configuration element: {e}") from e

    def attribute(self, name: str) -> str:
        """Return the attribute's value, or an empty string if it is absent."""
        return self.attributes.get(name, "")

    def has_text(self, name: str) -> bool:
        """True if the attribute is present and not blank.

        Example:
            >>> element = ConfigElement({"amazon-sqs": "  ", "region": "eu-west-1"})
            >>> element.has_text("amazon-sqs"), element.has_text("region")
            (False, True)
        """
        return bool(self.attribute(name).strip())


def _local_name(tag: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix from a tag."""
    return tag.rsplit("}", 1)[-1]
