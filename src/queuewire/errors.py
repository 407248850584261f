__all__ = ["ConfigurationError", "MissingDefinitionError", "DuplicateDefinitionError"]


class ConfigurationError(Exception):
    """Raised when client definitions cannot be wired from the given configuration."""

    pass


class MissingDefinitionError(ConfigurationError, KeyError):
    """Raised when a name does not resolve to a registered definition."""

    def __init__(self, name: str):
        super().__init__(f"No definition registered under name '{name}'")
        self.name = name

    def __str__(self):
        return self.args[0]


class DuplicateDefinitionError(ConfigurationError):
    """Raised when a definition is registered under a name that is already taken."""

    pass
