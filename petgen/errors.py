"""Exception taxonomy shared by the petgen modules."""


class PetgenError(RuntimeError):
    """Base class for every error raised by petgen."""


class ConfigError(PetgenError):
    """Raised when required configuration (such as the API key) is missing."""


class CatalogError(ConfigError):
    """Raised when the pet catalog cannot be loaded."""


class TransportError(PetgenError):
    """Raised when an HTTP exchange does not complete successfully."""


class ServiceError(PetgenError):
    """Raised when the Runware API reports an error or returns an unusable payload."""


class StorageError(PetgenError):
    """Raised when an asset or the output directory cannot be written."""
