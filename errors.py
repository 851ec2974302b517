# --- Custom Exceptions ---

class ObfuscationError(Exception):
    """Base class for every error raised by the obfuscation layer."""
    pass


class ConfigurationError(ObfuscationError, ValueError):
    """Raised while configuring a type; never raised after setup."""
    pass


class NonObfuscatedIdError(ObfuscationError):
    """Raised when a type enforces obfuscated IDs and a raw ID was supplied."""
    pass


class RecordNotFoundError(ObfuscationError, LookupError):
    """The store's not-found signal, also used to hide enforcement rejections."""
    pass


class InvalidTokenError(ObfuscationError, ValueError):
    """Raised when a prefixed token's body is not a valid permutation output."""
    pass
