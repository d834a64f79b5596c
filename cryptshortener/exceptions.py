class CryptShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:cryptshortener_error'


class ConfigurationError(CryptShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class IntegrityError(CryptShortenerError):
    """Base exception for internally produced data which fails validation."""

    error_code = 'integrity:integrity_error'


class CorruptPayloadError(IntegrityError):
    """Raised when a stored encrypted URL payload can't be decoded."""

    error_code = 'integrity:corrupt_payload_error'
