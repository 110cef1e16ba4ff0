"""Custom exceptions for swagmodel.

This module defines the hierarchy of exceptions raised by swagmodel. The
resolution core itself degrades to permissive models instead of raising;
these errors come from loading documents, reading configuration and, when
strict settings are enabled, from reference resolution.
"""


class SwagModelError(Exception):
    """Base exception for all swagmodel errors.

    Example:
        try:
            document = SchemaLoader().load('./swagger.yaml')
        except SwagModelError as e:
            print(f"swagmodel error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(SwagModelError):
    """Base exception for schema-related errors."""

    pass


class SchemaLoadError(SchemaError):
    """Failed to load a Swagger document from a source.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load schema from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """Document is not a valid Swagger 2.0 document.

    Attributes:
        source: The source path or URL of the invalid document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Schema validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class SchemaReferenceError(SchemaError):
    """Failed to resolve a $ref pointer in the document.

    Attributes:
        reference: The $ref string that could not be resolved.
        reason: Explanation of why the reference couldn't be resolved.
    """

    def __init__(self, reference: str, reason: str | None = None):
        self.reference = reference
        self.reason = reason
        message = f"Failed to resolve reference '{reference}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class CyclicSchemaReferenceError(SchemaReferenceError):
    """A chain of $ref pointers loops back on itself.

    Attributes:
        chain: The pointers followed, in order, ending with the repeated one.
    """

    def __init__(self, reference: str, chain: list[str] | None = None):
        self.chain = list(chain or [])
        reason = 'reference cycle'
        if self.chain:
            reason += f': {" -> ".join(self.chain)}'
        super().__init__(reference, reason)


class ConfigurationError(SwagModelError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class UnsupportedFeatureError(SwagModelError):
    """The document uses a feature swagmodel does not resolve.

    Attributes:
        feature: Description of the unsupported feature.
        suggestion: Optional suggestion for a workaround.
    """

    def __init__(self, feature: str, suggestion: str | None = None):
        self.feature = feature
        self.suggestion = suggestion
        message = f'Unsupported feature: {feature}'
        if suggestion:
            message += f'. {suggestion}'
        super().__init__(message)
