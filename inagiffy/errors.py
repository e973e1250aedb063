## Error taxonomy shared by the generation pipeline and the HTTP layer


class InagiffyError(Exception):
    """Base class for every failure the API turns into a JSON envelope."""

    status_code = 500
    error = "Failed to generate learning map"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestValidationFailure(InagiffyError):
    status_code = 400
    error = "Invalid request"

    def __init__(self, details: list[dict]):
        super().__init__(f"{len(details)} invalid field(s)")
        self.details = details


class ConfigurationFailure(InagiffyError):
    """A credential or setting the LLM provider needs is missing."""

    def __init__(self, message: str, *, error: str | None = None):
        super().__init__(message)
        if error:
            self.error = error


class GenerationFailure(InagiffyError):
    """The LLM call raised or came back empty."""


class NormalizationFailure(InagiffyError):
    pass


class ParseFailure(NormalizationFailure):
    """No JSON object could be recovered from the model output."""


class SchemaFailure(NormalizationFailure):
    """JSON was recovered but does not have the roadmap shape."""


class GenerationCancelled(InagiffyError):
    status_code = 504
    error = "Generation timed out"
