from __future__ import annotations


class SynthesisError(ValueError):
    # Base class for every error raised while synthesizing adapter configuration.
    pass


class InvalidParameterError(SynthesisError):
    # A deployment parameter is missing or malformed; names the offending field.
    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class UnknownBuilderError(SynthesisError):
    # Requested router / audit sink / pipeline / plugin kind is outside the fixed set.
    def __init__(self, category: str, value: object) -> None:
        super().__init__(f"Unknown {category}: {value!r}")
        self.category = category
        self.value = value


class PipelineInvariantError(SynthesisError):
    # A document would be syntactically valid but unusable by the gateway.
    pass


class SerializationError(SynthesisError):
    # Internal invariant violation: a document could not be rendered.
    pass
