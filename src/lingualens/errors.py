"""Typed failures raised by the collaborator backends.

Only DetectionError is fatal to a pipeline run. The per-item errors are
caught inside their stage and resolved there.
"""


class PipelineError(Exception):
    """Base class for all backend failures."""


class DetectionError(PipelineError):
    """Text detection request failed; the whole run is aborted."""


# Name used by callers that think in terms of the annotation service.
AnnotationServiceError = DetectionError


class LanguageDetectionError(PipelineError):
    """Language detection failed for a single text fragment."""


class TranslationError(PipelineError):
    """Translation failed for a single text fragment."""
