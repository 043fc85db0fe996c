from .detector import Dialect, detect_dialect
from .fields import FieldRecognizer, RECOGNIZERS, extract_fields
from .base import BaseAccumulator
from .summary_export import SummaryExportAccumulator
from .verbose import VerboseAccumulator, GenericAccumulator
from .factory import AccumulatorFactory

__all__ = [
    "Dialect",
    "detect_dialect",
    "FieldRecognizer",
    "RECOGNIZERS",
    "extract_fields",
    "BaseAccumulator",
    "SummaryExportAccumulator",
    "VerboseAccumulator",
    "GenericAccumulator",
    "AccumulatorFactory",
]
