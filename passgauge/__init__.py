"""PassGauge: password strength analysis and policy-driven password generation."""

from .charsets import CharacterClass
from .evaluator import AnalysisReport, analyze
from .generator import GenerationPolicy, InvalidPolicy, SystemRandomSource, generate
from .score import StrengthTier

__version__ = "0.1.0"

__all__ = [
    "AnalysisReport",
    "CharacterClass",
    "GenerationPolicy",
    "InvalidPolicy",
    "StrengthTier",
    "SystemRandomSource",
    "analyze",
    "generate",
]
