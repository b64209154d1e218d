"""Use cases de análise de listas de relacionamento."""

from app.use_cases.analysis.analyze_lists import AnalysisReport, AnalyzeListsUseCase

__all__ = [
    "AnalysisReport",
    "AnalyzeListsUseCase",
]
