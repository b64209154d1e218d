"""Protocolos e contratos do core da aplicação."""

from .analysis_store import AnalysisStoreError, AnalysisStoreProtocol
from .insights_client import InsightsClientProtocol

__all__ = [
    "AnalysisStoreError",
    "AnalysisStoreProtocol",
    "InsightsClientProtocol",
]
