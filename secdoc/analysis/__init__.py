from secdoc.analysis.models import AnalysisRequest, AnalysisResult, StructuredSections
from secdoc.analysis.orchestrator import AnalysisOrchestrator, build_orchestrator
from secdoc.analysis.structurer import structure_analysis

__all__ = [
    "AnalysisOrchestrator",
    "AnalysisRequest",
    "AnalysisResult",
    "StructuredSections",
    "build_orchestrator",
    "structure_analysis",
]
