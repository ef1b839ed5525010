from .generator import AiAnalyzer
from .orchestrator import AnalysisOrchestrator, analyze_heuristically

__all__ = ["AiAnalyzer", "AnalysisOrchestrator", "analyze_heuristically"]
