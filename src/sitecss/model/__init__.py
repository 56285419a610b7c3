from sitecss.model.analysis import AnalysisConfig, StylesheetRef
from sitecss.model.page import PageSet
from sitecss.model.result import ConsolidationResult

__all__ = ["AnalysisConfig", "ConsolidationResult", "PageSet", "StylesheetRef"]
