"""Services layer - Presentation logic"""

from .summary_service import SummaryService, TaskNotFoundError
from .ticker_service import ElapsedTicker

__all__ = ["SummaryService", "TaskNotFoundError", "ElapsedTicker"]
