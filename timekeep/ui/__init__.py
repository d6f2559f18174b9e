"""UI layer - Qt objects that views connect to"""

from .dialogs import ConfirmRequest, DialogEvents
from .load_state import LoadState

__all__ = ["ConfirmRequest", "DialogEvents", "LoadState"]
