"""
Loading indicator state shared by views that issue backend calls.
"""

from PySide6.QtCore import QObject, Signal


class LoadState(QObject):
    """
    Counts outstanding loads so overlapping calls keep the spinner visible
    until the last one finishes.
    """

    loading_changed = Signal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.loading = 0

    @property
    def is_loading(self) -> bool:
        return self.loading > 0

    def start_loading(self):
        self.loading += 1
        if self.loading == 1:
            self.loading_changed.emit(True)

    def done_loading(self):
        # Unbalanced calls must not drive the counter negative
        if self.loading > 0:
            self.loading -= 1
            if self.loading == 0:
                self.loading_changed.emit(False)
