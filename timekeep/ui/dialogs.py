"""
Dialog requests for confirmation and progress prompts.

Views do not open dialogs themselves; they ask the DialogEvents hub, and
whatever dialog host is connected to its signals shows the prompt.
"""

import logging
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict
from PySide6.QtCore import QObject, Signal

from timekeep.i18n import tr

logger = logging.getLogger(__name__)


class ConfirmRequest(BaseModel):
    """A pending yes/no question. `confirm()` runs the callback once."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str
    message: str
    on_confirm: Optional[Callable[[], None]] = None
    answered: bool = False

    def confirm(self):
        if self.answered:
            return
        self.answered = True
        if self.on_confirm is not None:
            self.on_confirm()

    def cancel(self):
        self.answered = True


class DialogEvents(QObject):
    """
    Publish/subscribe hub for dialog prompts.

    Signals:
        confirm_requested(ConfirmRequest): a confirmation should be shown
        progress_shown(str): show a progress dialog with this message
        progress_closed(): hide the progress dialog
    """

    confirm_requested = Signal(object)
    progress_shown = Signal(str)
    progress_closed = Signal()

    def confirm_dialog(self, title: str, message: str,
                       on_confirm: Optional[Callable[[], None]] = None) -> ConfirmRequest:
        """
        Ask the user to confirm an action.

        Args:
            title: Dialog title; empty uses the default "Confirm" label
            message: Question shown to the user
            on_confirm: Called if the user confirms

        Returns:
            The request that was published.
        """
        request = ConfirmRequest(title=title or tr("dialog.confirm"), message=message,
                                 on_confirm=on_confirm)
        logger.debug("Confirmation requested: %s", request.title)
        self.confirm_requested.emit(request)
        return request

    def show_progress(self, message: str = ""):
        self.progress_shown.emit(message or tr("dialog.progress"))

    def close_progress(self):
        self.progress_closed.emit()
