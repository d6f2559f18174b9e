"""
Composition root for the presentation layer.

Views receive one AppContext instead of reaching for globals: it holds the
settings and the shared Qt objects (log bridge, dialog hub, loading state,
live ticker, summary builder), all configured from the user's preferences.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

from timekeep.i18n import resolve_language, set_language
from timekeep.infra.config import Settings, configure_logging, get_settings
from timekeep.infra.event_log import EventLog
from timekeep.services import ElapsedTicker, SummaryService
from timekeep.ui import DialogEvents, LoadState

logger = logging.getLogger(__name__)


class AppContext(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: Settings
    event_log: EventLog
    dialogs: DialogEvents
    load_state: LoadState
    ticker: ElapsedTicker
    summaries: SummaryService


def create_context(settings: Optional[Settings] = None) -> AppContext:
    """
    Wire up the shared presentation objects.

    Args:
        settings: Settings to use; defaults to the global instance

    Returns:
        A ready-to-use AppContext.
    """
    settings = settings or get_settings()
    prefs = settings.preferences

    configure_logging(settings)
    set_language(resolve_language(prefs.language))

    context = AppContext(
        settings=settings,
        event_log=EventLog(debug_enabled=prefs.debug_logging),
        dialogs=DialogEvents(),
        load_state=LoadState(),
        ticker=ElapsedTicker(interval_ms=prefs.tick_interval_ms),
        summaries=SummaryService(),
    )
    logger.info("%s presentation layer ready", settings.app_name)
    return context
