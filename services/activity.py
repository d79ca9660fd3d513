import logging
import sqlite3

from models.activity_log import ActivityLog

logger = logging.getLogger(__name__)


def record(actor_id, action, details=None):
    """Append an entry to the activity log.

    Called after the mutation it describes has been committed. A failure
    here is logged and otherwise ignored so the mutation stands.
    """
    try:
        ActivityLog.log(actor_id, action, details)
    except sqlite3.Error:
        logger.warning("Failed to record activity %r for user %s", action, actor_id,
                       exc_info=True)
        return False
    return True


def recent(limit=20, actor_id=None):
    """Newest entries first, optionally only those of one actor."""
    return ActivityLog.get_recent(limit=limit, user_id=actor_id)
