from datetime import datetime, timezone


def utcnow() -> datetime:
    """Heure UTC naive (colonnes DateTime SQLite sans timezone)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
