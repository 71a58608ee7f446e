from datetime import datetime, timezone


def utcnow() -> datetime:
    """Instante actual en UTC, sin tzinfo (así se guarda en la BDD)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_utc(value: datetime) -> datetime:
    """Marca como UTC un datetime leído de la BDD."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
