from datetime import datetime, date, time, timedelta, timezone
from typing import Optional, Tuple


def utc_today(now: Optional[datetime] = None) -> date:
    """Date UTC de `now` (un datetime naïf est considéré comme UTC)"""
    if now is None:
        now = datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date()


def expiry_window(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """
    Fenêtre de notification : aujourd'hui 00:00:00 -> demain 23:59:59 (UTC)

    Seule la partie date de `now` compte ; selon l'heure d'exécution,
    la fenêtre couvre donc entre 24h et 48h devant nous.
    """
    today = utc_today(now)
    tomorrow = today + timedelta(days=1)

    start = datetime.combine(today, time(0, 0, 0))
    end = datetime.combine(tomorrow, time(23, 59, 59))
    return start, end


def format_window_bound(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")
