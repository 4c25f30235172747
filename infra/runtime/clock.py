from __future__ import annotations

from datetime import datetime, timezone, tzinfo


class SystemClock:
    """Timezone-aware wall clock; UTC unless another zone is given."""

    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)
