"""Time utility tool."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from actionkit.tools.base import Tool


class Clock(Tool):
    """Returns the current time."""

    @classmethod
    def define_actions(cls) -> None:
        cls.define_action(
            "now",
            description="Get the current date/time in ISO-8601 format, in UTC unless an offset is given.",
            parameters=lambda p: p.property(
                "utc_offset_hours",
                type="integer",
                description="Hours to add to UTC, between -12 and 14.",
            ),
        )

    def now(self, utc_offset_hours: int | None = None) -> dict[str, str]:
        tz = timezone.utc
        if utc_offset_hours is not None:
            if not -12 <= utc_offset_hours <= 14:
                raise ValueError(f"utc_offset_hours out of range: {utc_offset_hours}")
            tz = timezone(timedelta(hours=utc_offset_hours))
        return {"time": datetime.now(tz).isoformat()}
