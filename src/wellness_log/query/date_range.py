# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from wellness_log.model.filter import DateRange


def get_date_range_boundaries(
    date_range: DateRange,
    now: pendulum.DateTime,
) -> tuple[pendulum.DateTime, Optional[pendulum.DateTime]]:
    """
    Get the (start, end) instants of a relative date range.

    Only lastMonth has an end boundary; the other ranges stay open going
    forward in time, so future-dated entries match them.
    """
    local_now = now.in_tz("local")

    match date_range:
        case DateRange.TODAY:
            return local_now.start_of("day"), None
        case DateRange.LAST_7:
            return local_now.subtract(hours=7 * 24), None
        case DateRange.LAST_30:
            return local_now.subtract(hours=30 * 24), None
        case DateRange.THIS_MONTH:
            return local_now.start_of("month"), None
        case DateRange.LAST_MONTH:
            previous_month = local_now.start_of("month").subtract(months=1)
            return previous_month, previous_month.end_of("month")
    raise ValueError(f"Unknown date range: {date_range}")
