# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum


class DateRange(StrEnum):
    TODAY = "today"
    LAST_7 = "last7"
    LAST_30 = "last30"
    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"


class FilterSpec(TypedDict, total=False):
    search_text: Optional[str]
    type: Optional[str]
    date_range: Optional[DateRange]
    date_from: Optional[pendulum.Date]
    date_to: Optional[pendulum.Date]


class FilterStatus(StrEnum):
    NONE = "none"
    NO_RESULTS = "no_results"
    ALL_MATCH = "all_match"
    PARTIAL = "partial"
