# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday schemas."""

import datetime
from collections.abc import Mapping, Sequence
from typing import TypeAlias

from worktime.schemas.common import SnapshotModel


class Holiday(SnapshotModel):
    """A public holiday."""

    date: datetime.date
    name: str


HolidaysByYear: TypeAlias = Mapping[int, Sequence[Holiday]]
