# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DateColumn(TypedDict):
    start_date: pendulum.Date
    end_date: pendulum.Date
    label: str
