"""
Assignment module for monthly COB runner rotas.
"""

from .engine import ScheduleEngine, generate_schedule, DEFAULT_NUM_ASSIGNEES
from .holidays import STATIC_HOLIDAYS, build_holiday_set, is_business_day
from .models import Schedule, SchedulerError, InvalidInputError, InternalError

__all__ = [
    "ScheduleEngine",
    "generate_schedule",
    "DEFAULT_NUM_ASSIGNEES",
    "STATIC_HOLIDAYS",
    "build_holiday_set",
    "is_business_day",
    "Schedule",
    "SchedulerError",
    "InvalidInputError",
    "InternalError",
]
