"""
COB Runner Scheduler

Monthly duty rota generation with workload balancing and export.
"""

__version__ = "0.1.0"

from .assignment.engine import ScheduleEngine, generate_schedule
from .assignment.models import Schedule, InvalidInputError, InternalError
from .storage import ScheduleStore

__all__ = [
    "ScheduleEngine",
    "generate_schedule",
    "Schedule",
    "InvalidInputError",
    "InternalError",
    "ScheduleStore"
]
