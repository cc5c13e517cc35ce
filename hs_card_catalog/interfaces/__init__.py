from .card_source import ICardSource
from .scheduler import IScheduler, Job

__all__ = ["ICardSource", "IScheduler", "Job"]
