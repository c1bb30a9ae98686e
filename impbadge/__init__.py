from .config import DisplayConfig
from .push_job import PushJobBuilder

__all__ = ["DisplayConfig", "PushJobBuilder"]
