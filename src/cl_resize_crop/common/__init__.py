"""Common module - compute module base class and job schemas."""

from .compute_module import ComputeModule
from .schemas import BaseJobParams, JobRecord, JobRecordUpdate, JobStatus, TaskOutput

__all__ = [
    "BaseJobParams",
    "ComputeModule",
    "JobRecord",
    "JobRecordUpdate",
    "JobStatus",
    "TaskOutput",
]
