"""ComputeModule - Abstract base class for compute tasks."""

from abc import ABC, abstractmethod
from typing import Callable, Generic

from loguru import logger
from pydantic import ValidationError

from .schemas import P, Q, JobRecord, JobRecordUpdate, JobStatus


class ComputeModule(ABC, Generic[P, Q]):
    """
    Stateless, template-method based compute module.

    - execute() validates the raw job params once and passes them to run()
    - run() does the work and returns metadata only
    - failures never escape execute(); they become an error update
    """

    schema: type[P]

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    def setup(self) -> None:
        """Optional per-execution setup."""
        pass

    @abstractmethod
    async def run(
        self,
        job_id: str,
        params: P,
        progress_callback: Callable[[int], None] | None = None,
    ) -> Q: ...

    async def execute(
        self,
        job_record: JobRecord,
        progress_callback: Callable[[int], None] | None = None,
    ) -> JobRecordUpdate:
        if job_record.task_type != self.task_type:
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=(
                    f"Task type mismatch: job is '{job_record.task_type}', "
                    f"module handles '{self.task_type}'"
                ),
            )

        try:
            params = self.schema.model_validate(job_record.params)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            logger.error(f"Invalid params for job {job_record.job_id}: {problems}")
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=f"Invalid params: {problems}",
            )

        try:
            self.setup()

            output = await self.run(job_record.job_id, params, progress_callback)

            return JobRecordUpdate(
                status=JobStatus.completed,
                output=output.model_dump(mode="json"),
                progress=100,
            )

        except Exception as exc:
            logger.error(f"Job {job_record.job_id} ({self.task_type}) failed: {exc}")
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=str(exc),
            )
