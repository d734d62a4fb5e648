from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty, require_positive_int
from ..core.exceptions import ValidationError
from ..documents.listeners import Unsubscribe
from .model import Job
from .repository import JobRepository

logger = logging.getLogger(__name__)

_JOB_FIELDS = {f.name for f in fields(Job)} - {"id", "posted_date", "admin_id"}


class JobService:
    def __init__(self, jobs: JobRepository):
        self._jobs = jobs

    @staticmethod
    def _clean(payload: Mapping[str, Any]) -> dict[str, Any]:
        data = {k: v for k, v in payload.items() if k in _JOB_FIELDS}
        if "title" in data:
            data["title"] = require_non_empty(data["title"], "Job title")
        if "company" in data:
            data["company"] = require_non_empty(data["company"], "Company")
        if "number_of_openings" in data:
            data["number_of_openings"] = require_positive_int(data["number_of_openings"], "Number of openings")
        return data

    def list_jobs(self) -> list[Job]:
        return self._jobs.list_latest()

    def get(self, job_id: str) -> Job:
        return self._jobs.require(job_id)

    def create(self, payload: Mapping[str, Any], *, admin_id: Optional[str] = None) -> Job:
        data = self._clean(payload)
        if "title" not in data or "company" not in data:
            raise ValidationError("Job title and company are required")
        job = self._jobs.add(Job(**data, admin_id=admin_id, posted_date=now_local().isoformat()))
        logger.info("Posted job %s (%s)", job.id, job.title)
        return job

    def update(self, job_id: str, payload: Mapping[str, Any]) -> Job:
        self._jobs.require(job_id)
        data = self._clean(payload)
        if not data:
            raise ValidationError("Nothing to update")
        return self._jobs.update(job_id, data)

    def delete(self, job_id: str) -> None:
        if not self._jobs.delete(job_id):
            raise ValidationError("Job does not exist")

    def listen(self, callback: Callable[[list[Job]], None]) -> Unsubscribe:
        return self._jobs.on_change(callback)
