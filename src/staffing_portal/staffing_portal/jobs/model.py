from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Job:
    id: str = ""
    title: str = ""
    company: str = ""
    store_name: Optional[str] = None
    description: str = ""
    posted_date: Optional[str] = None
    admin_id: Optional[str] = None
    experience_level: str = ""
    salary_range: str = ""
    number_of_openings: int = 1
    job_category: str = ""
    job_city: str = ""
    locality: str = ""
    min_qualification: str = ""
    gender_preference: str = ""
    job_type: str = ""
    work_location_type: str = ""
    working_days: str = ""
    job_shift: str = ""
    interview_address: str = ""
    # 'Fixed' or 'Fixed + Incentive'
    salary_type: str = "Fixed"
    incentive: Optional[str] = None
