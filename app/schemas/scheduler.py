from pydantic import BaseModel
from typing import Optional, List


class ScheduledJob(BaseModel):
    id: str
    name: str
    next_run: Optional[str]
    trigger: str


class SchedulerStatus(BaseModel):
    running: bool
    jobs: List[ScheduledJob] = []


class JobTriggerResponse(BaseModel):
    job_id: str
    triggered: bool
