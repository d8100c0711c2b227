"""
Scheduled Skills

Timer-driven handlers and the cron table that names them.
"""
from .cron import CRON_JOBS, SKILLS, CronJob, SkillInfo, get_job
from .jobs import SkillJobs, category_for_hour, is_recent, rotation_category

__all__ = [
    "CRON_JOBS",
    "SKILLS",
    "CronJob",
    "SkillInfo",
    "SkillJobs",
    "category_for_hour",
    "get_job",
    "is_recent",
    "rotation_category",
]
