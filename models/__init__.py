from .activity_record import Actor, ActivityRecord
from .user_profile import UserProfile
from .company_report import CompanyReport

__all__ = [
    "Actor",
    "ActivityRecord",
    "UserProfile",
    "CompanyReport",
]
