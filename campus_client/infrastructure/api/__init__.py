"""Endpoint wrappers for each backend area."""

from campus_client.infrastructure.api.admin_api import AdminAPI
from campus_client.infrastructure.api.alerts_api import AlertsAPI
from campus_client.infrastructure.api.auth_api import AuthAPI
from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI
from campus_client.infrastructure.api.campus_api import CampusAPI
from campus_client.infrastructure.api.connections_api import ConnectionsAPI
from campus_client.infrastructure.api.courses_api import CoursesAPI
from campus_client.infrastructure.api.job_faq_api import JobFAQAPI
from campus_client.infrastructure.api.jobs_api import JobsAPI
from campus_client.infrastructure.api.messages_api import MessagesAPI
from campus_client.infrastructure.api.qa_sessions_api import QASessionsAPI
from campus_client.infrastructure.api.referrals_api import ReferralsAPI
from campus_client.infrastructure.api.resume_api import ResumeAPI
from campus_client.infrastructure.api.users_api import UsersAPI

__all__ = [
    "AdminAPI",
    "AlertsAPI",
    "ApiResult",
    "AuthAPI",
    "BaseResourceAPI",
    "CampusAPI",
    "ConnectionsAPI",
    "CoursesAPI",
    "JobFAQAPI",
    "JobsAPI",
    "MessagesAPI",
    "QASessionsAPI",
    "ReferralsAPI",
    "ResumeAPI",
    "UsersAPI",
]
