"""Aggregate of every endpoint wrapper over one shared client."""

from campus_client.infrastructure.api.admin_api import AdminAPI
from campus_client.infrastructure.api.alerts_api import AlertsAPI
from campus_client.infrastructure.api.auth_api import AuthAPI
from campus_client.infrastructure.api.connections_api import ConnectionsAPI
from campus_client.infrastructure.api.courses_api import CoursesAPI
from campus_client.infrastructure.api.job_faq_api import JobFAQAPI
from campus_client.infrastructure.api.jobs_api import JobsAPI
from campus_client.infrastructure.api.messages_api import MessagesAPI
from campus_client.infrastructure.api.qa_sessions_api import QASessionsAPI
from campus_client.infrastructure.api.referrals_api import ReferralsAPI
from campus_client.infrastructure.api.resume_api import ResumeAPI
from campus_client.infrastructure.api.users_api import UsersAPI
from campus_client.infrastructure.http.api_client import CampusApiClient


class CampusAPI:
    """One instance of each backend area, sharing the bearer header.

    Example:
        >>> api = CampusAPI(CampusApiClient(base_url=settings.api_base_url))
        >>> result = await api.jobs.get_jobs({"type": "Internship"})
    """

    def __init__(self, client: CampusApiClient, *, auth_prefix: str = "/auth") -> None:
        self.client = client
        self.auth = AuthAPI(client, prefix=auth_prefix)
        self.users = UsersAPI(client)
        self.jobs = JobsAPI(client)
        self.referrals = ReferralsAPI(client)
        self.admin = AdminAPI(client)
        self.alerts = AlertsAPI(client)
        self.messages = MessagesAPI(client)
        self.qa_sessions = QASessionsAPI(client)
        self.job_faq = JobFAQAPI(client)
        self.resume = ResumeAPI(client)
        self.courses = CoursesAPI(client)
        self.connections = ConnectionsAPI(client)
