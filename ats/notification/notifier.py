import logging

from ats.users.constants import ADMIN, HIRING_MANAGER, RECRUITER
from ats.websocket import messages

logger = logging.getLogger(__name__)


class DomainEventNotifier:
    """
    Fans creation events out to the live connections of a registry.

    ``user_created`` and ``job_created`` reach every open connection.
    ``applicant_created`` reaches only the admins and the two users that own
    the applicant's job.
    """

    def __init__(self, registry):
        self.registry = registry

    async def user_created(self, user_data):
        return await self.registry.broadcast(messages.user_created(user_data))

    async def job_created(self, job_data):
        return await self.registry.broadcast(messages.job_created(job_data))

    async def applicant_created(self, applicant_data, job_id, job_title,
                                hiring_manager_id, recruiter_id):
        message = messages.applicant_created(applicant_data, job_id, job_title)
        return await self.registry.broadcast(
            message,
            predicate=lambda connection: self.can_view_applicant(
                connection, hiring_manager_id, recruiter_id
            )
        )

    @staticmethod
    def can_view_applicant(connection, hiring_manager_id, recruiter_id):
        if not connection.is_bound:
            return False
        if connection.role == ADMIN:
            return True
        if connection.role == HIRING_MANAGER:
            return connection.user_id == hiring_manager_id
        if connection.role == RECRUITER:
            return recruiter_id is not None and connection.user_id == recruiter_id
        return False
