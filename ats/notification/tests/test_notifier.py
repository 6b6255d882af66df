from django.test import SimpleTestCase

from ats.notification.notifier import DomainEventNotifier
from ats.users.constants import ADMIN, HIRING_MANAGER, RECRUITER
from ats.websocket.constants import APPLICANT_CREATED, JOB_CREATED, USER_CREATED
from ats.websocket.tests.common import build_registry


class TestDomainEventNotifier(SimpleTestCase):

    def setUp(self):
        self.registry, self.transport = build_registry(
            ('admin', 1, ADMIN),
            ('manager', 5, HIRING_MANAGER),
            ('other-manager', 6, HIRING_MANAGER),
            ('recruiter', 9, RECRUITER),
            ('anonymous', None, None),
        )
        self.notifier = DomainEventNotifier(self.registry)

    async def test_applicant_created_reaches_owners_and_admins(self):
        delivered = await self.notifier.applicant_created(
            {'id': 3, 'first_name': 'Ada'},
            job_id=11, job_title='Backend Engineer',
            hiring_manager_id=5, recruiter_id=9
        )
        self.assertEqual(delivered, 3)
        self.assertEqual(
            {to for to, _ in self.transport.of_type(APPLICANT_CREATED)},
            {'admin', 'manager', 'recruiter'}
        )
        _, message = self.transport.sent[0]
        self.assertEqual(message, {
            'type': APPLICANT_CREATED,
            'applicant': {'id': 3, 'first_name': 'Ada'},
            'jobId': 11,
            'jobTitle': 'Backend Engineer',
        })

    async def test_applicant_created_without_recruiter(self):
        delivered = await self.notifier.applicant_created(
            {'id': 3}, job_id=11, job_title='Backend Engineer',
            hiring_manager_id=5, recruiter_id=None
        )
        self.assertEqual(delivered, 2)
        self.assertEqual(
            {to for to, _ in self.transport.sent}, {'admin', 'manager'}
        )

    async def test_user_and_job_created_reach_everyone(self):
        self.assertEqual(await self.notifier.user_created({'id': 20}), 5)
        self.assertEqual(await self.notifier.job_created({'id': 11}), 5)
        self.assertEqual(len(self.transport.of_type(USER_CREATED)), 5)
        self.assertEqual(len(self.transport.of_type(JOB_CREATED)), 5)

    async def test_failed_delivery_does_not_stop_fan_out(self):
        self.transport.failing.add('manager')
        with self.assertLogs('ats.websocket.registry', level='ERROR'):
            delivered = await self.notifier.job_created({'id': 11})
        self.assertEqual(delivered, 4)
