from django.core.cache import cache

from ats.common.api.tests.common import BaseTestCase as TestCase
from ats.recruitment.api.v1.tests.factory import ApplicantFactory, JobFactory
from ats.recruitment.constants import (
    NEW, SCREENING, HIRED, ON_HOLD, REJECTED
)
from ats.recruitment.exceptions import InvalidTransition
from ats.recruitment.utils.cache import (
    applicant_list_cache_key, recent_applicants_cache_key
)
from ats.recruitment.utils.status import CandidateStatusManager
from ats.users.api.v1.tests.factory import UserFactory
from ats.users.constants import RECRUITER


class TestCandidateStatusManager(TestCase):

    def setUp(self):
        super().setUp()
        self.recruiter = UserFactory(role=RECRUITER)
        self.job = JobFactory(recruiter=self.recruiter)
        self.applicant = ApplicantFactory(job=self.job, notes='Initial notes')
        self.manager = CandidateStatusManager()

    def test_transition_along_the_pipeline(self):
        applicant = self.manager.transition(
            self.applicant.id, SCREENING, 'Strong CV'
        )
        self.assertEqual(applicant.status, SCREENING)
        self.assertEqual(applicant.notes, 'Strong CV')

        with self.assertRaises(InvalidTransition) as context:
            self.manager.transition(self.applicant.id, HIRED)

        self.assertEqual(context.exception.current_status, SCREENING)
        self.assertEqual(context.exception.target_status, HIRED)

        self.applicant.refresh_from_db()
        self.assertEqual(self.applicant.status, SCREENING)
        self.assertEqual(self.applicant.notes, 'Strong CV')

    def test_notes_are_replaced(self):
        self.manager.transition(self.applicant.id, SCREENING)
        self.applicant.refresh_from_db()
        self.assertEqual(self.applicant.notes, '')

    def test_put_on_hold(self):
        applicant = self.manager.put_on_hold(self.applicant.id, 'Budget freeze')
        self.assertEqual(applicant.status, ON_HOLD)
        self.assertEqual(applicant.notes, 'Budget freeze')

        # on hold leads nowhere
        for status in (NEW, SCREENING, ON_HOLD):
            with self.subTest(status=status):
                with self.assertRaises(InvalidTransition):
                    self.manager.transition(self.applicant.id, status)

    def test_terminal_status_cannot_be_put_on_hold(self):
        applicant = ApplicantFactory(job=self.job, status=REJECTED)
        with self.assertRaises(InvalidTransition):
            self.manager.put_on_hold(applicant.id)

    def test_unknown_target_status(self):
        with self.assertRaises(ValueError):
            self.manager.transition(self.applicant.id, 'interviewing')

    def test_caches_are_invalidated_after_commit(self):
        list_key = applicant_list_cache_key(self.job.id)
        feed_key = recent_applicants_cache_key(self.recruiter.id)
        cache.set(list_key, ['stale'])
        cache.set(feed_key, ['stale'])

        with self.captureOnCommitCallbacks(execute=True):
            self.manager.transition(self.applicant.id, SCREENING)

        self.assertIsNone(cache.get(list_key))
        self.assertIsNone(cache.get(feed_key))

    def test_rejected_move_keeps_caches(self):
        list_key = applicant_list_cache_key(self.job.id)
        cache.set(list_key, ['cached'])

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            with self.assertRaises(InvalidTransition):
                self.manager.transition(self.applicant.id, HIRED)

        self.assertEqual(callbacks, [])
        self.assertEqual(cache.get(list_key), ['cached'])
