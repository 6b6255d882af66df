from django.core.cache import cache
from django.urls import reverse
from rest_framework import status

from ats.common.api.tests.common import ATSTestCase
from ats.recruitment.api.v1.tests.factory import JobFactory, ApplicantFactory
from ats.recruitment.constants import (
    NEW, SCREENING, SCREENING_SELECTED, SCREENING_REJECTED, HIRED, ON_HOLD
)
from ats.recruitment.utils.cache import recent_applicants_cache_key


class TestApplicantAPI(ATSTestCase):

    def setUp(self):
        super().setUp()
        self.job = JobFactory(hiring_manager=self.manager, recruiter=self.recruiter)
        self.applicant = ApplicantFactory(job=self.job)

    def applicant_url(self, applicant, action=None):
        if action:
            return reverse(
                f'api_v1:recruitment:applicants-{action}',
                kwargs={'pk': applicant.pk}
            )
        return reverse(
            'api_v1:recruitment:applicants-detail', kwargs={'pk': applicant.pk}
        )

    def test_next_statuses(self):
        self.client.force_login(self.recruiter)
        response = self.client.get(self.applicant_url(self.applicant, 'next-statuses'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.json()['permitted_next'],
            [{'value': SCREENING, 'label': 'Screening'}]
        )
        self.assertTrue(response.json()['can_put_on_hold'])

        self.applicant.status = SCREENING
        self.applicant.save()
        response = self.client.get(self.applicant_url(self.applicant, 'next-statuses'))
        self.assertEqual(
            [item['value'] for item in response.json()['permitted_next']],
            [SCREENING_SELECTED, SCREENING_REJECTED]
        )

    def test_transition(self):
        self.client.force_login(self.recruiter)
        response = self.client.post(
            self.applicant_url(self.applicant, 'transition'),
            {'status': SCREENING, 'notes': 'Strong CV'}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.json())
        self.assertEqual(response.json()['status'], SCREENING)
        self.assertEqual(response.json()['notes'], 'Strong CV')

        response = self.client.post(
            self.applicant_url(self.applicant, 'transition'), {'status': HIRED}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('status', response.json())
        self.assertEqual(
            response.json()['message'],
            'Cannot move applicant from `screening` to `hired`.'
        )
        self.applicant.refresh_from_db()
        self.assertEqual(self.applicant.status, SCREENING)

    def test_transition_to_unknown_status(self):
        self.client.force_login(self.recruiter)
        response = self.client.post(
            self.applicant_url(self.applicant, 'transition'),
            {'status': 'interviewing'}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_hold(self):
        self.client.force_login(self.recruiter)
        response = self.client.post(
            self.applicant_url(self.applicant, 'hold'), {'notes': 'Budget freeze'}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.json())
        self.assertEqual(response.json()['status'], ON_HOLD)

        response = self.client.post(self.applicant_url(self.applicant, 'hold'))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_only_the_assigned_recruiter_moves_applicants(self):
        cases = (
            (self.other_recruiter, status.HTTP_403_FORBIDDEN),
            (self.manager, status.HTTP_403_FORBIDDEN),
            (self.admin, status.HTTP_403_FORBIDDEN),
        )
        for user, status_code in cases:
            with self.subTest(user=user.username):
                self.client.force_login(user)
                response = self.client.post(
                    self.applicant_url(self.applicant, 'transition'),
                    {'status': SCREENING}
                )
                self.assertEqual(response.status_code, status_code)

        self.applicant.refresh_from_db()
        self.assertEqual(self.applicant.status, NEW)

    def test_read_access(self):
        cases = (
            (self.admin, status.HTTP_200_OK),
            (self.manager, status.HTTP_200_OK),
            (self.recruiter, status.HTTP_200_OK),
            (self.other_manager, status.HTTP_403_FORBIDDEN),
            (self.other_recruiter, status.HTTP_403_FORBIDDEN),
        )
        for user, status_code in cases:
            with self.subTest(user=user.username):
                self.client.force_login(user)
                response = self.client.get(self.applicant_url(self.applicant))
                self.assertEqual(response.status_code, status_code)

    def test_update_profile_does_not_touch_status(self):
        self.client.force_login(self.recruiter)
        response = self.client.patch(
            self.applicant_url(self.applicant),
            {'current_company': 'Acme', 'status': HIRED}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.json())
        self.assertEqual(response.json()['current_company'], 'Acme')
        self.assertEqual(response.json()['status'], NEW)

    def test_delete_applicant(self):
        self.client.force_login(self.recruiter)
        response = self.client.delete(self.applicant_url(self.applicant))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)


class TestRecentApplicants(ATSTestCase):

    @property
    def recent_applicants_url(self):
        return reverse('api_v1:recruitment:recruiter-recent-applicants')

    def test_recent_applicants(self):
        job = JobFactory(recruiter=self.recruiter)
        applicants = ApplicantFactory.create_batch(12, job=job)
        ApplicantFactory(job=JobFactory(recruiter=self.other_recruiter))

        self.client.force_login(self.recruiter)
        response = self.client.get(self.recent_applicants_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.json()), 10)
        self.assertEqual(
            {applicant['id'] for applicant in response.json()} - {a.id for a in applicants},
            set()
        )
        self.assertIsNotNone(cache.get(recent_applicants_cache_key(self.recruiter.id)))

    def test_recruiters_only(self):
        self.client.force_login(self.manager)
        response = self.client.get(self.recent_applicants_url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
