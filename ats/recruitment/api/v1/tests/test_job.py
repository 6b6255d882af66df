from django.core.cache import cache
from django.urls import reverse
from rest_framework import status

from ats.common.api.tests.common import ATSTestCase
from ats.recruitment.api.v1.tests.factory import JobFactory, ApplicantFactory
from ats.recruitment.models import Job, Applicant
from ats.recruitment.utils.cache import applicant_list_cache_key


class TestJobAPI(ATSTestCase):

    def setUp(self):
        super().setUp()
        self.job = JobFactory(hiring_manager=self.manager, recruiter=self.recruiter)
        self.other_job = JobFactory(hiring_manager=self.other_manager)

    @property
    def job_list_url(self):
        return reverse('api_v1:recruitment:jobs-list')

    def job_detail_url(self, job):
        return reverse('api_v1:recruitment:jobs-detail', kwargs={'pk': job.pk})

    def job_assign_url(self, job):
        return reverse('api_v1:recruitment:jobs-assign', kwargs={'pk': job.pk})

    def job_applicants_url(self, job):
        return reverse('api_v1:recruitment:jobs-applicants', kwargs={'pk': job.pk})

    @property
    def payload(self):
        return {
            'title': 'Backend Engineer',
            'department': 'Engineering',
            'location': 'Remote',
            'description': 'Build services',
            'requirements': 'Python',
            'min_salary': 50000,
            'max_salary': 80000,
            'employment_type': 'Full-time',
        }

    def test_list_is_scoped_by_role(self):
        cases = (
            (self.admin, {self.job.id, self.other_job.id}),
            (self.manager, {self.job.id}),
            (self.other_manager, {self.other_job.id}),
            (self.recruiter, {self.job.id}),
            (self.other_recruiter, set()),
        )
        for user, expected in cases:
            with self.subTest(user=user.username):
                self.client.force_login(user)
                response = self.client.get(self.job_list_url)
                self.assertEqual(response.status_code, status.HTTP_200_OK)
                self.assertEqual({job['id'] for job in response.json()}, expected)

    def test_hiring_manager_creates_job(self):
        self.client.force_login(self.manager)
        response = self.client.post(self.job_list_url, self.payload)

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.json())
        self.assertEqual(response.json()['hiring_manager'], self.manager.id)
        self.assertIsNone(response.json()['recruiter'])
        self.assertEqual(response.json()['status'], 'active')

    def test_only_hiring_managers_create_jobs(self):
        for user in (self.admin, self.recruiter):
            with self.subTest(user=user.username):
                self.client.force_login(user)
                response = self.client.post(self.job_list_url, self.payload)
                self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_salary_range_is_validated(self):
        self.client.force_login(self.manager)
        response = self.client.post(
            self.job_list_url, {**self.payload, 'min_salary': 90000}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('max_salary', response.json())

    def test_foreign_job_access(self):
        self.client.force_login(self.manager)

        response = self.client.get(self.job_detail_url(self.other_job))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()['message'], 'You can only view your own jobs')

        response = self.client.patch(
            self.job_detail_url(self.other_job), {'title': 'Hijacked'}
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(
            response.json()['message'], 'You can only update your own jobs'
        )

    def test_recruiter_reads_assigned_job_only(self):
        self.client.force_login(self.recruiter)
        response = self.client.get(self.job_detail_url(self.job))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.get(self.job_detail_url(self.other_job))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(
            response.json()['message'], 'You can only view jobs assigned to you'
        )

    def test_update_and_delete_job(self):
        self.client.force_login(self.manager)
        response = self.client.patch(
            self.job_detail_url(self.job), {'status': 'on_hold'}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.json())
        self.assertEqual(response.json()['status'], 'on_hold')

        ApplicantFactory(job=self.job)
        response = self.client.delete(self.job_detail_url(self.job))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Job.objects.filter(pk=self.job.pk).exists())
        self.assertFalse(Applicant.objects.filter(job_id=self.job.pk).exists())

    def test_assign_recruiter(self):
        self.client.force_login(self.other_manager)
        response = self.client.post(
            self.job_assign_url(self.other_job),
            {'recruiter_id': self.other_recruiter.id}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.json())
        self.assertEqual(response.json()['recruiter'], self.other_recruiter.id)

        self.other_job.refresh_from_db()
        self.assertEqual(self.other_job.recruiter, self.other_recruiter)

    def test_assign_requires_an_existing_recruiter(self):
        self.client.force_login(self.manager)

        response = self.client.post(
            self.job_assign_url(self.job), {'recruiter_id': 999999}
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['message'], 'Recruiter not found')

        response = self.client.post(
            self.job_assign_url(self.job), {'recruiter_id': self.other_manager.id}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['message'], 'User is not a recruiter')

    def test_assign_on_foreign_job(self):
        self.client.force_login(self.manager)
        response = self.client.post(
            self.job_assign_url(self.other_job), {'recruiter_id': self.recruiter.id}
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_assigned_recruiter_adds_applicant(self):
        self.client.force_login(self.recruiter)
        response = self.client.post(
            self.job_applicants_url(self.job),
            {
                'first_name': 'Ada',
                'last_name': 'Lovelace',
                'email': 'ada@example.com',
                'status': 'hired',
            }
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.json())
        self.assertEqual(response.json()['job'], self.job.id)
        self.assertEqual(response.json()['status'], 'new')

    def test_other_users_cannot_add_applicants(self):
        cases = (
            (self.other_recruiter, 'You can only add applicants to jobs assigned to you'),
            (self.manager, None),
        )
        for user, message in cases:
            with self.subTest(user=user.username):
                self.client.force_login(user)
                response = self.client.post(
                    self.job_applicants_url(self.job),
                    {'first_name': 'Ada', 'last_name': 'L', 'email': 'ada@example.com'}
                )
                self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
                if message:
                    self.assertEqual(response.json()['message'], message)

    def test_applicant_list_is_cached_and_invalidated(self):
        ApplicantFactory(job=self.job)
        self.client.force_login(self.manager)

        response = self.client.get(self.job_applicants_url(self.job))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.json()), 1)
        self.assertIsNotNone(cache.get(applicant_list_cache_key(self.job.id)))

        self.client.force_login(self.recruiter)
        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(
                self.job_applicants_url(self.job),
                {'first_name': 'Ada', 'last_name': 'L', 'email': 'ada@example.com'}
            )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(cache.get(applicant_list_cache_key(self.job.id)))

        self.client.force_login(self.manager)
        response = self.client.get(self.job_applicants_url(self.job))
        self.assertEqual(len(response.json()), 2)
