import contextlib

from django.core.cache import cache
from django.db import transaction
from rest_framework.test import APITestCase

from ats.users.api.v1.tests.factory import UserFactory
from ats.users.constants import ADMIN, HIRING_MANAGER, RECRUITER


class BaseTestCase(APITestCase):

    @classmethod
    def setUpTestData(cls):
        cache.clear()
        super().setUpTestData()

    def tearDown(self) -> None:
        cache.clear()
        super().tearDown()

    @contextlib.contextmanager
    def atomicSubTest(self, **kwargs):
        """
        :keyword kwargs: kwargs to pass in subTest
        :return: A ContextManager which will rollback to initial save point upon exit

        Usage
        ---
        .. code-block:: python

            for case in cases:
                with self.atomicSubTest(case=case):
                    run_test(case)
        """
        savepoint = transaction.savepoint()

        try:
            with self.subTest(**kwargs):
                yield savepoint
        finally:
            transaction.savepoint_rollback(savepoint)


class ATSTestCase(BaseTestCase):
    """
    Creates one user per role: ``admin``, ``manager`` and ``recruiter``,
    plus ``other_manager`` and ``other_recruiter`` for ownership checks.
    """

    @classmethod
    def setUpTestData(cls):
        super().setUpTestData()
        cls.admin = UserFactory(role=ADMIN)
        cls.manager = UserFactory(role=HIRING_MANAGER)
        cls.other_manager = UserFactory(role=HIRING_MANAGER)
        cls.recruiter = UserFactory(role=RECRUITER)
        cls.other_recruiter = UserFactory(role=RECRUITER)
