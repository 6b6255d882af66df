import functools

from django.db import transaction


def notify_after_create(publish):
    """
    Decorates a create function so that ``publish(instance)`` runs once the
    surrounding transaction commits.

    The created instance is returned to the caller unchanged. When the create
    raises, or the transaction it ran in is rolled back, ``publish`` never
    runs.

    usage::

        @notify_after_create(notify_job_created)
        def create_job(**data):
            return Job.objects.create(**data)
    """
    def decorator(create):
        @functools.wraps(create)
        def wrapper(*args, **kwargs):
            instance = create(*args, **kwargs)
            transaction.on_commit(functools.partial(publish, instance))
            return instance
        return wrapper
    return decorator
