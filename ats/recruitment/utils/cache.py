from django.core.cache import cache


def applicant_list_cache_key(job_id):
    return f'job_applicants_{job_id}'


def recent_applicants_cache_key(recruiter_id):
    return f'recent_applicants_{recruiter_id}'


def invalidate_applicant_caches(job_id, *recruiter_ids):
    """
    Marks the applicant list of a job, and the recent applicant feed of the
    given recruiters, stale for every viewer.
    """
    keys = [applicant_list_cache_key(job_id)]
    keys.extend(
        recent_applicants_cache_key(recruiter_id)
        for recruiter_id in recruiter_ids if recruiter_id
    )
    cache.delete_many(keys)


def invalidate_recent_applicants(*recruiter_ids):
    cache.delete_many([
        recent_applicants_cache_key(recruiter_id)
        for recruiter_id in recruiter_ids if recruiter_id
    ])
