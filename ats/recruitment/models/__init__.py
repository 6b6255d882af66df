from .job import Job  # noqa: F401
from .applicant import Applicant  # noqa: F401
