# applicant pipeline
(NEW, SCREENING, SCREENING_SELECTED, SCREENING_REJECTED,
 TECHNICAL_ROUND, TECHNICAL_SELECTED, TECHNICAL_REJECTED,
 HR_ROUND, HR_SELECTED, HR_REJECTED,
 FINAL_ROUND, HIRED, REJECTED, ON_HOLD) = (
    'new', 'screening', 'screening_selected', 'screening_rejected',
    'technical_round', 'technical_selected', 'technical_rejected',
    'hr_round', 'hr_selected', 'hr_rejected',
    'final_round', 'hired', 'rejected', 'on_hold'
)

APPLICANT_STATUS_CHOICES = [
    (NEW, 'New'),
    (SCREENING, 'Screening'),
    (SCREENING_SELECTED, 'Screening Selected'),
    (SCREENING_REJECTED, 'Screening Rejected'),
    (TECHNICAL_ROUND, 'Technical Round'),
    (TECHNICAL_SELECTED, 'Technical Selected'),
    (TECHNICAL_REJECTED, 'Technical Rejected'),
    (HR_ROUND, 'HR Round'),
    (HR_SELECTED, 'HR Selected'),
    (HR_REJECTED, 'HR Rejected'),
    (FINAL_ROUND, 'Final Round'),
    (HIRED, 'Hired'),
    (REJECTED, 'Rejected'),
    (ON_HOLD, 'On Hold'),
]

APPLICANT_STATUS_LABELS = dict(APPLICANT_STATUS_CHOICES)

# used by recruiter dashboard
INTERVIEW_STATUSES = (TECHNICAL_ROUND, HR_ROUND, FINAL_ROUND)
CLOSED_APPLICANT_STATUSES = (REJECTED, HIRED)

# job requisition
(DRAFT, ACTIVE, JOB_ON_HOLD, FILLED, CLOSED) = (
    'draft', 'active', 'on_hold', 'filled', 'closed'
)

JOB_STATUS_CHOICES = [
    (DRAFT, 'Draft'),
    (ACTIVE, 'Active'),
    (JOB_ON_HOLD, 'On Hold'),
    (FILLED, 'Filled'),
    (CLOSED, 'Closed'),
]

FULL_TIME = 'Full-time'
PART_TIME = 'Part-time'
CONTRACT = 'Contract'
TEMPORARY = 'Temporary'
INTERNSHIP = 'Internship'

EMPLOYMENT_TYPE_CHOICES = [
    (FULL_TIME, 'Full-time'),
    (PART_TIME, 'Part-time'),
    (CONTRACT, 'Contract'),
    (TEMPORARY, 'Temporary'),
    (INTERNSHIP, 'Internship'),
]
