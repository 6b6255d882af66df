"""
Hiring pipeline graph.

Every applicant status maps to the ordered statuses it may move to next.
Statuses without successors are terminal. ``on_hold`` is not reached
through the table; any non-terminal status may be put on hold as a side
exit, and ``on_hold`` itself leads nowhere.
"""
from ats.recruitment.constants import (
    NEW, SCREENING, SCREENING_SELECTED, SCREENING_REJECTED,
    TECHNICAL_ROUND, TECHNICAL_SELECTED, TECHNICAL_REJECTED,
    HR_ROUND, HR_SELECTED, HR_REJECTED,
    FINAL_ROUND, HIRED, REJECTED, ON_HOLD
)

STATUS_FLOW = {
    NEW: (SCREENING,),
    SCREENING: (SCREENING_SELECTED, SCREENING_REJECTED),
    SCREENING_SELECTED: (TECHNICAL_ROUND,),
    SCREENING_REJECTED: (),
    TECHNICAL_ROUND: (TECHNICAL_SELECTED, TECHNICAL_REJECTED),
    TECHNICAL_SELECTED: (HR_ROUND,),
    TECHNICAL_REJECTED: (),
    HR_ROUND: (HR_SELECTED, HR_REJECTED),
    HR_SELECTED: (FINAL_ROUND,),
    HR_REJECTED: (),
    FINAL_ROUND: (HIRED, REJECTED),
    HIRED: (),
    REJECTED: (),
    ON_HOLD: (),
}

TERMINAL_STATUSES = frozenset(
    status for status, next_statuses in STATUS_FLOW.items() if not next_statuses
)


def permitted_next(status):
    """
    :param status: applicant status
    :return: statuses the applicant may move to, in display order
    :raises ValueError: for an unknown status
    """
    try:
        return STATUS_FLOW[status]
    except KeyError:
        raise ValueError(f"Unknown applicant status `{status}`") from None


def is_terminal(status):
    return not permitted_next(status)


def can_put_on_hold(status):
    return not is_terminal(status)


def can_transition(current_status, target_status):
    permitted_next(target_status)
    if target_status == ON_HOLD:
        return can_put_on_hold(current_status)
    return target_status in permitted_next(current_status)
