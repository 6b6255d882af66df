from rest_framework.exceptions import ValidationError


class InvalidTransition(ValidationError):
    """Raised when an applicant is asked to move to a status its current
    status does not lead to."""

    def __init__(self, current_status, target_status):
        self.current_status = current_status
        self.target_status = target_status
        super().__init__({
            'status': [
                f"Cannot move applicant from `{current_status}` to `{target_status}`."
            ]
        })
