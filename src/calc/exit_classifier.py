from datetime import date

from model.ExitEvaluation import ExitPosition


def classify_exit_relative_to_reference(exit_date: date, reference_date: date) -> ExitPosition:
    """Classify an exit date against the role lapse (reference) date, by calendar day.

    Exits before or exactly on the role lapse date are not estimated
    numerically; callers show guidance for them instead.
    """
    if exit_date < reference_date:
        return ExitPosition.BEFORE_REFERENCE
    if exit_date == reference_date:
        return ExitPosition.ON_REFERENCE
    return ExitPosition.NORMAL
