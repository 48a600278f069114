"""Degree and plan progress statistics."""

from typing import List, Optional

from uniplan.calculators.gpa import cumulative_gpa
from uniplan.models import Degree, ProgressStats, Semester


def plan_progress(semesters: List[Semester], degree: Optional[Degree] = None) -> ProgressStats:
    """Compute credit totals and completion percentages.

    A course counts as completed once it has a grade.

    Args:
        semesters: Plan semesters
        degree: Degree goal; without it degree progress is 0

    Returns:
        ProgressStats for the whole plan
    """
    total_credits = sum(semester.total_credits for semester in semesters)
    completed_credits = sum(semester.completed_credits for semester in semesters)

    degree_progress = 0.0
    if degree is not None and degree.total_credits_required > 0:
        degree_progress = completed_credits / degree.total_credits_required * 100

    plan_completion = completed_credits / total_credits * 100 if total_credits > 0 else 0.0

    return ProgressStats(
        total_credits=total_credits,
        completed_credits=completed_credits,
        cumulative_gpa=cumulative_gpa(semesters),
        degree_progress=degree_progress,
        plan_progress=plan_completion,
    )
