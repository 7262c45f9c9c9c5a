from __future__ import annotations

from typing import Sequence

from sq_browser.queries.model import TAG_VOCABULARY, SavedQueryCandidate
from sq_browser.validation.errors import ValidationError, ValidationIssue


def validate_candidate(
        candidate: SavedQueryCandidate,
        vocabulary: Sequence[str] = TAG_VOCABULARY,
) -> None:
    """
    Validate a save-form submission BEFORE anything is persisted.
    Collects every issue, then raises once.
    """
    issues: list[ValidationIssue] = []

    if not (candidate.name or "").strip():
        issues.append(ValidationIssue("NAME_EMPTY", "Please enter a name for your query"))

    unknown = [t for t in candidate.tags if t not in vocabulary]
    if unknown:
        issues.append(ValidationIssue("TAG_UNKNOWN", f"Unknown tags: {', '.join(map(str, unknown))}"))

    draft = candidate.draft
    if draft.result_count < 0 or draft.total_count < 0:
        issues.append(ValidationIssue("COUNTS_NEGATIVE", "Result counts must not be negative."))
    elif draft.result_count > draft.total_count:
        issues.append(
            ValidationIssue(
                "COUNTS_INCONSISTENT",
                f"Result count {draft.result_count} exceeds total count {draft.total_count}.",
            )
        )

    if issues:
        raise ValidationError(issues)
