"""Ambiguity resolution over multi-locale candidates.

Accepts a numeric substring only when exactly one distinct reading exists.

Python 3.13+.
"""

from collections.abc import Sequence

from moneylex.diagnostics import AmbiguousFormatError, ErrorTemplate, UnparsableAmountError

from .numbers import ParseCandidate

__all__ = ["resolve_candidates"]


def resolve_candidates(
    candidates: Sequence[ParseCandidate],
    input_value: str,
) -> tuple[ParseCandidate | None, UnparsableAmountError | AmbiguousFormatError | None]:
    """Collapse candidates to a single reading.

    Args:
        candidates: Distinct readings from parse_all_conventions()
        input_value: Original raw input (for error messages)

    Returns:
        Tuple of (candidate, error) - exactly one is None:
        - no candidates: UnparsableAmountError
        - one candidate: that candidate
        - several candidates: AmbiguousFormatError listing their labels
    """
    if not candidates:
        diagnostic = ErrorTemplate.amount_unparsable(input_value)
        return (None, UnparsableAmountError(diagnostic, input_value=input_value))

    if len(candidates) > 1:
        labels = tuple(candidate.label for candidate in candidates)
        diagnostic = ErrorTemplate.format_ambiguous(input_value, labels)
        return (
            None,
            AmbiguousFormatError(diagnostic, interpretations=labels, input_value=input_value),
        )

    return (candidates[0], None)
