"""Counsel report status lattice."""

from enum import Enum


class ReportStatus(str, Enum):
    """
    Counsel report status enumeration.

    DRAFT -> SUBMITTED -> REVIEWED -> APPROVED, plus SUBMITTED -> DRAFT when a
    submitted report is returned for revision. APPROVED is terminal.
    """

    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    REVIEWED = "REVIEWED"
    APPROVED = "APPROVED"

    @property
    def allowed_transitions(self) -> frozenset["ReportStatus"]:
        """Statuses reachable from this one in a single step."""
        return _TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        """Check if status is terminal (cannot transition further)."""
        return not _TRANSITIONS[self]

    @property
    def is_counselor_editable(self) -> bool:
        """Only drafts may be edited by the counselor."""
        return self == ReportStatus.DRAFT

    @property
    def is_guardian_viewable(self) -> bool:
        """Guardians see every report that has left the draft stage."""
        return self != ReportStatus.DRAFT

    def can_transition_to(self, target_status: "ReportStatus") -> bool:
        """Check if report can transition from current status to target status."""
        return target_status in _TRANSITIONS[self]


_TRANSITIONS: dict[ReportStatus, frozenset[ReportStatus]] = {
    ReportStatus.DRAFT: frozenset({ReportStatus.SUBMITTED}),
    ReportStatus.SUBMITTED: frozenset({ReportStatus.REVIEWED, ReportStatus.DRAFT}),
    ReportStatus.REVIEWED: frozenset({ReportStatus.APPROVED}),
    ReportStatus.APPROVED: frozenset(),  # Terminal state
}
