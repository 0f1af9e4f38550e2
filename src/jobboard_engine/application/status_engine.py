"""Status transitions for job applications, with single-slot undo.

The engine validates a status change, records the departed-from status in
the injected ``UndoHistoryTracker`` and tells the caller what to send to the
backend. It never performs HTTP itself; ``commit`` delegates the write to an
``ApplicationGateway`` and rolls the history back if that write fails.

Usage example:
    from jobboard_engine.application.history import UndoHistoryTracker
    from jobboard_engine.application.status_engine import StatusTransitionEngine
    from jobboard_engine.domain.application import ApplicationStatus

    engine = StatusTransitionEngine(UndoHistoryTracker())
    outcome = engine.transition("abc", ApplicationStatus.PENDING, ApplicationStatus.REJECTED)
    engine.commit(outcome, gateway)
    undo = engine.undo("abc", ApplicationStatus.REJECTED)
    assert undo.new_status is ApplicationStatus.PENDING
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

from ..domain.application import Actor, ApplicationStatus, InterviewDetails
from ..exceptions import ConflictError, NotFoundError, UpstreamError, ValidationError
from ..observability import get_logger
from ..protocols import ApplicationGateway, Clock
from ..types import StatusUpdatePayload
from .history import HistorySnapshot, UndoHistoryTracker

logger = get_logger("jobboard_engine.application.status_engine")

_DECIDED = frozenset({ApplicationStatus.HIRED, ApplicationStatus.REJECTED})


class TransitionIntent(StrEnum):
    """Side effects the caller must carry out against the backend."""

    UPDATE_STATUS = "update_status"
    SCHEDULE_INTERVIEW = "schedule_interview"


@dataclass(frozen=True)
class StatusUpdateRequest:
    """Body for ``PATCH /applications/{id}/status``."""

    status: ApplicationStatus
    notes: str = ""
    interview: InterviewDetails | None = None

    def to_payload(self) -> StatusUpdatePayload:
        payload: StatusUpdatePayload = {"status": self.status.value}
        if self.notes:
            payload["notes"] = self.notes
        if self.interview is not None:
            payload["interviewDate"] = self.interview.when.isoformat()
            payload["interviewMode"] = self.interview.mode.value
        return payload


@dataclass(frozen=True)
class TransitionOutcome:
    """Result of a validated transition.

    ``snapshot`` holds the history slot as it was before this call so the
    caller can roll it back if the backend write fails or is cancelled.
    """

    application_id: str
    key: str
    previous_status: ApplicationStatus
    new_status: ApplicationStatus
    history_updated: bool
    request: StatusUpdateRequest
    intents: tuple[TransitionIntent, ...]
    snapshot: HistorySnapshot | None = None

    @property
    def interview(self) -> InterviewDetails | None:
        return self.request.interview


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _as_aware(moment: datetime) -> datetime:
    # Naive datetimes from the UI are read as UTC.
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=UTC)


class StatusTransitionEngine:
    """Validates status changes and maintains the undo history."""

    def __init__(
        self,
        history: UndoHistoryTracker | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self.history = history if history is not None else UndoHistoryTracker()
        self._clock: Clock = clock or _utc_now

    def transition(
        self,
        application_id: str,
        from_status: ApplicationStatus | str,
        to_status: ApplicationStatus | str,
        side_data: InterviewDetails | None = None,
        *,
        actor: Actor = Actor.EMPLOYER,
        notes: str = "",
    ) -> TransitionOutcome:
        """Validate a status change and record the departed-from status.

        Raises:
            ValidationError: If the id is blank, the status is unchanged, the
                move is not allowed for the actor, or an interview is missing
                or not in the future. Nothing is recorded in that case.
        """
        return self._transition(
            application_id,
            ApplicationStatus.parse(from_status),
            ApplicationStatus.parse(to_status),
            side_data,
            actor=actor,
            notes=notes,
            reverting=False,
        )

    def withdraw(
        self, application_id: str, current_status: ApplicationStatus | str, *, notes: str = ""
    ) -> TransitionOutcome:
        """Applicant-initiated withdrawal."""
        return self.transition(
            application_id,
            current_status,
            ApplicationStatus.WITHDRAWN,
            actor=Actor.APPLICANT,
            notes=notes,
        )

    def undo(
        self,
        application_id: str,
        current_status: ApplicationStatus | str,
        side_data: InterviewDetails | None = None,
        *,
        target: ApplicationStatus | str | None = None,
        notes: str = "",
    ) -> TransitionOutcome:
        """Move back to the most recently departed-from status.

        This is an ordinary transition from ``current_status``, so afterwards
        the history holds ``current_status`` and a second undo toggles back.
        ``target`` jumps to another status instead of the recorded one.
        Undoing into ``interview_scheduled`` needs interview side data, which
        callers usually take from the application record.

        Raises:
            ConflictError: If nothing has been recorded for the id.
        """
        try:
            previous = self.history.get(application_id)
        except NotFoundError as exc:
            raise ConflictError(exc.application_id) from exc
        destination = ApplicationStatus.parse(target) if target is not None else previous
        outcome = self._transition(
            application_id,
            ApplicationStatus.parse(current_status),
            destination,
            side_data,
            actor=Actor.EMPLOYER,
            notes=notes,
            reverting=True,
        )
        logger.info(
            "Undo for application %s: %s -> %s",
            outcome.key,
            outcome.previous_status,
            outcome.new_status,
        )
        return outcome

    def previous_status(self, application_id: str) -> ApplicationStatus | None:
        """The status an undo would return to, if any."""
        return self.history.peek(application_id)

    def rollback(self, outcome: TransitionOutcome) -> None:
        """Undo the history write made by ``outcome``."""
        if outcome.snapshot is None:
            return
        self.history.restore(outcome.snapshot)
        logger.warning(
            "Rolled back history for application %s after failed update to %s",
            outcome.key,
            outcome.new_status,
        )

    def commit(self, outcome: TransitionOutcome, gateway: ApplicationGateway) -> None:
        """Send the status update and roll back history if it fails.

        Raises:
            UpstreamError: Re-raised unchanged after the rollback.
        """
        try:
            gateway.update_status(outcome.application_id, outcome.request.to_payload())
        except UpstreamError:
            self.rollback(outcome)
            raise

    def _transition(
        self,
        application_id: str,
        from_status: ApplicationStatus,
        to_status: ApplicationStatus,
        side_data: InterviewDetails | None,
        *,
        actor: Actor,
        notes: str,
        reverting: bool,
    ) -> TransitionOutcome:
        key = self.history.key_for(application_id)
        if from_status is to_status:
            raise ValidationError.unchanged_status(to_status.value)
        self._check_allowed(from_status, to_status, actor=actor, reverting=reverting)
        interview = None
        if to_status is ApplicationStatus.INTERVIEW_SCHEDULED:
            interview = self._check_interview(side_data)

        snapshot = self.history.record(application_id, from_status)
        intents = [TransitionIntent.UPDATE_STATUS]
        if interview is not None:
            intents.append(TransitionIntent.SCHEDULE_INTERVIEW)
        logger.info("Application %s: %s -> %s (%s)", key, from_status, to_status, actor)
        return TransitionOutcome(
            application_id=application_id.strip(),
            key=key,
            previous_status=from_status,
            new_status=to_status,
            history_updated=True,
            request=StatusUpdateRequest(
                status=to_status,
                notes=interview.notes if interview is not None and not notes else notes,
                interview=interview,
            ),
            intents=tuple(intents),
            snapshot=snapshot,
        )

    @staticmethod
    def _check_allowed(
        from_status: ApplicationStatus,
        to_status: ApplicationStatus,
        *,
        actor: Actor,
        reverting: bool,
    ) -> None:
        def reject(reason: str) -> ValidationError:
            return ValidationError.forbidden_transition(from_status.value, to_status.value, reason)

        if from_status is ApplicationStatus.WITHDRAWN:
            raise reject("withdrawn applications are closed")
        if to_status is ApplicationStatus.WITHDRAWN:
            if actor is not Actor.APPLICANT:
                raise reject("only the applicant can withdraw")
            if from_status in _DECIDED:
                raise reject("the application has already been decided")
            return
        if actor is Actor.APPLICANT:
            raise reject("applicants can only withdraw")
        if from_status in _DECIDED and not reverting:
            raise reject("the decision can only be changed through undo")

    def _check_interview(self, side_data: InterviewDetails | None) -> InterviewDetails:
        if side_data is None:
            raise ValidationError.missing_interview()
        now = _as_aware(self._clock())
        when = _as_aware(side_data.when)
        if when <= now:
            raise ValidationError.interview_not_in_future(when.isoformat())
        return InterviewDetails(when=when, mode=side_data.mode, notes=side_data.notes)
