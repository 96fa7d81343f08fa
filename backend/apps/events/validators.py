"""Validation rules applied to an Event before it is saved.

Each rule is a callable taking the event and raising ``ValidationError``.
``EVENT_VALIDATORS`` is the ordered list ``run_event_validators`` walks;
later rules may assume the earlier ones passed.
"""

import logging

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError

from apps.events.overlap import has_overlap

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "There is already an event during this time!"


class ConflictingSchedule(ValidationError):
    def __init__(self, conflicts=()):
        self.conflicts = list(conflicts)
        super().__init__(
            {
                "start_date": [ValidationError(CONFLICT_MESSAGE, code="conflicting_schedule")],
                NON_FIELD_ERRORS: [ValidationError(CONFLICT_MESSAGE, code="conflicting_schedule")],
            }
        )


def validate_required_dates(event):
    errors = {}
    if event.start_date is None:
        errors["start_date"] = ValidationError("This field cannot be blank.", code="blank")
    if event.end_date is None:
        errors["end_date"] = ValidationError("This field cannot be blank.", code="blank")
    if errors:
        raise ValidationError(errors)


def validate_date_order(event):
    if event.start_date > event.end_date:
        raise ValidationError(
            {"end_date": ValidationError("The event cannot end before it starts.", code="invalid_range")}
        )


def validate_unique_event_date(event):
    exclude_id = event.pk if event.is_persisted else None
    candidates = type(event).objects.for_site(event.site).overlapping(
        event.start_date, event.end_date, exclude_id=exclude_id
    )
    conflicts = list(candidates.only("id", "start_date", "end_date")[:10])
    if has_overlap(event.start_date, event.end_date, conflicts, excluding=exclude_id):
        logger.info(
            "Rejected event %r [%s, %s]: overlaps %s",
            event.name,
            event.start_date,
            event.end_date,
            ", ".join(str(conflict.pk) for conflict in conflicts),
        )
        raise ConflictingSchedule(conflicts)


EVENT_VALIDATORS = [
    validate_required_dates,
    validate_date_order,
    validate_unique_event_date,
]


def run_event_validators(event, validators=None):
    for validator in validators if validators is not None else EVENT_VALIDATORS:
        validator(event)
