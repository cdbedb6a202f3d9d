"""Move validation for dragging and dropping runs of cards."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from spider_rules.logging.formatters import format_card, format_cards
from spider_rules.models.card import Card, PlayableCard

logger = logging.getLogger(__name__)


def is_face_up(card: Card | None) -> bool:
    """Check if a card is present and showing its face.

    Plain Cards carry no face state and count as face down.
    """
    return card is not None and bool(getattr(card, "face_up", False))


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""


class MoveValidator:
    """Validates drag-start and drop attempts against pile contents.

    Sequences are ordered top card first, i.e. descending rank is expected.
    Nothing passed in is modified.
    """

    def check_lift(self, sequence: Sequence[PlayableCard | None]) -> ValidationResult:
        """Check whether a run can be picked up as one unit.

        Args:
            sequence: Cards under the cursor, top card first.

        Returns:
            ValidationResult
        """
        if not sequence:
            return self._reject("Nothing to lift")

        if not all(is_face_up(card) for card in sequence):
            return self._reject(
                f"Run contains a face-down or missing card: {format_cards(sequence)}"
            )

        for current, following in zip(sequence, sequence[1:]):
            if not current.rank.is_one_above(following.rank):
                return self._reject(
                    f"{format_card(following)} does not descend from {format_card(current)}"
                )
            if current.suit != following.suit:
                return self._reject(
                    f"{format_card(following)} breaks the suit of {format_card(current)}"
                )

        return ValidationResult(is_valid=True)

    def check_drop(
        self,
        moving: Sequence[PlayableCard | None],
        target_top: PlayableCard | None,
    ) -> ValidationResult:
        """Check whether a run can land on a pile.

        Only the lead card of the run is compared; call check_lift first if
        the run itself needs validating.

        Args:
            moving: Run being dropped, top card first.
            target_top: Top card of the destination pile, or None if empty.

        Returns:
            ValidationResult
        """
        if not moving:
            return self._reject("Nothing to drop")

        # Any run may start an empty pile
        if target_top is None:
            return ValidationResult(is_valid=True)

        if not is_face_up(target_top):
            return self._reject(f"Target {format_card(target_top)} is face down")

        lead = moving[0]
        if lead is None:
            return self._reject("Run has no lead card")

        if not target_top.rank.is_one_above(lead.rank):
            return self._reject(
                f"{format_card(lead)} cannot go on {format_card(target_top)}"
            )

        return ValidationResult(is_valid=True)

    def can_lift_sequence(self, sequence: Sequence[PlayableCard | None]) -> bool:
        """Check if a run may be dragged."""
        return self.check_lift(sequence).is_valid

    def can_drop_sequence_on(
        self,
        moving: Sequence[PlayableCard | None],
        target_top: PlayableCard | None,
    ) -> bool:
        """Check if a run may be dropped on the given pile top."""
        return self.check_drop(moving, target_top).is_valid

    def _reject(self, message: str) -> ValidationResult:
        logger.debug(f"Move rejected: {message}")
        return ValidationResult(is_valid=False, error_message=message)


_default_validator = MoveValidator()


def can_lift_sequence(sequence: Sequence[PlayableCard | None]) -> bool:
    """Check if a run may be dragged (see MoveValidator.check_lift)."""
    return _default_validator.can_lift_sequence(sequence)


def can_drop_sequence_on(
    moving: Sequence[PlayableCard | None],
    target_top: PlayableCard | None = None,
) -> bool:
    """Check if a run may be dropped (see MoveValidator.check_drop)."""
    return _default_validator.can_drop_sequence_on(moving, target_top)
