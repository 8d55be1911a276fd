"""
One-shot scan session.

Frames arrive continuously: each carries the detected document rectangle
(or None) and the OCR readings of that frame. The first frame whose
rectangle is acceptable and whose readings pass the side's validator
produces a ScanResult; every later frame is ignored.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from framing import DEFAULT_TOLERANCES, ValidationTolerances, evaluate_rectangle
from geometry import Bbox, Rect
from mrz_text import MRZRecord, read_mrz

from .validators import DocumentSide, ReadingValidator, find_document_number, validator_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """The single accepted outcome of a scan session.

    Attributes:
        side: Document side that was scanned.
        readings: OCR readings of the accepted frame.
        record: Parsed MRZ for sides that carry one (ID back, passport).
        document_number: Document number read from an ID front.
    """

    side: DocumentSide
    readings: tuple[str, ...]
    record: MRZRecord | None = field(default=None, repr=False)
    document_number: str | None = None

    def to_dict(self) -> dict:
        return {
            "side": self.side.value,
            "readings": list(self.readings),
            "record": self.record.to_dict() if self.record is not None else None,
            "document_number": self.document_number,
        }


class ScanSession:
    """Accept at most one scan result from a stream of frames.

    `submit_frame` may be called from several worker threads; the first
    accepted frame wins and the session is done from then on.
    """

    def __init__(
        self,
        side: DocumentSide | str,
        mask_frame: Rect,
        tolerances: ValidationTolerances | None = None,
        validator: ReadingValidator | None = None,
    ) -> None:
        self.side = DocumentSide(side)
        self.mask_frame = mask_frame
        self.tolerances = tolerances or DEFAULT_TOLERANCES
        self.tolerances.validate()
        self.validator = validator or validator_for(self.side)
        self.document_bounded = False
        self._result: ScanResult | None = None
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> ScanResult | None:
        return self._result

    def frame_is_acceptable(self, observation: Rect | Bbox | None) -> bool:
        """Update `document_bounded` and check the frame's rectangle."""
        self.document_bounded = observation is not None
        if observation is None:
            return False
        return evaluate_rectangle(observation, self.mask_frame, self.tolerances).accepted

    def submit_frame(
        self,
        observation: Rect | Bbox | None,
        readings: list[str],
    ) -> ScanResult | None:
        """Offer one frame to the session.

        Args:
            observation: Detected document rectangle or corners in mask
                coordinates, or None when no rectangle was found.
            readings: OCR text of the frame, one entry per text observation.

        Returns:
            The ScanResult if this frame completed the session, else None.
        """
        if self.done:
            logger.debug("Ignoring frame: %s scan already completed", self.side.value)
            return None
        if not self.frame_is_acceptable(observation):
            return None
        if not self.validator(readings):
            return None

        result = self._build_result(readings)
        with self._lock:
            if self._result is not None:
                logger.debug("Ignoring frame: %s scan completed concurrently", self.side.value)
                return None
            self._result = result

        logger.info("Accepted %s scan", self.side.value)
        return result

    def _build_result(self, readings: list[str]) -> ScanResult:
        kind = self.side.mrz_kind
        if kind is None:
            return ScanResult(
                side=self.side,
                readings=tuple(readings),
                document_number=find_document_number(readings),
            )
        record = read_mrz("\n".join(readings), kind)
        return ScanResult(
            side=self.side,
            readings=tuple(readings),
            record=record,
            document_number=record.document_number or None,
        )
