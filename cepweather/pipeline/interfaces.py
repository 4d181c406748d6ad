"""Typed interfaces for pipeline-layer orchestration responsibilities."""

from dataclasses import dataclass
from typing import Protocol

from cepweather.domain import TemperatureReport
from cepweather.telemetry import TraceScope


@dataclass(frozen=True)
class PipelineOutcome:
    """Terminal state of one resolution run.

    Attributes:
        status_code: HTTP status for the caller.
        message: Plain-text failure message; `None` on success.
        report: Temperature report; set only on success.
    """

    status_code: int
    message: str | None = None
    report: TemperatureReport | None = None

    def outcome_is_success(self) -> bool:
        """Return whether the run produced a report.

        Returns:
            bool: True when a report is present.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self.report is not None


class TemperaturePipelinePort(Protocol):
    """Port definition for resolving postal codes to temperature reports."""

    def pipeline_resolve(self, postal_code: str, trace_scope: TraceScope) -> PipelineOutcome:
        """Run the full lookup chain for one postal code.

        Args:
            postal_code: Postal code token as received.
            trace_scope: Parent scope for stage spans.

        Returns:
            PipelineOutcome: Terminal outcome; failures are never raised.

        Raises:
            RuntimeError: Raised only for unexpected programming errors.
        """
