"""ViaCEP locality lookup adapter for postal-code to city resolution."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from cepweather.domain import CityRecord
from cepweather.telemetry import TraceScope

from .http_transport import HttpClientFactory, adapter_default_client_factory, adapter_traced_request
from .interfaces import LocalityLookupPort
from .payloads import ViaCepPayload

logger = logging.getLogger(__name__)


class ViaCepLocalityAdapter(LocalityLookupPort):
    """Adapter for the ViaCEP `/ws/{cep}/json/` endpoint.

    Every failure mode (transport, status, decoding, unknown postal code)
    collapses to a not-found record; nothing is raised past this boundary.
    """

    def __init__(
        self,
        base_url: str = "https://viacep.com.br/ws",
        client_factory: HttpClientFactory | None = None,
    ):
        """Initialize ViaCEP adapter.

        Args:
            base_url: Base URL of the ViaCEP web service.
            client_factory: Optional factory returning a fresh HTTP client per call.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when base_url is blank.
        """

        normalized_base_url = base_url.strip()
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")

        self._base_url = normalized_base_url.rstrip("/")
        self._client_factory = client_factory or adapter_default_client_factory

    def adapter_source_name(self) -> str:
        """Return stable adapter source label.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return "viacep"

    def adapter_resolve_city(self, postal_code: str, trace_scope: TraceScope) -> CityRecord:
        """Resolve one postal code to its locality name.

        Args:
            postal_code: Validated eight-digit postal code.
            trace_scope: Parent scope for the lookup span.

        Returns:
            CityRecord: Resolved locality, or a record with `not_found` set.

        Raises:
            RuntimeError: This implementation does not raise for upstream failures.
        """

        request_url = f"{self._base_url}/{postal_code}/json/"
        try:
            response = adapter_traced_request(
                client_factory=self._client_factory,
                trace_scope=trace_scope,
                span_name="viacep.lookup",
                method="GET",
                url=request_url,
                peer_service=self.adapter_source_name(),
            )
        except httpx.HTTPError as error:
            logger.warning("locality lookup transport failed cep=%s trace_id=%s error=%s", postal_code, trace_scope.trace_id, error)
            return CityRecord.city_not_found()

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "locality lookup returned HTTP %s cep=%s trace_id=%s",
                response.status_code,
                postal_code,
                trace_scope.trace_id,
            )
            return CityRecord.city_not_found()

        try:
            payload = ViaCepPayload.model_validate_json(response.content)
        except ValidationError:
            logger.warning("locality lookup response decode failed cep=%s trace_id=%s", postal_code, trace_scope.trace_id)
            return CityRecord.city_not_found()

        if payload.erro or not payload.localidade.strip():
            return CityRecord.city_not_found()
        return CityRecord(locality=payload.localidade)
