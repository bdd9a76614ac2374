"""OSRM routing adapter — drive time (or road distance) via the table API."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from hvac_dispatch.application.ports.distance_port import (
    DistanceProvider,
    DistanceProviderError,
)
from hvac_dispatch.config import settings
from hvac_dispatch.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

USER_AGENT = "hvac-dispatch-engine"


class OsrmDistanceAdapter(DistanceProvider):
    """Batch-queries an OSRM server for travel cost from a job to technicians.

    ``annotation="duration"`` yields minutes, ``"distance"`` yields road km.
    Failures raise DistanceProviderError; there is no geometric fallback.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        annotation: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.osrm_base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.osrm_timeout_seconds
        self._annotation = annotation or settings.osrm_annotation
        if self._annotation not in ("duration", "distance"):
            raise ValueError(f"Unsupported OSRM annotation: {self._annotation}")
        self._transport = transport

    def distance(self, origin: GeoPoint, destination: GeoPoint) -> float:
        return self.distances(origin, [destination])[0]

    def distances(
        self, origin: GeoPoint, destinations: Sequence[GeoPoint]
    ) -> list[float]:
        """Fetch every destination in one table request; nothing is retained."""
        if not destinations:
            return []
        return self._table_lookup(origin, list(destinations))

    def _table_lookup(self, origin: GeoPoint, destinations: list[GeoPoint]) -> list[float]:
        coords = ";".join(
            f"{p.longitude},{p.latitude}" for p in [origin, *destinations]
        )
        url = f"{self._base_url}/table/v1/driving/{coords}"

        try:
            with httpx.Client(transport=self._transport, timeout=self._timeout) as client:
                response = client.get(
                    url,
                    params={"sources": "0", "annotations": self._annotation},
                    headers={"User-Agent": USER_AGENT},
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("OSRM request failed: %s", e)
            raise DistanceProviderError(f"OSRM request failed: {e}") from e

        if data.get("code") != "Ok":
            raise DistanceProviderError(f"OSRM error: {data.get('code')}")

        try:
            row = data[f"{self._annotation}s"][0][1:]
        except (KeyError, IndexError, TypeError) as e:
            raise DistanceProviderError("OSRM response missing table row") from e

        if len(row) != len(destinations):
            raise DistanceProviderError(
                f"OSRM returned {len(row)} values for {len(destinations)} destinations"
            )

        values = []
        for dest, raw in zip(destinations, row):
            if raw is None:
                raise DistanceProviderError(
                    f"No route to ({dest.latitude}, {dest.longitude})"
                )
            # seconds → minutes, metres → km
            values.append(raw / 60 if self._annotation == "duration" else raw / 1000)

        logger.info("OSRM resolved %d destinations from (%f, %f)",
                    len(values), origin.latitude, origin.longitude)
        return values
