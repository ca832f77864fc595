"""
HTTP client for the monitoring service's maintenance API.
"""

from typing import Dict, Optional

import requests
from loguru import logger

from .errors import NetworkError, ValidationError
from .models import MaintenanceRequest, Settings, StatusFilter, TimeWindow

VALID_STATUSES = [s.value for s in StatusFilter]


def build_maintenance_request(
    host: str,
    owner: str,
    window: TimeWindow,
    ticket_number: int = 0,
) -> MaintenanceRequest:
    """Build the payload that puts a single host into maintenance."""
    return MaintenanceRequest(
        name=host,
        hosts=[host],
        apply_to_all_services=True,
        start_time=window.start_time,
        end_time=window.end_time,
        owners=[owner],
        comment=f"Automatic maintenance mode set by {owner}",
        ticket_number=ticket_number,
    )


class MaintenanceClient:
    """Builds and sends maintenance API requests for one set of settings."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"API-KEY {self.settings.api_key}",
        }

    def _prepare(self, method: str, url: str, data: Optional[str] = None,
                 params: Optional[Dict[str, str]] = None) -> requests.PreparedRequest:
        try:
            return requests.Request(method, url, headers=self.headers, data=data, params=params).prepare()
        except requests.RequestException as e:
            raise NetworkError(f"Invalid request {method} {url}: {e}") from e

    def build_enable(self, host: str, window: TimeWindow, ticket_number: int = 0) -> requests.PreparedRequest:
        """
        Build the request that creates a maintenance for a host.

        Args:
            host: Host to put into maintenance
            window: Start and end of the maintenance
            ticket_number: Ticket reference stored with the maintenance

        Returns:
            Prepared POST request
        """
        payload = build_maintenance_request(host, self.settings.owner, window, ticket_number)
        return self._prepare(
            "POST",
            f"{self.settings.base_url}host",
            data=payload.model_dump_json(by_alias=True),
        )

    def build_disable(self, maintenance_id: Optional[str]) -> requests.PreparedRequest:
        """Build the request that deletes one maintenance by its id."""
        if not maintenance_id:
            raise ValidationError("Maintenance id must be provided for deletion!", show_usage=False)
        return self._prepare("DELETE", f"{self.settings.base_url}{maintenance_id}")

    def build_disable_all(self, host: str) -> requests.PreparedRequest:
        """Build the request that deletes every maintenance of a host."""
        return self._prepare("DELETE", f"{self.settings.base_url}host/{host}")

    def build_status(self, host: str, status: str) -> requests.PreparedRequest:
        """Build the request that lists a host's maintenances with a given status."""
        if status not in VALID_STATUSES:
            raise ValidationError(
                f"Invalid status '{status}', expected one of: {', '.join(VALID_STATUSES)}"
            )
        return self._prepare("GET", f"{self.settings.base_url}host/all/{host}", params={"status": status})

    def send(self, prepared: requests.PreparedRequest) -> str:
        """
        Send a prepared request and return the whole response body.

        The HTTP status code is not interpreted; callers act on the body alone.

        Raises:
            NetworkError: On any transport failure
        """
        logger.info(f"{prepared.method} {prepared.url}")
        try:
            # Honour proxy and CA bundle environment variables like session.request() does
            send_kwargs = self.session.merge_environment_settings(prepared.url, {}, None, None, None)
            with self.session.send(prepared, **send_kwargs) as response:
                body = response.text
                logger.debug(f"Response {response.status_code} ({len(body)} bytes)")
        except requests.RequestException as e:
            raise NetworkError(f"{prepared.method} {prepared.url} failed: {e}") from e
        return body
