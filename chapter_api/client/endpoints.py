"""
Endpoint Catalog
================

Every endpoint exercised by the suites, keyed by operation name.
Path parameters are substituted as single, percent-encoded path segments.
"""

import string
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple
from urllib.parse import quote


class UnknownEndpointError(KeyError):
    """Raised when an endpoint name is not in the catalog."""

    pass


class MissingPathParameterError(ValueError):
    """Raised when a path template parameter was not supplied."""

    pass


@dataclass(frozen=True)
class Endpoint:
    """An HTTP method and path template on the API under test."""

    name: str
    method: str
    template: str
    group: str

    @property
    def param_names(self) -> Tuple[str, ...]:
        """Names of the path template parameters, in order."""
        return tuple(
            field for _, field, _, _ in string.Formatter().parse(self.template) if field
        )

    def path(self, **params: Any) -> str:
        """Render the path, encoding each parameter as one segment.

        An empty value renders an empty segment, e.g. ``/api/v2/runs//cancel``.
        """
        missing = [name for name in self.param_names if name not in params]
        if missing:
            raise MissingPathParameterError(
                f"{self.name} requires path parameters: {', '.join(missing)}"
            )
        encoded = {name: quote(str(params[name]), safe="") for name in self.param_names}
        return self.template.format(**encoded)

    def __str__(self) -> str:
        return f"{self.method} {self.template}"


_CATALOG: List[Endpoint] = [
    # Schedules
    Endpoint("list_schedules", "GET", "/api/v1/schedules", "schedules"),
    Endpoint("create_schedule", "POST", "/api/v1/schedules", "schedules"),
    Endpoint("retrieve_schedule", "GET", "/api/v1/schedules/{schedule_id}", "schedules"),
    Endpoint("update_schedule", "PUT", "/api/v1/schedules/{schedule_id}", "schedules"),
    Endpoint("delete_schedule", "DELETE", "/api/v1/schedules/{schedule_id}", "schedules"),
    Endpoint(
        "activate_schedule", "POST", "/api/v1/schedules/{schedule_id}/activate", "schedules"
    ),
    Endpoint(
        "deactivate_schedule", "POST", "/api/v1/schedules/{schedule_id}/deactivate", "schedules"
    ),
    # Environment variables
    Endpoint("list_env_vars", "GET", "/api/v1/projects/{project_ref}/envvars/{env}", "envvars"),
    Endpoint("create_env_var", "POST", "/api/v1/projects/{project_ref}/envvars/{env}", "envvars"),
    Endpoint(
        "import_env_vars", "POST", "/api/v1/projects/{project_ref}/envvars/{env}/import", "envvars"
    ),
    Endpoint(
        "retrieve_env_var", "GET", "/api/v1/projects/{project_ref}/envvars/{env}/{name}", "envvars"
    ),
    Endpoint(
        "update_env_var", "PUT", "/api/v1/projects/{project_ref}/envvars/{env}/{name}", "envvars"
    ),
    Endpoint(
        "delete_env_var",
        "DELETE",
        "/api/v1/projects/{project_ref}/envvars/{env}/{name}",
        "envvars",
    ),
    # Tasks
    Endpoint("trigger_task", "POST", "/api/v1/tasks/{task_identifier}/trigger", "tasks"),
    Endpoint("batch_trigger_tasks", "POST", "/api/v1/tasks/batch", "tasks"),
    # Runs
    Endpoint("list_runs", "GET", "/api/v1/runs", "runs"),
    Endpoint("list_project_runs", "GET", "/api/v1/projects/{project_ref}/runs", "runs"),
    Endpoint("retrieve_run", "GET", "/api/v3/runs/{run_id}", "runs"),
    Endpoint("cancel_run", "POST", "/api/v2/runs/{run_id}/cancel", "runs"),
    Endpoint("replay_run", "POST", "/api/v1/runs/{run_id}/replay", "runs"),
    Endpoint("reschedule_run", "POST", "/api/v1/runs/{run_id}/reschedule", "runs"),
    Endpoint("update_run_metadata", "PUT", "/api/v1/runs/{run_id}/metadata", "runs"),
    # Timezones
    Endpoint("list_timezones", "GET", "/api/v1/timezones", "timezones"),
]

ENDPOINTS: Dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in _CATALOG}

GROUPS: Tuple[str, ...] = ("schedules", "envvars", "tasks", "runs", "timezones")


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by operation name."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise UnknownEndpointError(f"Unknown endpoint: {name}") from None


def endpoints_in_group(group: str) -> List[Endpoint]:
    """List the endpoints of one resource group, in catalog order."""
    if group not in GROUPS:
        raise ValueError(f"Group must be one of: {GROUPS}")
    return [endpoint for endpoint in _CATALOG if endpoint.group == group]
