"""HTTP transport for the campus backend."""

from campus_client.infrastructure.http.api_client import (
    CampusApiClient,
    build_multipart,
    clean_params,
)

__all__ = ["CampusApiClient", "build_multipart", "clean_params"]
