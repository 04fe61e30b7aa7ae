"""Global list parameters passed through to the API as query strings."""

from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlencode


@dataclass(frozen=True)
class ListOptions:
    """
    Optional parameters for list endpoints.

    The core does not interpret these; service objects turn them into query
    parameters.

    Args:
        page: Page of results to retrieve (paginated result sets)
        per_page: Number of results per page
        includes: Comma-separated resources to return as collections
            instead of references

    Example:
        >>> ListOptions(page=2, per_page=50).to_params()
        {'page': '2', 'per_page': '50'}
    """
    page: Optional[int] = None
    per_page: Optional[int] = None
    includes: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        """Query parameters for the set (non-empty) options."""
        params: Dict[str, str] = {}
        if self.page:
            params["page"] = str(self.page)
        if self.per_page:
            params["per_page"] = str(self.per_page)
        if self.includes:
            params["include"] = self.includes
        return params


def with_query(path: str, options: Optional[ListOptions] = None) -> str:
    """
    Append list options to a relative path.

    Example:
        >>> with_query("projects", ListOptions(includes="members"))
        'projects?include=members'
        >>> with_query("plans")
        'plans'
    """
    if options is None:
        return path
    params = options.to_params()
    if not params:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode(params)}"
