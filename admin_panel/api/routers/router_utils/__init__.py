"""
Router utility functions.

Error mapping and response construction shared by the resource routers.
"""

from admin_panel.api.routers.router_utils.error_handling import handle_resource_errors
from admin_panel.api.routers.router_utils.responses import (
    map_deleted_to_response,
    map_project_to_response,
    map_projects_to_response,
    map_review_to_response,
    map_reviews_to_response,
)

__all__ = [
    "handle_resource_errors",
    "map_deleted_to_response",
    "map_project_to_response",
    "map_projects_to_response",
    "map_review_to_response",
    "map_reviews_to_response",
]
