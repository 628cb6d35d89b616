"""Centralized message codes and default messages for API responses."""

from enum import Enum


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Authentication & Authorization
    UNAUTHORIZED = "UNAUTHORIZED"

    # Validation errors
    BAD_REQUEST = "BAD_REQUEST"
    INVALID_INPUT = "INVALID_INPUT"

    # Group lookups
    ROLE_NOT_FOUND = "ROLE_NOT_FOUND"
    USER_NOT_MEMBER_OF_GROUP = "USER_NOT_MEMBER_OF_GROUP"

    # Upstream errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    MALFORMED_UPSTREAM_RESPONSE = "MALFORMED_UPSTREAM_RESPONSE"
    PAGINATION_LIMIT_EXCEEDED = "PAGINATION_LIMIT_EXCEEDED"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    MessageCode.UNAUTHORIZED: "unauthorized",
    MessageCode.BAD_REQUEST: "Missing groupId, userId, and roleId/roleName.",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    MessageCode.ROLE_NOT_FOUND: "Role not found",
    MessageCode.USER_NOT_MEMBER_OF_GROUP: "User is not a member of this group",
    MessageCode.EXTERNAL_SERVICE_ERROR: "External service error",
    MessageCode.MALFORMED_UPSTREAM_RESPONSE: "Unexpected response from group service",
    MessageCode.PAGINATION_LIMIT_EXCEEDED: "Membership listing exceeded the page limit",
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.NOT_FOUND: "Resource not found",
}


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
