from team_invites.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """Missing or malformed input. Raised before any outbound call."""
