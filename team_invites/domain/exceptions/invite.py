from team_invites.domain.exceptions.base import DomainError


class InviteTransportError(DomainError):
    """The upstream invite call could not be completed (network, timeout, bad payload)."""

    def __init__(self, account_id: str, message: str):
        super().__init__(message)
        self.account_id = account_id
