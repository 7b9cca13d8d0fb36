from team_invites.domain.exceptions.base import DomainError


class NoConfigAvailable(DomainError):
    def __init__(self):
        super().__init__("No team configuration available")


class InvalidSelection(DomainError):
    def __init__(self, team_id: str | None = None):
        super().__init__("Invalid or missing team selection")
        self.team_id = team_id
