"""
Constraint violations raised by the archive store.

Missing ids on update/delete/lookup are not errors; these cover the
cases where a create cannot be honoured.
"""


class ArchiveError(Exception):
    """Base class for archive store errors."""


class CompetitionNotFoundError(ArchiveError):
    def __init__(self, competition_id: str):
        super().__init__(f"Competition {competition_id} not found")
        self.competition_id = competition_id


class CompetitionClosedError(ArchiveError):
    def __init__(self, competition_id: str):
        super().__init__(f"Competition {competition_id} is not accepting submissions")
        self.competition_id = competition_id


class CompetitionFullError(ArchiveError):
    def __init__(self, competition_id: str, max_participants: int):
        super().__init__(
            f"Competition {competition_id} already has {max_participants} participants"
        )
        self.competition_id = competition_id
        self.max_participants = max_participants


class DuplicateSubmissionError(ArchiveError):
    def __init__(self, competition_id: str, user_id: str):
        super().__init__(f"User {user_id} has already entered competition {competition_id}")
        self.competition_id = competition_id
        self.user_id = user_id
