"""
Archive store - the single in-memory holder of the archive's collections.

All mutation goes through this class. Every create assigns the id and
creation timestamp; every update is a validated shallow merge of a patch
type that has no identity fields; every delete is a hard delete. Missing
ids are never an error: updates return None and deletes return False.
"""

from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from museum_archive.engines.search.artifact_search import FiltersInput, search_artifacts
from museum_archive.kernel.models.artifact import Artifact, ArtifactCreate, ArtifactPatch
from museum_archive.kernel.models.base import EntityModel, PatchModel, ensure_utc, generate_id, utcnow
from museum_archive.kernel.models.competition import (
    Competition,
    CompetitionCreate,
    CompetitionPatch,
    CompetitionSubmission,
    SubmissionPatch,
    SubmissionStatus,
)
from museum_archive.kernel.models.event import EventCreate, EventPatch, MuseumEvent
from museum_archive.kernel.models.exhibition import Exhibition, ExhibitionCreate, ExhibitionPatch
from museum_archive.kernel.models.news import NewsArticle, NewsCreate, NewsPatch
from museum_archive.kernel.store.collection import EntityCollection
from museum_archive.kernel.store.errors import (
    CompetitionClosedError,
    CompetitionFullError,
    CompetitionNotFoundError,
    DuplicateSubmissionError,
)
from museum_archive.logging_config import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)
E = TypeVar("E", bound=EntityModel)

Clock = Callable[[], datetime]


def _coerce(model_cls: Type[M], data: Union[M, Mapping[str, Any]]) -> M:
    if isinstance(data, model_cls):
        return data
    return model_cls.model_validate(data)


class ArtifactStats(BaseModel):
    """Collection summary shown on the back-office overview."""

    total: int
    public: int
    draft: int
    created_this_month: int


class ArchiveStore:
    """
    Authoritative holder of artifacts, competitions, submissions, news,
    events and exhibitions for one application session.

    Construct once at startup and hand the same instance to everything
    that reads or writes archive data.
    """

    def __init__(
        self,
        artifacts: Optional[List[Artifact]] = None,
        competitions: Optional[List[Competition]] = None,
        submissions: Optional[List[CompetitionSubmission]] = None,
        news: Optional[List[NewsArticle]] = None,
        events: Optional[List[MuseumEvent]] = None,
        exhibitions: Optional[List[Exhibition]] = None,
        clock: Clock = utcnow,
    ):
        self.clock = clock
        self._artifacts: EntityCollection[Artifact] = EntityCollection("artifact", artifacts)
        self._competitions: EntityCollection[Competition] = EntityCollection("competition", competitions)
        self._submissions: EntityCollection[CompetitionSubmission] = EntityCollection("submission", submissions)
        self._news: EntityCollection[NewsArticle] = EntityCollection("news", news)
        self._events: EntityCollection[MuseumEvent] = EntityCollection("event", events)
        self._exhibitions: EntityCollection[Exhibition] = EntityCollection("exhibition", exhibitions)

    def now(self) -> datetime:
        return ensure_utc(self.clock())

    # Shared create/update/delete plumbing

    def _create(
        self,
        collection: EntityCollection[E],
        entity_cls: Type[E],
        payload: BaseModel,
    ) -> E:
        entity = entity_cls.model_validate({
            **payload.model_dump(),
            "id": generate_id(),
            "date_created": self.now(),
        })
        collection.append(entity)
        logger.info(
            "Added %s", collection.name,
            extra={"entity_type": collection.name, "entity_id": entity.id},
        )
        return entity

    def _update(
        self,
        collection: EntityCollection[E],
        entity_id: str,
        patch: PatchModel,
    ) -> Optional[E]:
        updated = collection.apply_patch(entity_id, patch)
        if updated is None:
            logger.debug(
                "Update skipped, %s not found", collection.name,
                extra={"entity_type": collection.name, "entity_id": entity_id},
            )
        else:
            logger.info(
                "Updated %s", collection.name,
                extra={
                    "entity_type": collection.name,
                    "entity_id": entity_id,
                    "fields": sorted(patch.changes()),
                },
            )
        return updated

    def _delete(self, collection: EntityCollection[E], entity_id: str) -> bool:
        removed = collection.remove(entity_id)
        if removed:
            logger.info(
                "Deleted %s", collection.name,
                extra={"entity_type": collection.name, "entity_id": entity_id},
            )
        return removed

    # Artifacts

    @property
    def artifacts(self) -> List[Artifact]:
        return self._artifacts.all()

    def add_artifact(self, data: Union[ArtifactCreate, Mapping[str, Any]]) -> Artifact:
        return self._create(self._artifacts, Artifact, _coerce(ArtifactCreate, data))

    def update_artifact(
        self,
        artifact_id: str,
        patch: Union[ArtifactPatch, Mapping[str, Any]],
    ) -> Optional[Artifact]:
        return self._update(self._artifacts, artifact_id, _coerce(ArtifactPatch, patch))

    def delete_artifact(self, artifact_id: str) -> bool:
        return self._delete(self._artifacts, artifact_id)

    def get_artifact_by_id(self, artifact_id: str) -> Optional[Artifact]:
        return self._artifacts.get(artifact_id)

    def search_artifacts(self, query: str = "", filters: FiltersInput = None) -> List[Artifact]:
        """Public artifacts matching query and filters, in collection order."""
        return search_artifacts(self._artifacts, query, filters)

    def related_artifacts(self, artifact_id: str, limit: int = 3) -> List[Artifact]:
        """Other public artifacts to show alongside one artifact."""
        related = self._artifacts.filter(lambda a: a.is_public and a.id != artifact_id)
        return related[:limit]

    def artifact_stats(self, now: Optional[datetime] = None) -> ArtifactStats:
        now = ensure_utc(now) if now is not None else self.now()
        artifacts = self._artifacts.all()
        public = sum(1 for a in artifacts if a.is_public)
        this_month = sum(
            1 for a in artifacts
            if a.date_created.year == now.year and a.date_created.month == now.month
        )
        return ArtifactStats(
            total=len(artifacts),
            public=public,
            draft=len(artifacts) - public,
            created_this_month=this_month,
        )

    # Competitions

    @property
    def competitions(self) -> List[Competition]:
        return self._competitions.all()

    def add_competition(self, data: Union[CompetitionCreate, Mapping[str, Any]]) -> Competition:
        return self._create(self._competitions, Competition, _coerce(CompetitionCreate, data))

    def update_competition(
        self,
        competition_id: str,
        patch: Union[CompetitionPatch, Mapping[str, Any]],
    ) -> Optional[Competition]:
        return self._update(self._competitions, competition_id, _coerce(CompetitionPatch, patch))

    def delete_competition(self, competition_id: str) -> bool:
        """Delete a competition together with every submission made to it."""
        removed = self._delete(self._competitions, competition_id)
        cascaded = self._submissions.remove_where(lambda s: s.competition_id == competition_id)
        if cascaded:
            logger.info(
                "Removed submissions of deleted competition",
                extra={"competition_id": competition_id, "count": cascaded},
            )
        return removed

    def get_competition_by_id(self, competition_id: str) -> Optional[Competition]:
        return self._competitions.get(competition_id)

    def next_competition(self, competition_id: str) -> Optional[Competition]:
        """The follow-on competition winners advance to, if one is linked."""
        competition = self._competitions.get(competition_id)
        if competition is None or competition.next_competition_id is None:
            return None
        return self._competitions.get(competition.next_competition_id)

    # Submissions

    @property
    def competition_submissions(self) -> List[CompetitionSubmission]:
        return self._submissions.all()

    def get_submission_by_id(self, submission_id: str) -> Optional[CompetitionSubmission]:
        return self._submissions.get(submission_id)

    def get_submissions_for_competition(self, competition_id: str) -> List[CompetitionSubmission]:
        return self._submissions.filter(lambda s: s.competition_id == competition_id)

    def get_user_submission(self, competition_id: str, user_id: str) -> Optional[CompetitionSubmission]:
        for submission in self._submissions:
            if submission.competition_id == competition_id and submission.user_id == user_id:
                return submission
        return None

    def submit_competition_entry(self, competition_id: str, user_id: str) -> CompetitionSubmission:
        """
        Enter a user into a competition.

        Raises:
            CompetitionNotFoundError: no competition with that id
            CompetitionClosedError: status or deadline does not allow entries
            CompetitionFullError: max_participants already reached
            DuplicateSubmissionError: the user already has an entry
        """
        competition = self._competitions.get(competition_id)
        if competition is None:
            raise CompetitionNotFoundError(competition_id)

        now = self.now()
        if not competition.is_accepting_submissions(now):
            raise CompetitionClosedError(competition_id)

        if self.get_user_submission(competition_id, user_id) is not None:
            raise DuplicateSubmissionError(competition_id, user_id)

        if competition.max_participants is not None:
            entered = len(self.get_submissions_for_competition(competition_id))
            if entered >= competition.max_participants:
                raise CompetitionFullError(competition_id, competition.max_participants)

        submission = CompetitionSubmission(
            id=generate_id(),
            competition_id=competition_id,
            user_id=user_id,
            submission_date=now,
            status=SubmissionStatus.SUBMITTED,
        )
        self._submissions.append(submission)
        logger.info(
            "Competition entry submitted",
            extra={"competition_id": competition_id, "user_id": user_id, "submission_id": submission.id},
        )
        return submission

    def update_submission_status(
        self,
        submission_id: str,
        status: SubmissionStatus,
        score: Optional[float] = None,
        feedback: Optional[str] = None,
    ) -> Optional[CompetitionSubmission]:
        """Record a review outcome; score and feedback are left alone when not given."""
        changes: dict = {"status": status}
        if score is not None:
            changes["score"] = score
        if feedback is not None:
            changes["feedback"] = feedback
        return self._update(self._submissions, submission_id, SubmissionPatch(**changes))

    def withdraw_competition_entry(self, competition_id: str, user_id: str) -> int:
        """
        Remove a user's entry from a competition.

        Every submission matching both ids is removed. Returns the count.
        """
        removed = self._submissions.remove_where(
            lambda s: s.competition_id == competition_id and s.user_id == user_id
        )
        if removed:
            logger.info(
                "Competition entry withdrawn",
                extra={"competition_id": competition_id, "user_id": user_id, "count": removed},
            )
        return removed

    # News

    @property
    def news(self) -> List[NewsArticle]:
        return self._news.all()

    def add_news(self, data: Union[NewsCreate, Mapping[str, Any]]) -> NewsArticle:
        return self._create(self._news, NewsArticle, _coerce(NewsCreate, data))

    def update_news(self, news_id: str, patch: Union[NewsPatch, Mapping[str, Any]]) -> Optional[NewsArticle]:
        return self._update(self._news, news_id, _coerce(NewsPatch, patch))

    def delete_news(self, news_id: str) -> bool:
        return self._delete(self._news, news_id)

    def get_news_by_id(self, news_id: str) -> Optional[NewsArticle]:
        return self._news.get(news_id)

    # Events

    @property
    def events(self) -> List[MuseumEvent]:
        return self._events.all()

    def add_event(self, data: Union[EventCreate, Mapping[str, Any]]) -> MuseumEvent:
        return self._create(self._events, MuseumEvent, _coerce(EventCreate, data))

    def update_event(self, event_id: str, patch: Union[EventPatch, Mapping[str, Any]]) -> Optional[MuseumEvent]:
        return self._update(self._events, event_id, _coerce(EventPatch, patch))

    def delete_event(self, event_id: str) -> bool:
        return self._delete(self._events, event_id)

    def get_event_by_id(self, event_id: str) -> Optional[MuseumEvent]:
        return self._events.get(event_id)

    # Exhibitions

    @property
    def exhibitions(self) -> List[Exhibition]:
        return self._exhibitions.all()

    def featured_exhibitions(self) -> List[Exhibition]:
        return self._exhibitions.filter(lambda e: e.featured)

    def add_exhibition(self, data: Union[ExhibitionCreate, Mapping[str, Any]]) -> Exhibition:
        return self._create(self._exhibitions, Exhibition, _coerce(ExhibitionCreate, data))

    def update_exhibition(
        self,
        exhibition_id: str,
        patch: Union[ExhibitionPatch, Mapping[str, Any]],
    ) -> Optional[Exhibition]:
        return self._update(self._exhibitions, exhibition_id, _coerce(ExhibitionPatch, patch))

    def delete_exhibition(self, exhibition_id: str) -> bool:
        return self._delete(self._exhibitions, exhibition_id)

    def get_exhibition_by_id(self, exhibition_id: str) -> Optional[Exhibition]:
        return self._exhibitions.get(exhibition_id)
