"""
Fixed seed records the archive store starts with.

Seed entities keep their fixed ids; everything created later gets a
generated id from the store.
"""

from datetime import date, datetime, timezone

from museum_archive.kernel.models.artifact import Artifact
from museum_archive.kernel.models.competition import (
    Competition,
    CompetitionLevel,
    CompetitionStatus,
    CompetitionSubmission,
    SubmissionStatus,
)
from museum_archive.kernel.models.event import MuseumEvent
from museum_archive.kernel.models.exhibition import Exhibition
from museum_archive.kernel.models.news import NewsArticle
from museum_archive.kernel.models.base import utcnow
from museum_archive.kernel.store.archive_store import ArchiveStore, Clock
from museum_archive.logging_config import get_logger

logger = get_logger(__name__)


def _utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


SEED_ARTIFACTS = [
    Artifact(
        id="1",
        collection_number="LW-001",
        accession_number="ACC-1971-001",
        collection_date="1971-12-16",
        contributor_name="Abdul Kalam Memorial Foundation",
        object_type="Photograph",
        object_head="Victory Day Celebration at Dhaka",
        description=(
            "Historic photograph capturing the moment of victory celebration in Dhaka "
            "on December 16, 1971. Shows crowds gathering at Ramna Race Course."
        ),
        measurement="8 x 10 inches",
        images=["https://images.lwarchive.gov.bd/artifacts/lw-001.jpg"],
        gallery_number="G-01",
        found_place="Dhaka, Bangladesh",
        significance_comment="Iconic representation of Bangladesh independence celebration",
        date_created=_utc(2024, 1, 15),
        tags=["Victory Day", "Dhaka", "1971", "Independence", "Celebration"],
        is_public=True,
    ),
    Artifact(
        id="2",
        collection_number="LW-002",
        accession_number="ACC-1971-002",
        collection_date="1971-03-26",
        contributor_name="Bangladesh National Archives",
        object_type="Document",
        object_head="Declaration of Independence Transcript",
        description=(
            "Original transcript of the Declaration of Independence of Bangladesh, "
            "broadcast on March 26, 1971."
        ),
        measurement="11 x 8.5 inches",
        images=["https://images.lwarchive.gov.bd/artifacts/lw-002.jpg"],
        gallery_number="G-02",
        found_place="Chittagong, Bangladesh",
        significance_comment="Historical document marking the beginning of Bangladesh independence",
        date_created=_utc(2024, 1, 20),
        tags=["Declaration", "Independence", "March 26", "Document", "Historic"],
        is_public=True,
    ),
    Artifact(
        id="3",
        collection_number="LW-003",
        accession_number="ACC-1971-003",
        collection_date="1971-08-15",
        contributor_name="Mukti Bahini Veterans Association",
        object_type="Weapon",
        object_head="G3P3-7.62 Rifle",
        description=(
            "Rifle used by freedom fighters during the Liberation War. "
            "Donated by veteran freedom fighter Abdul Rahman."
        ),
        measurement="40 x 8 inches",
        images=["https://images.lwarchive.gov.bd/artifacts/lw-003.jpg"],
        gallery_number="G-03",
        found_place="Jessore, Bangladesh",
        significance_comment="Represents the armed struggle for independence",
        date_created=_utc(2024, 2, 1),
        tags=["Weapon", "Freedom Fighter", "Mukti Bahini", "Armed Struggle"],
        is_public=True,
    ),
    Artifact(
        id="4",
        collection_number="LW-004",
        accession_number="ACC-1971-004",
        collection_date="1971-10-26",
        contributor_name="Bangladesh Army Museum",
        object_type="Weapon",
        object_head="Sten Gun Mk II",
        description=(
            "A British-designed 9mm submachine gun, widely used by the Mukti Bahini "
            "during the 1971 Liberation War for close-quarters combat."
        ),
        measurement="762mm (overall length)",
        images=["https://images.lwarchive.gov.bd/artifacts/lw-004.jpg"],
        gallery_number="G-04",
        found_place="Various battlefields, Bangladesh",
        significance_comment=(
            "A quintessential weapon of the Liberation War, symbolizing the "
            "resourcefulness of freedom fighters."
        ),
        date_created=_utc(2024, 3, 1),
        tags=["Weapon", "Sten Gun", "Mukti Bahini", "Submachine Gun", "1971"],
        is_public=True,
    ),
    Artifact(
        id="5",
        collection_number="LW-005",
        accession_number="ACC-1971-005",
        collection_date="1971-11-10",
        contributor_name="Individual Freedom Fighter Collection",
        object_type="Weapon",
        object_head="AK-47 Assault Rifle",
        description=(
            "A Soviet-designed assault rifle, some variants of which were used by "
            "freedom fighters during the 1971 Liberation War."
        ),
        measurement="870mm (overall length) with fixed stock",
        images=["https://images.lwarchive.gov.bd/artifacts/lw-005.jpg"],
        gallery_number="G-05",
        found_place="Border regions, Bangladesh",
        significance_comment="Represents the procurement of arms by the Mukti Bahini.",
        date_created=_utc(2024, 3, 5),
        tags=["Weapon", "AK-47", "Assault Rifle", "Mukti Bahini", "Soviet", "1971"],
        is_public=True,
    ),
    Artifact(
        id="6",
        collection_number="LW-006",
        accession_number="ACC-1969-001",
        collection_date="1969-02-22",
        contributor_name="Sheikh Family Trust",
        object_type="Letter",
        object_head="Letter from the Mass Uprising",
        description="Handwritten letter describing the 1969 mass uprising in East Pakistan.",
        measurement="A4, two pages",
        images=["https://images.lwarchive.gov.bd/artifacts/lw-006.jpg"],
        gallery_number="G-02",
        found_place="Dhaka, Bangladesh",
        significance_comment="Pending conservation review before publication",
        date_created=_utc(2024, 4, 2),
        tags=["Letter", "1969", "Uprising"],
        is_public=False,
    ),
]

SEED_COMPETITIONS = [
    Competition(
        id="1",
        title="District Essay Competition: Voices of 1971",
        description="Write an essay on a personal or family story from the Liberation War.",
        level=CompetitionLevel.DISTRICT,
        type="essay",
        eligibility_criteria="Students of classes 6-10 within the district",
        start_date=_utc(2026, 10, 1),
        end_date=_utc(2026, 12, 31, 23, 59),
        judging_criteria="Historical accuracy, originality, clarity of writing",
        rewards="Certificate and advancement to the division round",
        status=CompetitionStatus.OPEN,
        admin_user_id="1",
        related_exhibition_id="1",
        max_participants=500,
        next_competition_id="2",
        date_created=_utc(2026, 9, 15),
        thumbnail="https://images.lwarchive.gov.bd/competitions/essay-district.jpg",
    ),
    Competition(
        id="2",
        title="Division Essay Competition: Voices of 1971",
        description="Division round for district essay winners.",
        level=CompetitionLevel.DIVISION,
        type="essay",
        eligibility_criteria="Winners of the district round",
        start_date=_utc(2027, 1, 15),
        end_date=_utc(2027, 2, 28, 23, 59),
        judging_criteria="Historical accuracy, originality, clarity of writing",
        rewards="Certificate, prize money and advancement to the national round",
        status=CompetitionStatus.UPCOMING,
        admin_user_id="1",
        next_competition_id="3",
        date_created=_utc(2026, 9, 15),
        thumbnail="https://images.lwarchive.gov.bd/competitions/essay-division.jpg",
    ),
    Competition(
        id="3",
        title="National Essay Final",
        description="National final for division essay winners.",
        level=CompetitionLevel.NATIONAL,
        type="essay",
        eligibility_criteria="Winners of the division round",
        start_date=_utc(2027, 3, 10),
        end_date=_utc(2027, 3, 26),
        judging_criteria="Panel review and oral presentation",
        rewards="National award presented on Independence Day",
        status=CompetitionStatus.DRAFT,
        admin_user_id="1",
        date_created=_utc(2026, 9, 15),
        thumbnail="https://images.lwarchive.gov.bd/competitions/essay-national.jpg",
    ),
    Competition(
        id="4",
        title="Photography Competition: Memorials of the Liberation War",
        description="Photograph a memorial, monument or mass grave site and tell its story.",
        level=CompetitionLevel.DIVISION,
        type="photography",
        eligibility_criteria="Open to all residents of Bangladesh",
        start_date=_utc(2026, 3, 1),
        end_date=_utc(2026, 3, 26, 23, 59),
        judging_criteria="Composition, storytelling, relevance",
        rewards="Photographs displayed in the museum gallery",
        status=CompetitionStatus.CLOSED,
        admin_user_id="2",
        related_exhibition_id="2",
        date_created=_utc(2026, 2, 1),
        thumbnail="https://images.lwarchive.gov.bd/competitions/photography.jpg",
    ),
]

SEED_SUBMISSIONS = [
    CompetitionSubmission(
        id="1",
        competition_id="1",
        user_id="4",
        submission_date=_utc(2026, 10, 5, 9, 30),
        status=SubmissionStatus.SUBMITTED,
    ),
]

SEED_NEWS = [
    NewsArticle(
        id="1",
        title="New Research on Liberation War Artifacts",
        category="Research",
        image_url="https://images.lwarchive.gov.bd/news/687-400x200.jpg",
        date=date(2025, 9, 1),
        author="Research Desk",
        summary="Researchers uncover new details about the 1971 Liberation War through digitized documents.",
        content=(
            "Digitization of the archive's document holdings has surfaced previously "
            "uncatalogued correspondence from the Mujibnagar government."
        ),
        tags=["Research", "Digitization"],
        date_created=_utc(2025, 9, 1),
    ),
    NewsArticle(
        id="2",
        title="Upcoming Exhibition: Liberation War Heroes",
        category="Exhibits",
        image_url="https://images.lwarchive.gov.bd/news/543-400x200.jpg",
        date=date(2025, 8, 20),
        author="Curatorial Team",
        summary="A new exhibition honoring the unsung heroes of the Liberation War will open this fall.",
        content="The exhibition brings together oral histories and personal effects of freedom fighters.",
        tags=["Exhibition"],
        date_created=_utc(2025, 8, 20),
    ),
    NewsArticle(
        id="3",
        title="Library Closed for Renovation",
        category="Announcements",
        image_url="",
        date=date(2025, 7, 1),
        author="Museum Administration",
        summary="The museum library will be closed for renovation until further notice.",
        content="The museum library will be closed for renovation until further notice.",
        tags=["Notice"],
        date_created=_utc(2025, 7, 1),
    ),
]

SEED_EVENTS = [
    MuseumEvent(
        id="1",
        title="Victory Day Celebration: Remembering Our Heroes",
        date=date(2025, 12, 16),
        time="10:00am - 2:00pm BST",
        location="Museum Main Hall & Online",
        type="Festivals and Event Series",
        description=(
            "A celebration to honor the martyrs and freedom fighters of the Liberation War, "
            "with speeches, cultural performances and a special exhibition."
        ),
        image_url="https://images.lwarchive.gov.bd/events/victory-day.jpg",
        date_created=_utc(2025, 8, 1),
    ),
    MuseumEvent(
        id="2",
        title="Oral Histories Project: Share Your Story",
        date=date(2025, 11, 5),
        time="10:00am - 4:00pm BST",
        location="Museum Archive Wing",
        type="Workshops & Talks",
        description=(
            "Freedom fighters, their families and witnesses share personal stories "
            "for the museum's oral history collection."
        ),
        image_url="https://images.lwarchive.gov.bd/events/oral-histories.jpg",
        date_created=_utc(2025, 8, 1),
    ),
    MuseumEvent(
        id="3",
        title="Exhibition Opening: Women in the War",
        date=date(2025, 10, 27),
        time="3:00pm - 5:00pm BST",
        location="Temporary Exhibition Gallery",
        type="Exhibitions",
        description="Opening of an exhibition on the contributions and sacrifices of women during the war.",
        date_created=_utc(2025, 8, 1),
    ),
    MuseumEvent(
        id="4",
        title="Documentary Screening: The Birth of a Nation",
        date=date(2025, 10, 10),
        time="6:00pm - 8:00pm BST",
        location="Museum Auditorium",
        type="Film Screening",
        description="Screening of a documentary on the events leading to the independence of Bangladesh.",
        date_created=_utc(2025, 8, 1),
    ),
    MuseumEvent(
        id="5",
        title="Youth Education Workshop: Our History, Our Future",
        date=date(2025, 9, 22),
        time="9:00am - 1:00pm BST",
        location="Educational Center",
        type="Kids & Families",
        description="An interactive workshop for young students on the Liberation War.",
        date_created=_utc(2025, 8, 1),
    ),
]

SEED_EXHIBITIONS = [
    Exhibition(
        id="1",
        title="Voices of Freedom: Personal Stories from 1971",
        description=(
            "Diaries, letters, oral testimonies and rare photographs from people "
            "who lived through the 1971 Liberation War."
        ),
        curator_note="A tribute to the human spirit during adversity.",
        featured_image="https://images.lwarchive.gov.bd/exhibitions/voices-of-freedom.jpg",
        artifact_count=24,
        view_count=1250,
        featured=True,
        date_created=_utc(2024, 1, 15),
    ),
    Exhibition(
        id="2",
        title="Weapons of Liberation: The Arsenal of Freedom",
        description=(
            "The weaponry of the Mukti Bahini, from antiquated rifles to improvised "
            "explosives, and how it was acquired and used."
        ),
        curator_note="Each weapon on display embodies a piece of the struggle.",
        featured_image="https://images.lwarchive.gov.bd/exhibitions/weapons-of-liberation.jpg",
        artifact_count=18,
        view_count=980,
        featured=False,
        date_created=_utc(2024, 2, 1),
    ),
    Exhibition(
        id="3",
        title="Documents of Destiny: Official Records and Declarations",
        description=(
            "Official records, declarations and diplomatic correspondence that "
            "charted the course of Bangladesh's independence."
        ),
        curator_note="These documents are the bedrock of Bangladesh's sovereignty.",
        featured_image="https://images.lwarchive.gov.bd/exhibitions/documents-of-destiny.jpg",
        artifact_count=31,
        view_count=1580,
        featured=True,
        date_created=_utc(2024, 1, 20),
    ),
]


def build_seeded_store(clock: Clock = utcnow) -> ArchiveStore:
    """Create an archive store pre-populated with the seed records."""
    store = ArchiveStore(
        artifacts=list(SEED_ARTIFACTS),
        competitions=list(SEED_COMPETITIONS),
        submissions=list(SEED_SUBMISSIONS),
        news=list(SEED_NEWS),
        events=list(SEED_EVENTS),
        exhibitions=list(SEED_EXHIBITIONS),
        clock=clock,
    )
    logger.info(
        "Archive store seeded",
        extra={
            "artifacts": len(SEED_ARTIFACTS),
            "competitions": len(SEED_COMPETITIONS),
            "submissions": len(SEED_SUBMISSIONS),
            "news": len(SEED_NEWS),
            "events": len(SEED_EVENTS),
            "exhibitions": len(SEED_EXHIBITIONS),
        },
    )
    return store
