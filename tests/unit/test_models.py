"""Unit tests for entity and patch models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from museum_archive.kernel.models.artifact import Artifact, ArtifactPatch
from museum_archive.kernel.models.base import generate_id
from museum_archive.kernel.models.competition import CompetitionCreate, CompetitionPatch, SubmissionPatch


class TestPatchModels:

    @pytest.mark.parametrize("patch_cls,field", [
        (ArtifactPatch, "id"),
        (ArtifactPatch, "date_created"),
        (CompetitionPatch, "id"),
        (SubmissionPatch, "submission_date"),
        (SubmissionPatch, "competition_id"),
    ])
    def test_identity_fields_are_rejected(self, patch_cls, field):
        with pytest.raises(ValidationError):
            patch_cls(**{field: "x"})

    def test_changes_only_contains_set_fields(self):
        patch = ArtifactPatch(description="New", correction=None)
        assert patch.changes() == {"description": "New", "correction": None}
        assert ArtifactPatch().changes() == {}


class TestArtifactModel:

    def test_entities_are_frozen(self, store):
        artifact = store.get_artifact_by_id("1")
        with pytest.raises(ValidationError):
            artifact.object_head = "Changed"

    def test_tags_are_deduplicated_in_order(self, store):
        artifact = store.add_artifact({
            "collection_number": "LW-9",
            "accession_number": "ACC-9",
            "object_type": "Photograph",
            "object_head": "Tagged",
            "images": ["https://example.org/x.jpg"],
            "tags": ["1971", "Dhaka", "1971", " ", "Dhaka", "War"],
        })
        assert artifact.tags == ["1971", "Dhaka", "War"]

        updated = store.update_artifact(artifact.id, {"tags": [" Medal ", "Medal", "1971"]})
        assert updated.tags == ["Medal", "1971"]

    def test_collection_year(self, store):
        assert store.get_artifact_by_id("1").collection_year == 1971
        assert store.update_artifact("1", {"collection_date": "circa 1971"}).collection_year is None

    def test_naive_creation_date_is_utc(self):
        artifact = Artifact(
            id="x",
            collection_number="1",
            accession_number="1",
            object_type="Document",
            object_head="Doc",
            images=["https://example.org/x.jpg"],
            date_created=datetime(2024, 1, 1),
        )
        assert artifact.date_created.tzinfo == timezone.utc


class TestCompetitionModel:

    def test_end_before_start_is_rejected(self):
        with pytest.raises(ValidationError):
            CompetitionCreate(
                title="Bad",
                level="district",
                type="essay",
                start_date="2025-10-31T00:00:00Z",
                end_date="2025-10-01T00:00:00Z",
                admin_user_id="1",
            )

    def test_equal_dates_are_rejected(self):
        with pytest.raises(ValidationError):
            CompetitionCreate(
                title="Bad",
                level="district",
                type="essay",
                start_date="2025-10-01T00:00:00Z",
                end_date="2025-10-01T00:00:00Z",
                admin_user_id="1",
            )


def test_generated_ids_strictly_increase():
    ids = [int(generate_id()) for _ in range(100)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 100
