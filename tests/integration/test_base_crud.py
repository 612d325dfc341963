"""
Test suite for BaseCRUD against an in-memory SQLite database.

Tests create, read (by ID and all), partial update, delete and exists
with real statements so RETURNING and ordering behave as in production.

System role: Verification of generic database layer foundation
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from admin_panel.boundary.db.CRUD.mentor_review_crud import MentorReviewCRUD
from admin_panel.boundary.db.CRUD.project_crud import ProjectCRUD
from admin_panel.boundary.db.models.project_model import ProjectModel
from admin_panel.core.exceptions import ValidationError


@pytest.fixture
def project_crud() -> ProjectCRUD:
    """Provide ProjectCRUD instance for testing."""
    return ProjectCRUD()


@pytest.fixture
def review_crud() -> MentorReviewCRUD:
    """Provide MentorReviewCRUD instance for testing."""
    return MentorReviewCRUD()


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create()."""

    @pytest.mark.asyncio
    async def test_create_should_assign_id_and_timestamps(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test create returns the stored row with server-assigned fields."""
        project = await project_crud.create(
            test_async_db, title="Alpha", mentor="Bob", students=0
        )

        assert isinstance(project, ProjectModel)
        assert project.id == 1
        assert project.title == "Alpha"
        assert project.created_at is not None
        assert project.updated_at == project.created_at

    @pytest.mark.asyncio
    async def test_ids_should_increase_monotonically(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test successive creates get strictly increasing ids, even after a delete."""
        first = await project_crud.create(test_async_db, title="A", mentor="M", students=0)
        second = await project_crud.create(test_async_db, title="B", mentor="M", students=0)
        await project_crud.delete_by_id(test_async_db, second.id)
        third = await project_crud.create(test_async_db, title="C", mentor="M", students=0)

        assert first.id < second.id < third.id

    @pytest.mark.asyncio
    async def test_rating_should_round_trip_as_float(
        self, review_crud: MentorReviewCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test NUMERIC rating is read back as a float."""
        review = await review_crud.create(
            test_async_db, mentor="Jo", feedback="Great", rating=4.5
        )

        assert review.rating == 4.5
        assert isinstance(review.rating, float)


class TestBaseCRUDRead:
    """Test suite for BaseCRUD.get_by_id(), get_all() and exists()."""

    @pytest.mark.asyncio
    async def test_get_all_should_return_empty_sequence_for_empty_table(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test an empty store is not an error."""
        assert list(await project_crud.get_all(test_async_db)) == []

    @pytest.mark.asyncio
    async def test_get_all_should_order_by_id(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test rows come back in ascending id order."""
        for title in ("C", "A", "B"):
            await project_crud.create(test_async_db, title=title, mentor="M", students=0)

        rows = await project_crud.get_all(test_async_db)

        assert [row.id for row in rows] == sorted(row.id for row in rows)
        assert [row.title for row in rows] == ["C", "A", "B"]

    @pytest.mark.asyncio
    async def test_get_by_id_and_exists(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test lookups by id for present and missing rows."""
        project = await project_crud.create(test_async_db, title="A", mentor="M", students=0)

        assert (await project_crud.get_by_id(test_async_db, project.id)).title == "A"
        assert await project_crud.get_by_id(test_async_db, 999) is None
        assert await project_crud.exists(test_async_db, project.id) is True
        assert await project_crud.exists(test_async_db, 999) is False


class TestBaseCRUDUpdate:
    """Test suite for BaseCRUD.update_fields() and ProjectCRUD.set_students()."""

    @pytest.mark.asyncio
    async def test_update_fields_should_change_only_supplied_columns(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test absent fields keep their stored values."""
        project = await project_crud.create(test_async_db, title="A", mentor="Bob", students=3)
        created_at = project.created_at
        test_async_db.expunge_all()

        updated = await project_crud.update_fields(
            test_async_db, project.id, [("mentor", "Ann")]
        )

        assert updated.mentor == "Ann"
        assert updated.title == "A"
        assert updated.students == 3
        assert updated.created_at == created_at
        assert updated.updated_at >= created_at

    @pytest.mark.asyncio
    async def test_update_fields_should_return_none_for_missing_row(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test a non-matching id updates nothing."""
        result = await project_crud.update_fields(test_async_db, 42, [("title", "X")])

        assert result is None

    @pytest.mark.asyncio
    async def test_update_fields_should_reject_empty_assignments(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test an UPDATE with zero assignments is never issued."""
        project = await project_crud.create(test_async_db, title="A", mentor="Bob", students=3)

        with pytest.raises(ValidationError):
            await project_crud.update_fields(test_async_db, project.id, [])

        unchanged = await project_crud.get_by_id(test_async_db, project.id)
        assert (unchanged.title, unchanged.mentor, unchanged.students) == ("A", "Bob", 3)

    @pytest.mark.asyncio
    async def test_set_students_should_refresh_updated_at(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test the narrow student-count update."""
        project = await project_crud.create(test_async_db, title="A", mentor="Bob", students=0)
        before = project.updated_at
        test_async_db.expunge_all()

        updated = await project_crud.set_students(test_async_db, project.id, 5)

        assert updated.students == 5
        assert updated.updated_at >= before
        assert await project_crud.set_students(test_async_db, 999, 5) is None


class TestBaseCRUDDelete:
    """Test suite for BaseCRUD.delete_by_id()."""

    @pytest.mark.asyncio
    async def test_delete_should_return_deleted_id_once(
        self, project_crud: ProjectCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test deleting twice: second call finds nothing."""
        project = await project_crud.create(test_async_db, title="A", mentor="Bob", students=0)

        assert await project_crud.delete_by_id(test_async_db, project.id) == project.id
        assert await project_crud.delete_by_id(test_async_db, project.id) is None
