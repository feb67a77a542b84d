"""NoteService authorization and pagination with fake repositories."""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from notekeeper.core.exceptions import PermissionDenied, ResourceNotFound, ValidationFailed
from notekeeper.core.models import Category, Note, NoteShare, User
from notekeeper.core.schemas import NoteCreate, NoteFilters, NoteUpdate
from notekeeper.core.services import note_service as ns
from notekeeper.core.services.note_service import NoteService

OWNER = uuid.uuid4()
VIEWER = uuid.uuid4()
EDITOR = uuid.uuid4()


def make_note(**overrides):
    now = datetime.now(timezone.utc)
    owner = User(id=OWNER, username="owner", email="owner@example.com", password_hash="x")
    viewer = User(id=VIEWER, username="viewer", email="viewer@example.com", password_hash="x")
    editor = User(id=EDITOR, username="editor", email="editor@example.com", password_hash="x")
    fields = dict(
        id=uuid.uuid4(),
        title="t",
        body="b",
        color="ffffff",
        user_id=OWNER,
        owner=owner,
        shares=[
            NoteShare(user_id=VIEWER, user=viewer, permission="view"),
            NoteShare(user_id=EDITOR, user=editor, permission="edit"),
        ],
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return Note(**fields)


class FakeStorage:
    def __init__(self):
        self.deleted = []

    async def delete(self, filename):
        self.deleted.append(filename)
        return True


@pytest.fixture
def note():
    return make_note()


@pytest.fixture
def note_repo(monkeypatch, note):
    repo = AsyncMock()
    repo.get_by_id.return_value = note
    repo.update_note.side_effect = lambda n, data, categories=None: n
    repo.create_note.side_effect = lambda data, categories: make_note(
        title=data["title"], body=data["body"], categories=list(categories), shares=[]
    )
    monkeypatch.setattr(ns, "NoteRepository", lambda session: repo)
    return repo


@pytest.fixture
def category_repo(monkeypatch):
    repo = AsyncMock()
    repo.get_user_categories_by_ids.return_value = []
    monkeypatch.setattr(ns, "CategoryRepository", lambda session: repo)
    return repo


@pytest.fixture
def service(note_repo, category_repo):
    svc = NoteService(session=object())
    svc.storage = FakeStorage()
    return svc


class TestRead:
    async def test_owner_and_shares_can_read(self, service, note):
        for user_id, permission in ((OWNER, "owner"), (VIEWER, "view"), (EDITOR, "edit")):
            envelope = await service.get_note(note.id, user_id)
            assert envelope.note.user_permission.value == permission
            assert envelope.note.is_owner is (user_id == OWNER)

    async def test_stranger_gets_not_found(self, service, note):
        with pytest.raises(ResourceNotFound) as exc:
            await service.get_note(note.id, uuid.uuid4())
        assert exc.value.status_code == 404
        assert exc.value.errors == {"note": "Note not found"}

    async def test_missing_note(self, service, note_repo):
        note_repo.get_by_id.return_value = None

        with pytest.raises(ResourceNotFound):
            await service.get_note(uuid.uuid4(), OWNER)


class TestUpdate:
    async def test_view_share_is_forbidden(self, service, note, note_repo):
        with pytest.raises(PermissionDenied) as exc:
            await service.update_note(note.id, VIEWER, NoteUpdate(title="x"))
        assert exc.value.status_code == 403
        note_repo.update_note.assert_not_called()

    async def test_edit_share_updates(self, service, note, note_repo):
        await service.update_note(note.id, EDITOR, NoteUpdate(title="x", color="#ABCDEF"))

        _, data = note_repo.update_note.call_args.args[:2]
        assert data == {"title": "x", "color": "abcdef"}

    async def test_categories_checked_against_owner(self, service, note, category_repo):
        wanted = uuid.uuid4()

        with pytest.raises(ValidationFailed) as exc:
            await service.update_note(note.id, EDITOR, NoteUpdate(categories=[wanted]))

        category_repo.get_user_categories_by_ids.assert_awaited_once_with(OWNER, [wanted])
        assert exc.value.errors == {"categories": "Invalid category"}


class TestDelete:
    @pytest.mark.parametrize("user_id", [VIEWER, EDITOR])
    async def test_shares_cannot_delete(self, service, note, note_repo, user_id):
        with pytest.raises(PermissionDenied):
            await service.delete_note(note.id, user_id)
        note_repo.delete_note.assert_not_called()

    async def test_owner_delete_removes_files(self, service, note, note_repo):
        from notekeeper.core.models import NoteAttachment

        note.attachments.append(
            NoteAttachment(
                filename="abc.txt", original_name="a.txt", mime_type="text/plain", size=1, path="/uploads/abc.txt"
            )
        )

        assert await service.delete_note(note.id, OWNER) is True

        note_repo.delete_note.assert_awaited_once_with(note)
        assert service.storage.deleted == ["abc.txt"]


class TestCreate:
    async def test_owned_categories_are_passed_on(self, service, category_repo, note_repo):
        category = Category(id=uuid.uuid4(), name="work", color="ffffff", user_id=OWNER)
        category_repo.get_user_categories_by_ids.return_value = [category]

        envelope = await service.create_note(
            OWNER, NoteCreate(title="t", body="b", categories=[category.id])
        )

        assert [c.name for c in envelope.note.categories] == ["work"]
        data = note_repo.create_note.call_args.args[0]
        assert data == {"title": "t", "body": "b", "user_id": OWNER}


class TestList:
    async def test_page_and_limit_are_clamped(self, service, note_repo):
        note_repo.list_visible_notes.return_value = ([], 0)

        result = await service.list_notes(OWNER, NoteFilters(), page=-3, limit=1000)

        kwargs = note_repo.list_visible_notes.call_args.kwargs
        assert kwargs["page"] == 1
        assert kwargs["per_page"] == 100
        assert result.pagination.current_page == 1
        assert result.pagination.total_pages == 0

    async def test_default_limit(self, service, note_repo, note):
        note_repo.list_visible_notes.return_value = ([note], 1)

        result = await service.list_notes(VIEWER, NoteFilters(query="t"))

        kwargs = note_repo.list_visible_notes.call_args.kwargs
        assert kwargs["per_page"] == 12
        assert kwargs["query"] == "t"
        assert result.notes[0].user_permission.value == "view"
