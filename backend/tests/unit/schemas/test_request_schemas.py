"""Request schema validation and camelCase aliases."""

import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from notekeeper.core.permissions import UserPermission
from notekeeper.core.schemas import (
    CategoryCreate,
    CategorySummary,
    LoginRequest,
    NoteCreate,
    NoteFilters,
    NoteResponse,
    NoteUpdate,
    PaginationInfo,
    PasswordResetRequest,
    RegisterRequest,
    ShareRequest,
    UserResponse,
)
from notekeeper.core.models import SharePermission


class TestRegisterRequest:
    def test_normalizes_case(self):
        req = RegisterRequest(username=" John_Doe ", email="John@Example.com", password="secret1")

        assert req.username == "john_doe"
        assert req.email == "john@example.com"

    @pytest.mark.parametrize("username", ["ab", "x" * 31, "has space", "dash-ed", "émile"])
    def test_rejects_bad_usernames(self, username):
        with pytest.raises(ValidationError):
            RegisterRequest(username=username, email="a@example.com", password="secret1")

    def test_rejects_short_password(self):
        with pytest.raises(ValidationError, match="at least 6 characters"):
            RegisterRequest(username="john", email="a@example.com", password="12345")


class TestLoginRequest:
    def test_identifier_is_lowercased(self):
        assert LoginRequest(email=" Bob@Example.com ", password="x").email == "bob@example.com"

    def test_blank_identifier(self):
        with pytest.raises(ValidationError, match="Email or username is required"):
            LoginRequest(email="   ", password="x")


class TestPasswordResetRequest:
    def test_accepts_camel_case_keys(self):
        req = PasswordResetRequest.model_validate(
            {"oldPassword": "a", "newPassword": "secret1", "confirmPassword": "secret1"}
        )

        assert req.new_password == "secret1"

    def test_mismatch(self):
        with pytest.raises(ValidationError, match="Passwords do not match"):
            PasswordResetRequest(old_password="a", new_password="secret1", confirm_password="secret2")


class TestNoteSchemas:
    def test_create_normalizes(self):
        cat = uuid.uuid4()
        req = NoteCreate(title="  Title ", body="body", color="#ABC", categories=[cat, cat])

        assert req.title == "Title"
        assert req.color == "aabbcc"
        assert req.categories == [cat]

    def test_create_requires_body(self):
        with pytest.raises(ValidationError):
            NoteCreate(title="t", body="   ")

    def test_title_length_limit(self):
        with pytest.raises(ValidationError):
            NoteCreate(title="x" * 201, body="b")

    def test_update_leaves_missing_fields_unset(self):
        req = NoteUpdate(title="New")

        assert req.body is None
        assert req.color is None
        assert req.categories is None

    def test_filters(self):
        filters = NoteFilters(query="  ", color="#FFF475", categories=[])

        assert filters.query is None
        assert filters.color == "fff475"

    def test_share_request_defaults_to_view(self):
        req = ShareRequest(user=" Alice ")

        assert req.user == "alice"
        assert req.permission is SharePermission.VIEW

    def test_note_response_serializes_camel_case_and_hash_color(self):
        now = datetime.now(timezone.utc)
        author = UserResponse(id=uuid.uuid4(), username="a", email="a@example.com")
        response = NoteResponse(
            id=uuid.uuid4(),
            title="t",
            body="b",
            color="aabbcc",
            categories=[CategorySummary(id=uuid.uuid4(), name="work", color="ff0000")],
            attachments=[],
            author=author,
            shared_with=[],
            is_owner=True,
            user_permission=UserPermission.OWNER,
            created_at=now,
            updated_at=now,
        )

        data = response.model_dump(mode="json", by_alias=True)

        assert data["color"] == "#aabbcc"
        assert data["categories"][0]["color"] == "#ff0000"
        assert data["isOwner"] is True
        assert data["userPermission"] == "owner"
        assert "sharedWith" in data and "createdAt" in data


class TestCategoryCreate:
    def test_lowercases_name(self):
        assert CategoryCreate(name=" Work ").name == "work"

    def test_color_optional(self):
        assert CategoryCreate(name="w").color is None

    def test_name_length_limit(self):
        with pytest.raises(ValidationError):
            CategoryCreate(name="x" * 51)


class TestPaginationInfo:
    @pytest.mark.parametrize(
        "total, page, limit, pages, has_next, has_prev",
        [
            (25, 1, 12, 3, True, False),
            (25, 3, 12, 3, False, True),
            (24, 2, 12, 2, False, True),
            (0, 1, 12, 0, False, False),
        ],
    )
    def test_create(self, total, page, limit, pages, has_next, has_prev):
        info = PaginationInfo.create(total=total, page=page, limit=limit)

        assert info.total_pages == pages
        assert info.has_next_page is has_next
        assert info.has_prev_page is has_prev
        assert info.total_notes == total
