"""Unit tests for the SQLModel user repository against in-memory SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from src.useradmin.entities.core.user import ListUsersRequest, UserStatus, UserTable


class TestSaveAndFind:
    def test_save_returns_stored_user(self, user_repository, make_user):
        user = make_user(name="Ann", email="ann@example.com", phone="555")

        saved = user_repository.save(user)

        assert saved == user
        assert user_repository.find_by_id(user.id) == user
        assert user_repository.find_by_email("ann@example.com") == user

    def test_find_missing_returns_none(self, user_repository):
        assert user_repository.find_by_id("missing") is None
        assert user_repository.find_by_email("nobody@example.com") is None

    def test_duplicate_live_email_is_rejected(self, user_repository, make_user):
        user_repository.save(make_user(email="dup@example.com"))

        with pytest.raises(IntegrityError):
            user_repository.save(make_user(email="dup@example.com"))

        # The session is usable again after the failed commit
        assert user_repository.find_by_email("dup@example.com") is not None


class TestUpdate:
    def test_update_overwrites_mutable_fields(self, user_repository, make_user):
        user = user_repository.save(make_user())
        before = user.updated_at

        user.name = "Renamed"
        user.status = UserStatus.INACTIVE
        updated = user_repository.update(user)

        assert updated.name == "Renamed"
        assert updated.status is UserStatus.INACTIVE
        assert updated.updated_at.replace(tzinfo=None) > before.replace(tzinfo=None)
        assert user_repository.find_by_id(user.id).name == "Renamed"

    def test_update_keeps_created_at(self, user_repository, make_user):
        user = user_repository.save(make_user())
        created = user.created_at

        user.phone = "123"
        updated = user_repository.update(user)

        assert updated.created_at.replace(tzinfo=None) == created.replace(tzinfo=None)


class TestSoftDelete:
    def test_deleted_user_is_hidden(self, user_repository, session, make_user):
        user = user_repository.save(make_user(email="gone@example.com"))

        assert user_repository.delete(user.id) is True

        assert user_repository.find_by_id(user.id) is None
        assert user_repository.find_by_email("gone@example.com") is None
        # The row is kept with a deletion marker
        row = session.exec(select(UserTable).where(UserTable.id == user.id)).one()
        assert row.deleted_at is not None

    def test_delete_twice_reports_nothing_deleted(self, user_repository, make_user):
        user = user_repository.save(make_user())

        assert user_repository.delete(user.id) is True
        assert user_repository.delete(user.id) is False
        assert user_repository.delete("missing") is False

    def test_email_is_reusable_after_delete(self, user_repository, make_user):
        first = user_repository.save(make_user(email="again@example.com"))
        user_repository.delete(first.id)

        second = user_repository.save(make_user(email="again@example.com"))

        assert user_repository.find_by_email("again@example.com").id == second.id


class TestList:
    @pytest.fixture
    def seeded(self, user_repository, make_user):
        users = [
            make_user(name="Alice Smith", email="alice@example.com"),
            make_user(name="Bob Jones", email="bob@corp.io", status=UserStatus.INACTIVE),
            make_user(name="Carol", email="carol.smith@example.com"),
            make_user(name="Dave 100%", email="dave@example.com"),
        ]
        for user in users:
            user_repository.save(user)
        return users

    def test_newest_first(self, user_repository, seeded):
        users, total = user_repository.list(ListUsersRequest())

        assert total == 4
        assert [u.name for u in users] == ["Dave 100%", "Carol", "Bob Jones", "Alice Smith"]

    def test_pagination_keeps_full_total(self, user_repository, seeded):
        users, total = user_repository.list(ListUsersRequest(page=2, size=3))

        assert total == 4
        assert [u.name for u in users] == ["Alice Smith"]

    def test_page_past_the_end_is_empty(self, user_repository, seeded):
        users, total = user_repository.list(ListUsersRequest(page=5, size=10))

        assert users == []
        assert total == 4

    def test_keyword_matches_name_or_email_case_insensitively(self, user_repository, seeded):
        users, total = user_repository.list(ListUsersRequest(keyword="SMITH"))

        assert total == 2
        assert {u.name for u in users} == {"Alice Smith", "Carol"}

    def test_keyword_folds_non_ascii_case(self, user_repository, make_user):
        """Case folding is not limited to ASCII letters."""
        user_repository.save(make_user(name="ÅSA Öberg", email="asa@example.se"))

        users, total = user_repository.list(ListUsersRequest(keyword="åsa öb"))

        assert total == 1
        assert users[0].name == "ÅSA Öberg"

    def test_keyword_wildcards_are_literal(self, user_repository, seeded):
        users, total = user_repository.list(ListUsersRequest(keyword="%"))

        assert total == 1
        assert users[0].name == "Dave 100%"

    def test_status_filter(self, user_repository, seeded):
        users, total = user_repository.list(ListUsersRequest(status=UserStatus.INACTIVE))

        assert total == 1
        assert users[0].email == "bob@corp.io"

    def test_filters_combine(self, user_repository, seeded):
        _, total = user_repository.list(
            ListUsersRequest(keyword="example.com", status=UserStatus.ACTIVE)
        )
        assert total == 3

    def test_deleted_users_are_excluded(self, user_repository, seeded):
        user_repository.delete(seeded[0].id)

        users, total = user_repository.list(ListUsersRequest())

        assert total == 3
        assert seeded[0].id not in {u.id for u in users}


class TestRepositoryContract:
    def test_incomplete_implementation_cannot_be_instantiated(self):
        from src.useradmin.entities.core.user import AbstractUserRepository

        class PartialRepository(AbstractUserRepository):
            def save(self, user):
                return user

        with pytest.raises(TypeError):
            PartialRepository()
