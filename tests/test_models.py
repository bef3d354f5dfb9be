"""Tests for wire models and envelopes."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from carespace_sdk.models import (
    ApiResponse,
    CreateProgramRequest,
    LoginRequest,
    LoginResponse,
    PaginatedResponse,
    Program,
    ProgramCategory,
    ProgramDifficulty,
    User,
    UserRole,
)


class TestEnvelopes:
    """Test the response envelopes."""

    def test_api_response_parses_data(self):
        response = ApiResponse[User].model_validate(
            {
                "success": True,
                "data": {"id": "u1", "email": "ada@example.com", "role": "provider"},
                "message": "ok",
            }
        )
        assert response.success
        assert response.data.id == "u1"
        assert response.data.role is UserRole.PROVIDER
        assert response.message == "ok"

    def test_api_response_failure(self):
        response = ApiResponse[User].model_validate({"success": False, "error": "bad"})
        assert not response.success
        assert response.data is None
        assert response.error == "bad"

    def test_paginated_response(self):
        response = PaginatedResponse[Program].model_validate(
            {
                "data": [{"id": "p1", "name": "Knee"}, {"id": "p2", "name": "Hip"}],
                "page": 2,
                "limit": 2,
                "total": 6,
                "total_pages": 3,
                "has_next": True,
                "has_previous": True,
            }
        )
        assert [p.name for p in response.data] == ["Knee", "Hip"]
        assert response.total_pages == 3
        assert response.has_next

    def test_paginated_defaults(self):
        response = PaginatedResponse[Program].model_validate({})
        assert response.data == []
        assert response.page == 1
        assert response.limit == 20
        assert response.total == 0


class TestWireModels:
    def test_unknown_fields_are_kept(self):
        user = User.model_validate({"id": "u1", "email": "a@b.c", "tenant": "acme"})
        assert user.model_extra == {"tenant": "acme"}

    def test_missing_required_field(self):
        with pytest.raises(PydanticValidationError):
            User.model_validate({"id": "u1"})

    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"name": "Ada Lovelace"}, "Ada Lovelace"),
            ({"first_name": "Ada", "last_name": "Lovelace"}, "Ada Lovelace"),
            ({"first_name": "Ada"}, "Ada"),
            ({}, ""),
        ],
    )
    def test_full_name(self, data, expected):
        user = User.model_validate({"id": "u1", "email": "a@b.c", **data})
        assert user.full_name == expected

    def test_login_response(self):
        response = LoginResponse.model_validate(
            {"access_token": "tok", "expires_in": 3600, "user": {"id": "u1", "email": "a@b.c"}}
        )
        assert response.token_type == "Bearer"
        assert response.user.email == "a@b.c"

    def test_program_with_exercises(self):
        program = Program.model_validate(
            {
                "id": "p1",
                "name": "Knee rehab",
                "category": "rehabilitation",
                "difficulty": "beginner",
                "exercises": [{"id": "e1", "name": "Squat", "order": 1}],
                "created_at": "2026-01-05T10:00:00Z",
            }
        )
        assert program.category is ProgramCategory.REHABILITATION
        assert program.exercises[0].name == "Squat"
        assert program.created_at.year == 2026


class TestRequestModels:
    def test_unknown_fields_rejected(self):
        with pytest.raises(PydanticValidationError):
            LoginRequest(email="a@b.c", password="pw", remember=True)

    def test_program_request_requires_category_and_difficulty(self):
        with pytest.raises(PydanticValidationError):
            CreateProgramRequest(name="Knee")

    def test_program_request_json_dump(self):
        request = CreateProgramRequest(
            name="Knee",
            category=ProgramCategory.THERAPY,
            difficulty=ProgramDifficulty.ADVANCED,
        )
        assert request.model_dump(mode="json", exclude_none=True) == {
            "name": "Knee",
            "category": "therapy",
            "difficulty": "advanced",
            "is_template": False,
            "is_public": False,
        }
