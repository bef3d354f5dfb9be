"""
Tests for the typed resource groups: auth, users, clients and programs.

Each test checks the request that reaches the wire and how the response
envelope is parsed.
"""

import pytest

from carespace_sdk.exceptions import NotFoundError
from carespace_sdk.models import (
    CreateClientRequest,
    CreateExerciseRequest,
    CreateProgramRequest,
    CreateUserRequest,
    LoginRequest,
    ProgramCategory,
    ProgramDifficulty,
    UpdateUserRequest,
    UserRole,
)
from carespace_sdk.resources import (
    AuthResource,
    BaseResource,
    ClientsResource,
    ProgramsResource,
    UsersResource,
)

USER = {"id": "u1", "email": "ada@example.com", "first_name": "Ada", "last_name": "L"}
CLIENT = {"id": "c1", "name": "Jane Doe", "email": "jane@example.com"}
PROGRAM = {"id": "p1", "name": "Knee rehab", "category": "rehabilitation"}


def page_of(*items):
    return {"success": True, "data": list(items), "page": 1, "limit": 20, "total": len(items)}


class TestBaseResource:
    """Test shared resource helpers."""

    def test_requires_transport(self):
        with pytest.raises(ValueError, match="http transport is required"):
            BaseResource(None)

    def test_path_encodes_ids(self):
        assert BaseResource._path("/users/{user_id}", user_id="a/b c") == "/users/a%2Fb%20c"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_path_rejects_blank_ids(self, value):
        with pytest.raises(ValueError, match="Program id is required"):
            BaseResource._path("/programs/{program_id}", program_id=value)

    @pytest.mark.parametrize("page, limit", [(0, 20), (1, 0)])
    def test_page_params_validated(self, page, limit):
        with pytest.raises(ValueError):
            BaseResource._page_params(page, limit)


class TestAuthResource:
    @pytest.fixture
    def auth(self, http):
        return AuthResource(http)

    async def test_login_with_credentials(self, auth, recorder):
        recorder.json({"success": True, "data": {"access_token": "tok", "user": USER}})

        response = await auth.login("ada@example.com", "secret")

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/auth/login"
        assert recorder.last_json() == {"email": "ada@example.com", "password": "secret"}
        assert response.data.access_token == "tok"
        assert response.data.user.email == "ada@example.com"

    async def test_login_with_request_model(self, auth, recorder):
        recorder.json({"success": True, "data": {"access_token": "tok"}})

        await auth.login(LoginRequest(email="a@b.c", password="pw"))

        assert recorder.last_json() == {"email": "a@b.c", "password": "pw"}

    async def test_login_requires_password(self, auth, recorder):
        with pytest.raises(ValueError, match="email and password are required"):
            await auth.login("a@b.c")
        assert recorder.requests == []

    async def test_refresh_token(self, auth, recorder):
        recorder.json({"success": True, "data": {"access_token": "new"}})

        response = await auth.refresh_token("refresh-1")

        assert recorder.last.url.path == "/auth/refresh"
        assert recorder.last_json() == {"refresh_token": "refresh-1"}
        assert response.data.access_token == "new"

    async def test_refresh_token_blank(self, auth):
        with pytest.raises(ValueError):
            await auth.refresh_token("  ")

    async def test_logout_without_token_sends_no_body(self, auth, recorder):
        response = await auth.logout()

        assert recorder.last.url.path == "/auth/logout"
        assert recorder.last.content == b""
        assert response.success

    @pytest.mark.parametrize(
        "method, args, path, body",
        [
            ("forgot_password", ("a@b.c",), "/auth/forgot-password", {"email": "a@b.c"}),
            (
                "reset_password",
                ("tok", "new-pw"),
                "/auth/reset-password",
                {"token": "tok", "new_password": "new-pw"},
            ),
            (
                "change_password",
                ("old", "new"),
                "/auth/change-password",
                {"current_password": "old", "new_password": "new"},
            ),
            ("verify_email", ("tok",), "/auth/verify-email", {"token": "tok"}),
            ("resend_verification", ("a@b.c",), "/auth/resend-verification", {"email": "a@b.c"}),
        ],
    )
    async def test_account_endpoints(self, auth, recorder, method, args, path, body):
        await getattr(auth, method)(*args)

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == path
        assert recorder.last_json() == body


class TestUsersResource:
    @pytest.fixture
    def users(self, http):
        return UsersResource(http)

    async def test_list_users(self, users, recorder):
        recorder.json(page_of(USER))

        result = await users.list_users(page=2, limit=5, search="ada", role=UserRole.ADMIN)

        params = recorder.last.url.params
        assert recorder.last.url.path == "/users"
        assert (params["page"], params["limit"], params["search"], params["role"]) == (
            "2",
            "5",
            "ada",
            "admin",
        )
        assert "is_active" not in params
        assert result.data[0].full_name == "Ada L"

    async def test_get_user(self, users, recorder):
        recorder.json({"success": True, "data": USER})

        result = await users.get_user("u1")

        assert recorder.last.url.path == "/users/u1"
        assert result.data.email == "ada@example.com"

    async def test_get_user_encodes_id(self, users, recorder):
        recorder.json({"success": True, "data": USER})
        await users.get_user("user one")
        assert recorder.last.url.raw_path == b"/users/user%20one"

    async def test_blank_id_rejected_before_request(self, users, recorder):
        with pytest.raises(ValueError, match="User id is required"):
            await users.get_user("")
        assert recorder.requests == []

    async def test_get_profile(self, users, recorder):
        recorder.json({"success": True, "data": USER})
        await users.get_profile()
        assert recorder.last.url.path == "/users/profile"

    async def test_create_user(self, users, recorder):
        recorder.json({"success": True, "data": USER}, status_code=201)

        request = CreateUserRequest(email="ada@example.com", first_name="Ada", last_name="L")
        result = await users.create_user(request)

        assert recorder.last.method == "POST"
        assert recorder.last_json()["role"] == "patient"
        assert result.data.id == "u1"

    async def test_create_user_requires_body(self, users):
        with pytest.raises(ValueError, match="request is required"):
            await users.create_user(None)

    async def test_update_user(self, users, recorder):
        recorder.json({"success": True, "data": USER})

        await users.update_user("u1", UpdateUserRequest(first_name="Ada"))

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/users/u1"
        assert recorder.last_json() == {"first_name": "Ada"}

    async def test_update_profile(self, users, recorder):
        recorder.json({"success": True, "data": USER})
        await users.update_profile(UpdateUserRequest(last_name="Lovelace"))
        assert (recorder.last.method, recorder.last.url.path) == ("PUT", "/users/profile")

    async def test_delete_user(self, users, recorder):
        recorder.status(204)

        assert await users.delete_user("u1") is None
        assert (recorder.last.method, recorder.last.url.path) == ("DELETE", "/users/u1")

    async def test_delete_missing_user(self, users, recorder):
        recorder.json({"message": "User not found"}, status_code=404)

        with pytest.raises(NotFoundError, match="User not found"):
            await users.delete_user("ghost")

    @pytest.mark.parametrize("method, action", [("activate_user", "activate"), ("deactivate_user", "deactivate")])
    async def test_activation(self, users, recorder, method, action):
        await getattr(users, method)("u1")
        assert (recorder.last.method, recorder.last.url.path) == ("POST", f"/users/u1/{action}")

    async def test_settings(self, users, recorder):
        recorder.json({"success": True, "data": {"language": "en", "timezone": "UTC"}})

        result = await users.update_settings("u1", {"language": "en"})

        assert (recorder.last.method, recorder.last.url.path) == ("PUT", "/users/u1/settings")
        assert result.data.language == "en"

        await users.get_settings("u1")
        assert (recorder.last.method, recorder.last.url.path) == ("GET", "/users/u1/settings")

    async def test_preferences(self, users, recorder):
        recorder.json({"success": True, "data": {"theme": "dark"}})

        result = await users.get_preferences("u1")
        assert recorder.last.url.path == "/users/u1/preferences"
        assert result.data == {"theme": "dark"}

        await users.update_preferences("u1", {"theme": "light"})
        assert recorder.last.method == "PUT"
        assert recorder.last_json() == {"theme": "light"}


class TestClientsResource:
    @pytest.fixture
    def clients(self, http):
        return ClientsResource(http)

    async def test_list_clients(self, clients, recorder):
        recorder.json(page_of(CLIENT))

        result = await clients.list_clients(search="jane", is_active=True)

        params = recorder.last.url.params
        assert params["search"] == "jane"
        assert params["is_active"] == "true"
        assert result.data[0].name == "Jane Doe"

    async def test_create_client(self, clients, recorder):
        recorder.json({"success": True, "data": CLIENT})

        await clients.create_client(CreateClientRequest(name="Jane Doe", email="jane@example.com"))

        assert recorder.last.url.path == "/clients"
        assert recorder.last_json() == {"name": "Jane Doe", "email": "jane@example.com"}

    async def test_get_and_delete(self, clients, recorder):
        recorder.json({"success": True, "data": CLIENT})
        result = await clients.get_client("c1")
        assert result.data.id == "c1"

        recorder.status(204)
        await clients.delete_client("c1")
        assert (recorder.last.method, recorder.last.url.path) == ("DELETE", "/clients/c1")

    async def test_stats(self, clients, recorder):
        recorder.json({"success": True, "data": {"total_sessions": 12, "completion_rate": 0.75}})

        result = await clients.get_client_stats("c1")

        assert recorder.last.url.path == "/clients/c1/stats"
        assert result.data.total_sessions == 12
        assert result.data.completion_rate == 0.75

    async def test_program_assignment(self, clients, recorder):
        await clients.assign_program("c1", "p1")
        assert (recorder.last.method, recorder.last.url.path) == ("POST", "/clients/c1/programs")
        assert recorder.last_json() == {"program_id": "p1"}

        await clients.unassign_program("c1", "p1")
        assert (recorder.last.method, recorder.last.url.path) == ("DELETE", "/clients/c1/programs/p1")

    async def test_assign_requires_program_id(self, clients, recorder):
        with pytest.raises(ValueError, match="Program id is required"):
            await clients.assign_program("c1", " ")
        assert recorder.requests == []

    async def test_list_client_programs(self, clients, recorder):
        recorder.json(page_of(PROGRAM))

        result = await clients.list_client_programs("c1", page=3)

        assert recorder.last.url.path == "/clients/c1/programs"
        assert recorder.last.url.params["page"] == "3"
        assert result.data[0].id == "p1"

    async def test_invite_code(self, clients, recorder):
        recorder.json({"success": True, "data": CLIENT})
        await clients.get_client_by_invite_code("INV-42")
        assert recorder.last.url.path == "/clients/invite-code/INV-42"

    async def test_pass_through_lists(self, clients, recorder):
        recorder.json([{"id": "r1"}])

        result = await clients.list_client_reports("c1", type="rom")

        assert recorder.last.url.path == "/clients/c1/reports"
        assert recorder.last.url.params["type"] == "rom"
        assert result == [{"id": "r1"}]

        await clients.list_client_evaluations("c1")
        assert recorder.last.url.path == "/clients/c1/evaluations"


class TestProgramsResource:
    @pytest.fixture
    def programs(self, http):
        return ProgramsResource(http)

    async def test_list_programs_with_filters(self, programs, recorder):
        recorder.json(page_of(PROGRAM))

        await programs.list_programs(
            category=ProgramCategory.FITNESS,
            difficulty=ProgramDifficulty.BEGINNER,
            is_template=False,
        )

        params = recorder.last.url.params
        assert params["category"] == "fitness"
        assert params["difficulty"] == "beginner"
        assert params["is_template"] == "false"
        assert "creator_id" not in params

    async def test_create_program(self, programs, recorder):
        recorder.json({"success": True, "data": PROGRAM})

        result = await programs.create_program(
            CreateProgramRequest(
                name="Knee rehab",
                category=ProgramCategory.REHABILITATION,
                difficulty=ProgramDifficulty.BEGINNER,
                tags=["knee"],
            )
        )

        body = recorder.last_json()
        assert body["category"] == "rehabilitation"
        assert body["tags"] == ["knee"]
        assert "description" not in body
        assert result.data.category is ProgramCategory.REHABILITATION

    async def test_exercises(self, programs, recorder):
        recorder.json({"success": True, "data": {"id": "e1", "name": "Squat"}})

        result = await programs.add_exercise("p1", CreateExerciseRequest(name="Squat", sets=3))
        assert (recorder.last.method, recorder.last.url.path) == ("POST", "/programs/p1/exercises")
        assert result.data.name == "Squat"

        await programs.update_exercise("p1", "e1", CreateExerciseRequest(name="Deep squat"))
        assert (recorder.last.method, recorder.last.url.path) == ("PUT", "/programs/p1/exercises/e1")

        recorder.status(204)
        await programs.remove_exercise("p1", "e1")
        assert (recorder.last.method, recorder.last.url.path) == ("DELETE", "/programs/p1/exercises/e1")

    async def test_remove_exercise_requires_ids(self, programs):
        with pytest.raises(ValueError, match="Exercise id is required"):
            await programs.remove_exercise("p1", "")

    async def test_list_exercises(self, programs, recorder):
        recorder.json(page_of({"id": "e1", "name": "Squat"}))

        result = await programs.list_exercises("p1", limit=50)

        assert recorder.last.url.params["limit"] == "50"
        assert result.data[0].id == "e1"

    async def test_duplicate_program(self, programs, recorder):
        recorder.json({"success": True, "data": PROGRAM})

        await programs.duplicate_program("p1", name="Copy")
        assert recorder.last.url.path == "/programs/p1/duplicate"
        assert recorder.last_json() == {"name": "Copy"}

        await programs.duplicate_program("p1")
        assert recorder.last.content == b""

    async def test_templates(self, programs, recorder):
        recorder.json(page_of(PROGRAM))
        await programs.list_templates(category=ProgramCategory.WELLNESS)
        assert recorder.last.url.path == "/programs/templates"
        assert recorder.last.url.params["category"] == "wellness"

        recorder.json({"success": True, "data": PROGRAM})
        await programs.create_from_template("t1", name="Mine")
        assert recorder.last.url.path == "/programs/from-template/t1"
        assert recorder.last_json() == {"name": "Mine"}
