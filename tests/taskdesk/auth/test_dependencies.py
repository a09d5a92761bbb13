from types import SimpleNamespace

import pytest
from fastapi import Depends, FastAPI, HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.testclient import TestClient

from taskdesk.auth import jwt_handler
from taskdesk.auth.dependencies import admin_only, require_roles, student_only
from taskdesk.auth.jwt_handler import TokenIdentity
from taskdesk.auth.roles import Role


def _fake_request():
    return SimpleNamespace(state=SimpleNamespace())


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def test_guard_rejects_missing_token_as_unauthenticated() -> None:
    with pytest.raises(HTTPException) as exception_info:
        admin_only(_fake_request(), None)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Not authorized, no token'
    assert exception_info.value.headers == {'WWW-Authenticate': 'Bearer'}


def test_guard_rejects_invalid_token_as_unauthenticated() -> None:
    with pytest.raises(HTTPException) as exception_info:
        admin_only(_fake_request(), _bearer('not-a-token'))

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Not authorized, token failed'


def test_guard_rejects_wrong_role_as_forbidden() -> None:
    token = jwt_handler.create_access_token(3, Role.STUDENT)

    with pytest.raises(HTTPException) as exception_info:
        admin_only(_fake_request(), _bearer(token))

    assert exception_info.value.status_code == 403


def test_guard_admits_allowed_role_and_attaches_identity() -> None:
    request = _fake_request()
    token = jwt_handler.create_access_token(3, Role.STUDENT)

    identity = student_only(request, _bearer(token))

    assert identity == TokenIdentity(principal_id=3, role=Role.STUDENT)
    assert request.state.principal == identity


def test_guard_accepts_any_role_in_its_set() -> None:
    guard = require_roles([Role.ADMIN, Role.STUDENT])

    for principal_id, role in [(1, Role.ADMIN), (2, Role.STUDENT)]:
        identity = guard(_fake_request(), _bearer(jwt_handler.create_access_token(principal_id, role)))
        assert identity.role == role


def test_guard_rejects_unknown_role_names_at_construction() -> None:
    with pytest.raises(ValueError):
        require_roles(['teacher'])


@pytest.fixture
def guarded_client() -> TestClient:
    app = FastAPI()

    @app.get('/admin-area')
    def admin_area(principal: TokenIdentity = Depends(admin_only)):
        return {'principal_id': principal.principal_id, 'role': principal.role}

    return TestClient(app)


def test_guarded_route_returns_401_without_authorization_header(guarded_client: TestClient) -> None:
    response = guarded_client.get('/admin-area')

    assert response.status_code == 401
    assert response.json() == {'detail': 'Not authorized, no token'}


def test_guarded_route_returns_401_for_non_bearer_scheme(guarded_client: TestClient) -> None:
    token = jwt_handler.create_access_token(1, Role.ADMIN)

    response = guarded_client.get('/admin-area', headers={'Authorization': f'Basic {token}'})

    assert response.status_code == 401


def test_guarded_route_returns_401_for_invalid_token(guarded_client: TestClient) -> None:
    response = guarded_client.get('/admin-area', headers={'Authorization': 'Bearer garbage'})

    assert response.status_code == 401


def test_guarded_route_returns_403_for_wrong_role(guarded_client: TestClient) -> None:
    token = jwt_handler.create_access_token(1, Role.STUDENT)

    response = guarded_client.get('/admin-area', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 403


def test_guarded_route_admits_matching_role(guarded_client: TestClient) -> None:
    token = jwt_handler.create_access_token(9, Role.ADMIN)

    response = guarded_client.get('/admin-area', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 200
    assert response.json() == {'principal_id': 9, 'role': 'admin'}
