async def test_register_returns_public_fields_only(client):
    response = await client.post(
        "/auth/register",
        json={"name": "Ada Lovelace", "email": "ada@inkwell.dev", "password": "engine42"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Ada Lovelace"
    assert body["email"] == "ada@inkwell.dev"
    assert isinstance(body["id"], int)
    assert "password" not in body
    assert "hashedPassword" not in body
    assert "hashed_password" not in body


async def test_register_stores_a_bcrypt_hash(client, db):
    from sqlalchemy import select

    from inkwell.auth.service import AuthService
    from inkwell.users.models import User

    await client.post(
        "/auth/register",
        json={"name": "Grace", "email": "grace@inkwell.dev", "password": "cobol1959"},
    )

    user = (await db.execute(select(User).where(User.email == "grace@inkwell.dev"))).scalar_one()
    assert user.hashed_password != "cobol1959"
    assert AuthService().verify_password("cobol1959", user.hashed_password)


async def test_register_duplicate_email_is_rejected(client):
    payload = {"name": "Ada", "email": "ada@inkwell.dev", "password": "engine42"}
    first = await client.post("/auth/register", json=payload)
    assert first.status_code == 200

    second = await client.post("/auth/register", json={**payload, "name": "Other Ada"})
    assert second.status_code == 400


async def test_register_validates_input(client):
    bad_email = await client.post(
        "/auth/register", json={"name": "Ada", "email": "not-an-email", "password": "engine42"}
    )
    short_password = await client.post(
        "/auth/register", json={"name": "Ada", "email": "ada@inkwell.dev", "password": "123"}
    )
    blank_name = await client.post(
        "/auth/register", json={"name": "   ", "email": "ada@inkwell.dev", "password": "engine42"}
    )

    assert bad_email.status_code == 422
    assert short_password.status_code == 422
    assert blank_name.status_code == 422


async def test_missing_or_invalid_session_is_unauthorized(client):
    missing = await client.post("/posts", json={"title": "t", "content": "c"})
    invalid = await client.post(
        "/posts",
        json={"title": "t", "content": "c"},
        headers={"Authorization": "Bearer garbage"},
    )

    assert missing.status_code == 401
    assert invalid.status_code == 401


async def test_session_cookie_is_accepted(client, make_user):
    from inkwell.auth.utils import create_session_token
    from inkwell.config import settings

    user_id = await make_user("Cookie Monster")
    client.cookies.set(settings.ACCESS_TOKEN_COOKIE_NAME, create_session_token(user_id))

    response = await client.post("/posts", json={"title": "Via cookie", "content": "yum"})

    assert response.status_code == 200
    assert response.json()["authorId"] == user_id
