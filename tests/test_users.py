async def test_user_profile_is_public(client, make_user, make_post):
    ada = await make_user("Ada", bio="Countess", avatar_url="https://images.inkwell.dev/ada.png")
    await make_post(ada, title="One")
    await make_post(ada, title="Two")

    response = await client.get(f"/users/{ada}")

    assert response.status_code == 200
    profile = response.json()
    assert profile["id"] == ada
    assert profile["name"] == "Ada"
    assert profile["bio"] == "Countess"
    assert profile["avatar"] == "https://images.inkwell.dev/ada.png"
    assert profile["postsCount"] == 2
    assert "email" not in profile
    assert "hashedPassword" not in profile


async def test_unknown_user_is_not_found(client):
    assert (await client.get("/users/9999")).status_code == 404
    assert (await client.get("/users/9999/posts")).status_code == 404


async def test_user_posts_only_their_own(client, make_user, make_post):
    ada = await make_user("Ada")
    bob = await make_user("Bob")
    first = await make_post(ada, title="First")
    await make_post(bob, title="Bob's")
    second = await make_post(ada, title="Second")

    response = await client.get(f"/users/{ada}/posts")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [second["id"], first["id"]]


async def test_my_bookmarks_most_recent_first(client, make_user, make_post, auth_headers):
    ada = await make_user("Ada")
    bob = await make_user("Bob")
    early = await make_post(ada, title="Early")
    late = await make_post(ada, title="Late")
    untouched = await make_post(ada, title="Untouched")

    await client.post(f"/posts/{late['id']}/bookmark", headers=auth_headers(bob))
    await client.post(f"/posts/{early['id']}/bookmark", headers=auth_headers(bob))

    response = await client.get("/users/me/bookmarks", headers=auth_headers(bob))

    assert response.status_code == 200
    ids = [p["id"] for p in response.json()]
    assert ids == [early["id"], late["id"]]
    assert untouched["id"] not in ids


async def test_my_bookmarks_requires_session(client):
    assert (await client.get("/users/me/bookmarks")).status_code == 401
