from sqlalchemy import func, select

from inkwell.comments.models import Comment
from inkwell.posts.models import Post, PostBookmark, PostLike


async def test_create_post_derives_slug_and_reading_time(client, make_user, auth_headers, words):
    user_id = await make_user("Ada")

    response = await client.post(
        "/posts",
        json={"title": "My First Post", "content": words(250), "tags": ["intro", "intro", " meta "]},
        headers=auth_headers(user_id),
    )

    assert response.status_code == 200
    post = response.json()
    assert post["slug"] == "my-first-post"
    assert post["readingTime"] == 2
    assert post["tags"] == ["intro", "meta"]
    assert post["authorId"] == user_id
    assert post["author"] == {"id": user_id, "name": "Ada", "avatar": None}
    assert post["likesCount"] == 0
    assert post["commentsCount"] == 0
    assert post["coverImage"] is None


async def test_create_post_with_expanding_title_keeps_slug_in_column(client, make_user, auth_headers):
    user_id = await make_user("Ada")
    title = "㍱" * 200

    created = await client.post("/posts", json={"title": title, "content": "body"}, headers=auth_headers(user_id))
    updated = await client.put(
        f"/posts/{created.json()['id']}",
        json={"title": "㍲" * 200},
        headers=auth_headers(user_id),
    )

    assert created.status_code == 200
    assert len(created.json()["slug"]) == Post.__table__.c.slug.type.length
    assert updated.status_code == 200
    assert len(updated.json()["slug"]) <= Post.__table__.c.slug.type.length


async def test_create_post_ignores_author_in_body(client, make_user, auth_headers):
    ada = await make_user("Ada")
    bob = await make_user("Bob")

    response = await client.post(
        "/posts",
        json={"title": "Mine", "content": "body", "authorId": bob},
        headers=auth_headers(ada),
    )

    assert response.status_code == 200
    assert response.json()["authorId"] == ada


async def test_create_post_rejects_bad_cover_image(client, make_user, auth_headers):
    user_id = await make_user("Ada")

    response = await client.post(
        "/posts",
        json={"title": "Cover", "content": "body", "coverImage": "ftp://example.com/x.png"},
        headers=auth_headers(user_id),
    )

    assert response.status_code == 400


async def test_create_post_validates_title_and_content(client, make_user, auth_headers):
    user_id = await make_user("Ada")
    headers = auth_headers(user_id)

    blank_title = await client.post("/posts", json={"title": "  ", "content": "x"}, headers=headers)
    long_title = await client.post("/posts", json={"title": "t" * 201, "content": "x"}, headers=headers)
    no_content = await client.post("/posts", json={"title": "ok"}, headers=headers)

    assert blank_title.status_code == 422
    assert long_title.status_code == 422
    assert no_content.status_code == 422


async def test_list_posts_newest_first_with_counts(client, make_user, make_post, auth_headers):
    ada = await make_user("Ada")
    bob = await make_user("Bob")
    older = await make_post(ada, title="Older")
    newer = await make_post(bob, title="Newer")

    await client.post(f"/posts/{older['id']}/like", headers=auth_headers(bob))
    await client.post(f"/posts/{older['id']}/comments", json={"content": "nice"}, headers=auth_headers(bob))

    response = await client.get("/posts")

    assert response.status_code == 200
    posts = response.json()
    assert [p["id"] for p in posts] == [newer["id"], older["id"]]
    assert posts[1]["likesCount"] == 1
    assert posts[1]["commentsCount"] == 1
    assert posts[0]["likesCount"] == 0
    # Only public author fields
    assert set(posts[0]["author"]) == {"id", "name", "avatar"}


async def test_list_posts_empty(client):
    response = await client.get("/posts")

    assert response.status_code == 200
    assert response.json() == []


async def test_get_post_detail(client, make_user, make_post, auth_headers):
    ada = await make_user("Ada", bio="Analyst")
    bob = await make_user("Bob")
    post = await make_post(ada)
    await client.post(f"/posts/{post['id']}/comments", json={"content": "first"}, headers=auth_headers(bob))
    await client.post(f"/posts/{post['id']}/comments", json={"content": "second"}, headers=auth_headers(ada))
    await client.post(f"/posts/{post['id']}/bookmark", headers=auth_headers(bob))

    response = await client.get(f"/posts/{post['id']}")

    assert response.status_code == 200
    detail = response.json()
    assert detail["author"]["bio"] == "Analyst"
    assert [c["content"] for c in detail["comments"]] == ["second", "first"]
    assert detail["commentsCount"] == 2
    assert detail["bookmarksCount"] == 1
    assert detail["likesCount"] == 0
    assert detail["isLiked"] is None
    assert detail["isBookmarked"] is None


async def test_get_post_detail_with_session_reports_own_state(client, make_user, make_post, auth_headers):
    ada = await make_user("Ada")
    bob = await make_user("Bob")
    post = await make_post(ada)
    await client.post(f"/posts/{post['id']}/like", headers=auth_headers(bob))

    as_bob = (await client.get(f"/posts/{post['id']}", headers=auth_headers(bob))).json()
    as_ada = (await client.get(f"/posts/{post['id']}", headers=auth_headers(ada))).json()

    assert as_bob["isLiked"] is True
    assert as_bob["isBookmarked"] is False
    assert as_ada["isLiked"] is False


async def test_get_missing_post_is_not_found(client):
    response = await client.get("/posts/9999")

    assert response.status_code == 404


async def test_update_post_by_author(client, make_user, make_post, auth_headers, words):
    ada = await make_user("Ada")
    post = await make_post(ada, title="Draft Title", content=words(10))

    response = await client.put(
        f"/posts/{post['id']}",
        json={"title": "Final Title", "content": words(450), "tags": ["done"]},
        headers=auth_headers(ada),
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Final Title"
    assert updated["slug"] == "final-title"
    assert updated["readingTime"] == 3
    assert updated["tags"] == ["done"]


async def test_update_keeps_slug_and_reading_time_when_unchanged(client, make_user, make_post, auth_headers, words):
    ada = await make_user("Ada")
    body = words(250)
    post = await make_post(ada, title="Stable Title", content=body)

    response = await client.put(
        f"/posts/{post['id']}",
        json={"title": "Stable Title", "content": body, "tags": ["retagged"]},
        headers=auth_headers(ada),
    )

    updated = response.json()
    assert updated["slug"] == post["slug"] == "stable-title"
    assert updated["readingTime"] == post["readingTime"] == 2
    assert updated["tags"] == ["retagged"]


async def test_update_content_only_keeps_slug(client, make_user, make_post, auth_headers, words):
    ada = await make_user("Ada")
    post = await make_post(ada, title="Keep Me", content=words(5))

    response = await client.put(
        f"/posts/{post['id']}",
        json={"content": words(401)},
        headers=auth_headers(ada),
    )

    updated = response.json()
    assert updated["title"] == "Keep Me"
    assert updated["slug"] == "keep-me"
    assert updated["readingTime"] == 3


async def test_update_cover_image_can_be_set_and_cleared(client, make_user, make_post, auth_headers):
    ada = await make_user("Ada")
    post = await make_post(ada)
    url = "https://images.inkwell.dev/cover.jpg"

    set_response = await client.put(f"/posts/{post['id']}", json={"coverImage": url}, headers=auth_headers(ada))
    untouched = await client.put(f"/posts/{post['id']}", json={"title": "Renamed"}, headers=auth_headers(ada))
    cleared = await client.put(f"/posts/{post['id']}", json={"coverImage": None}, headers=auth_headers(ada))
    invalid = await client.put(f"/posts/{post['id']}", json={"coverImage": "nope"}, headers=auth_headers(ada))

    assert set_response.json()["coverImage"] == url
    assert untouched.json()["coverImage"] == url
    assert cleared.json()["coverImage"] is None
    assert invalid.status_code == 400


async def test_update_by_non_author_is_forbidden(client, make_user, make_post, auth_headers):
    ada = await make_user("Ada")
    bob = await make_user("Bob")
    post = await make_post(ada, title="Ada's")

    response = await client.put(f"/posts/{post['id']}", json={"title": "Bob's now"}, headers=auth_headers(bob))

    assert response.status_code == 403
    unchanged = (await client.get(f"/posts/{post['id']}")).json()
    assert unchanged["title"] == "Ada's"


async def test_update_without_session_is_unauthorized_before_authorship(client, make_user, make_post):
    ada = await make_user("Ada")
    post = await make_post(ada)

    existing = await client.put(f"/posts/{post['id']}", json={"title": "x"})
    missing = await client.put("/posts/9999", json={"title": "x"})

    assert existing.status_code == 401
    assert missing.status_code == 401


async def test_update_missing_post_is_not_found(client, make_user, auth_headers):
    ada = await make_user("Ada")

    response = await client.put("/posts/9999", json={"title": "x"}, headers=auth_headers(ada))

    assert response.status_code == 404


async def test_delete_post_removes_dependents(client, db, make_user, make_post, auth_headers):
    ada = await make_user("Ada")
    bob = await make_user("Bob")
    post = await make_post(ada)
    keep = await make_post(ada, title="Keep")
    for target in (post, keep):
        await client.post(f"/posts/{target['id']}/like", headers=auth_headers(bob))
        await client.post(f"/posts/{target['id']}/bookmark", headers=auth_headers(bob))
        await client.post(f"/posts/{target['id']}/comments", json={"content": "hi"}, headers=auth_headers(bob))

    response = await client.delete(f"/posts/{post['id']}", headers=auth_headers(ada))

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert (await client.get(f"/posts/{post['id']}")).status_code == 404

    for model in (Comment, PostLike, PostBookmark):
        orphans = await db.execute(select(func.count(model.id)).where(model.post_id == post["id"]))
        assert orphans.scalar() == 0
        kept = await db.execute(select(func.count(model.id)).where(model.post_id == keep["id"]))
        assert kept.scalar() == 1


async def test_delete_guards(client, db, make_user, make_post, auth_headers):
    ada = await make_user("Ada")
    bob = await make_user("Bob")
    post = await make_post(ada)

    anonymous = await client.delete(f"/posts/{post['id']}")
    not_author = await client.delete(f"/posts/{post['id']}", headers=auth_headers(bob))
    missing = await client.delete("/posts/9999", headers=auth_headers(ada))

    assert anonymous.status_code == 401
    assert not_author.status_code == 403
    assert missing.status_code == 404
    assert (await db.get(Post, post["id"])) is not None
