#!/usr/bin/env python3
"""
Create a demo author with a couple of posts and print a session token for it.

The token is signed with SECRET_KEY the same way the identity provider signs
sessions, so it can be used against a local API or by test_load/locustfile.py.
"""
import asyncio
import os
import sys
from datetime import timedelta

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import inkwell.models  # noqa: E402,F401  registers every ORM model
from sqlalchemy import select  # noqa: E402

from inkwell.auth.service import AuthService  # noqa: E402
from inkwell.auth.utils import create_session_token  # noqa: E402
from inkwell.config import settings  # noqa: E402
from inkwell.database import AsyncSessionLocal, engine  # noqa: E402
from inkwell.posts.models import Post  # noqa: E402
from inkwell.posts.utils import calculate_reading_time, generate_slug  # noqa: E402
from inkwell.users.models import User  # noqa: E402

DEMO_EMAIL = "demo@inkwell.dev"
DEMO_POSTS = [
    ("Hello, World!", "<p>First words on a fresh blog.</p>", ["meta"]),
    ("Writing Async Python", "<p>" + "await things " * 300 + "</p>", ["python", "asyncio"]),
]


async def create_demo_user() -> None:
    async with AsyncSessionLocal() as db:
        result = await db.execute(select(User).where(User.email == DEMO_EMAIL))
        user = result.scalar_one_or_none()

        if user:
            print(f"Demo user already exists with ID {user.id}")
        else:
            user = User(
                name="Demo Author",
                email=DEMO_EMAIL,
                hashed_password=AuthService().get_password_hash("demo1234"),
            )
            db.add(user)
            await db.flush()

            for title, content, tags in DEMO_POSTS:
                db.add(Post(
                    title=title,
                    slug=generate_slug(title),
                    content=content,
                    tags=tags,
                    reading_time=calculate_reading_time(content, settings.WORDS_PER_MINUTE),
                    author_id=user.id,
                ))
            await db.commit()
            print(f"Demo user created with ID {user.id} and {len(DEMO_POSTS)} posts")

        print(f"Session token: {create_session_token(user.id, timedelta(days=1))}")

    await engine.dispose()


if __name__ == "__main__":
    try:
        asyncio.run(create_demo_user())
    except Exception as e:
        print(f"Error creating demo user: {e}")
        sys.exit(1)
