import os
import random

from locust import HttpUser, task, between

# Session token minted with scripts/create_demo_user.py
SESSION_TOKEN = os.environ.get("INKWELL_LOAD_TOKEN", "")


class ReaderLoadTest(HttpUser):
    wait_time = between(1, 2)

    def on_start(self):
        response = self.client.get("/posts", headers={"accept": "application/json"})
        self.post_ids = [post["id"] for post in response.json()] if response.ok else []

    @task(3)
    def list_posts(self):
        self.client.get("/posts", headers={"accept": "application/json"})

    @task(2)
    def read_post(self):
        if not self.post_ids:
            return
        post_id = random.choice(self.post_ids)
        self.client.get(f"/posts/{post_id}", name="/posts/[id]")
        self.client.get(f"/posts/{post_id}/comments", name="/posts/[id]/comments")

    @task(1)
    def toggle_like(self):
        if not self.post_ids or not SESSION_TOKEN:
            return
        post_id = random.choice(self.post_ids)
        self.client.post(
            f"/posts/{post_id}/like",
            name="/posts/[id]/like",
            headers={"Authorization": f"Bearer {SESSION_TOKEN}"},
        )
