from locust import HttpUser, task, between
import os
import json
import random


class SalesUser(HttpUser):
    """Locust user that logs in via JWT and records orders on one campaign.

    Many users posting to the same campaign at once exercises the order
    counter; every returned reference_id must be unique.
    """

    wait_time = between(0.1, 1.0)

    def on_start(self):
        self.headers = {"Content-Type": "application/json"}
        self.campaign_id = int(os.getenv("LOCUST_CAMPAIGN_ID", "1"))
        self.seen_reference_ids = set()

        login_payload = json.dumps({
            "username": os.getenv("LOCUST_USERNAME", "admin"),
            "password": os.getenv("LOCUST_PASSWORD", "password123"),
        })
        with self.client.post(
            "/api/v1/auth/login/",
            data=login_payload,
            headers=self.headers,
            catch_response=True,
        ) as resp:
            token = resp.json().get("access") if resp.status_code == 200 else None
            if token:
                self.headers["Authorization"] = f"Bearer {token}"
                resp.success()
            else:
                resp.failure(f"Login failed: {resp.status_code}")

    @task(5)
    def create_order(self):
        payload = json.dumps({
            "campaign_id": self.campaign_id,
            "products": [
                {"name": "Serum 30ml", "qty": random.randint(1, 5), "base_price": "29.90"},
            ],
        })
        with self.client.post(
            "/api/v1/orders/",
            data=payload,
            headers=self.headers,
            name="/api/v1/orders/ [create]",
            catch_response=True,
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Create failed: {resp.status_code}")
                return
            reference_id = resp.json().get("reference_id")
            if reference_id in self.seen_reference_ids:
                resp.failure(f"Duplicate reference_id {reference_id}")
            else:
                self.seen_reference_ids.add(reference_id)
                resp.success()

    @task(2)
    def list_orders(self):
        self.client.get(
            f"/api/v1/orders/?campaign={self.campaign_id}",
            headers=self.headers,
            name="/api/v1/orders/?campaign=[id]",
        )

    @task(1)
    def list_campaigns(self):
        self.client.get("/api/v1/campaigns/", headers=self.headers)


# Seed first with `python manage.py load_demo_data`, then e.g.
# `LOCUST_CAMPAIGN_ID=1 locust --headless -u 50 -r 10 -t 1m -f locustfile.py --host http://localhost:8000`
