"""Catalogue administration load test scenarios.

Admin accounts cannot be created over HTTP. Create one first with
`python src/manage.py create-admin ...` and pass its credentials through
EMPORIUM_ADMIN_EMAIL and EMPORIUM_ADMIN_PASSWORD.
"""

import os
import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import product_data
from loadtests.helpers.response import bearer, extract_error_detail
from loadtests.helpers.state import AdminState


class CatalogueJourney(SequentialTaskSet):
    """Log In -> Add Products -> Reprice One -> Fulfil Recent Orders."""

    def on_start(self):
        self.state = AdminState()

    @task
    def log_in(self):
        credentials = {
            "email": os.environ.get("EMPORIUM_ADMIN_EMAIL", "admin@emporium.test"),
            "password": os.environ.get("EMPORIUM_ADMIN_PASSWORD", "admin-password"),
        }
        with self.client.post(
            "/auth/user/login",
            json=credentials,
            catch_response=True,
            name="POST /auth/user/login (admin)",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Admin login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def stock_catalogue(self):
        for _ in range(random.randint(1, 3)):
            with self.client.post(
                "/product/add",
                json=product_data(),
                headers=bearer(self.state.token),
                catch_response=True,
                name="POST /product/add",
            ) as resp:
                if resp.status_code == 201:
                    self.state.product_ids.append(resp.json()["product_id"])
                else:
                    resp.failure(f"Add product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def reprice(self):
        if not self.state.product_ids:
            return
        product_id = random.choice(self.state.product_ids)
        with self.client.put(
            f"/product/{product_id}",
            json={"price": round(random.uniform(5, 500), 2), "discount": random.choice([0.0, 5.0, 10.0])},
            headers=bearer(self.state.token),
            catch_response=True,
            name="PUT /product/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update product failed: {resp.status_code} - {extract_error_detail(resp)}")
        self.interrupt()


class CatalogueAdminUser(HttpUser):
    """Low-volume admin traffic that keeps the catalogue stocked."""

    tasks = [CatalogueJourney]
    wait_time = between(2, 5)
    weight = 1
