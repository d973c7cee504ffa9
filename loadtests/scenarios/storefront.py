"""Storefront load test scenarios.

A shopper journey that touches every customer-facing route: sign up, log in,
manage addresses, browse and search the catalogue, fill and trim a cart,
check out, then wishlist and review what was bought.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    CATEGORIES,
    address_data,
    cart_item_data,
    order_data,
    review_data,
    signup_data,
)
from loadtests.helpers.response import bearer, extract_error_detail
from loadtests.helpers.state import ShopperState

PASSWORD = "Load-Test-Pass1"


class ShopperJourney(SequentialTaskSet):
    """Sign Up -> Log In -> Address -> Browse -> Cart -> Order -> Wishlist -> Review.

    Interrupts early when the catalogue is empty; run CatalogueAdminUser
    alongside (or first) to stock it.
    """

    def on_start(self):
        self.state = ShopperState()

    @property
    def auth(self):
        return bearer(self.state.token)

    @task
    def sign_up(self):
        payload = signup_data(PASSWORD)
        with self.client.post(
            "/auth/user/signup",
            json=payload,
            catch_response=True,
            name="POST /auth/user/signup",
        ) as resp:
            if resp.status_code == 201:
                self.state.email = payload["email"]
                self.state.account_id = resp.json()["account_id"]
            else:
                resp.failure(f"Sign up failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def log_in(self):
        with self.client.post(
            "/auth/user/login",
            json={"email": self.state.email, "password": PASSWORD},
            catch_response=True,
            name="POST /auth/user/login",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_home_address(self):
        with self.client.post(
            "/address/add",
            json=address_data(),
            headers=self.auth,
            catch_response=True,
            name="POST /address/add",
        ) as resp:
            if resp.status_code == 201:
                self.state.address_count += 1
            else:
                resp.failure(f"Add address failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def edit_home_address(self):
        if not self.state.address_count:
            return
        with self.client.put(
            "/address/home",
            json=address_data(),
            headers=self.auth,
            catch_response=True,
            name="PUT /address/home",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Edit address failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def browse(self):
        with self.client.get("/product", catch_response=True, name="GET /product") as resp:
            if resp.status_code != 200:
                resp.failure(f"List products failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
            elif not resp.json():
                resp.success()
                self.interrupt()
            else:
                products = resp.json()
                self.state.browsed = random.sample(products, k=min(3, len(products)))

    @task
    def search(self):
        with self.client.get(
            "/product/search",
            params={"category": random.choice(CATEGORIES)},
            catch_response=True,
            name="GET /product/search",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Search failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def view_product(self):
        product = self.state.browsed[0]
        with self.client.get(
            f"/product/{product['product_id']}",
            catch_response=True,
            name="GET /product/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"View product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def fill_cart(self):
        for product in self.state.browsed:
            with self.client.post(
                "/cart",
                json=cart_item_data(product),
                headers=self.auth,
                catch_response=True,
                name="POST /cart",
            ) as resp:
                if resp.status_code == 200:
                    self.state.cart = resp.json()
                else:
                    resp.failure(f"Add to cart failed: {resp.status_code} - {extract_error_detail(resp)}")
                    self.interrupt()

    @task
    def trim_cart(self):
        if len(self.state.browsed) < 2:
            return
        product_id = self.state.browsed[-1]["product_id"]
        with self.client.delete(
            f"/cart/{product_id}",
            headers=self.auth,
            catch_response=True,
            name="DELETE /cart/{product_id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart = resp.json()
            else:
                resp.failure(f"Remove from cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def place_order(self):
        with self.client.post(
            "/order",
            json=order_data(self.state.cart),
            headers=self.auth,
            catch_response=True,
            name="POST /order",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order_id"])
            else:
                resp.failure(f"Place order failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def clear_cart(self):
        with self.client.delete(
            "/cart/clear",
            headers=self.auth,
            catch_response=True,
            name="DELETE /cart/clear",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Clear cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def list_orders(self):
        with self.client.get("/order", headers=self.auth, catch_response=True, name="GET /order") as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def wish(self):
        product_id = self.state.browsed[0]["product_id"]
        with self.client.post(
            "/wishlist",
            json={"product_id": product_id},
            headers=self.auth,
            catch_response=True,
            name="POST /wishlist",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Wishlist failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def review(self):
        product_id = self.state.browsed[0]["product_id"]
        with self.client.post(
            "/review",
            json=review_data(product_id),
            headers=self.auth,
            catch_response=True,
            name="POST /review",
        ) as resp:
            if resp.status_code == 201:
                self.state.review_ids.append(resp.json()["review_id"])
            else:
                resp.failure(f"Review failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def read_reviews(self):
        product_id = self.state.browsed[0]["product_id"]
        with self.client.get(
            f"/review/product/{product_id}",
            catch_response=True,
            name="GET /review/product/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Read reviews failed: {resp.status_code} - {extract_error_detail(resp)}")
        self.interrupt()


class ShopperUser(HttpUser):
    """Customer traffic: one full storefront journey per iteration."""

    tasks = [ShopperJourney]
    wait_time = between(1, 3)
    weight = 5
