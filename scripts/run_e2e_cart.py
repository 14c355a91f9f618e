#!/usr/bin/env python3
"""Simple e2e script: adds a product to a fresh cart and prints the responses."""
import json
import os
import urllib.error
import urllib.request
import uuid

CART_URL = os.getenv("CART_SERVICE_URL", "http://localhost:3002")
PRODUCT_ID = os.getenv("E2E_PRODUCT_ID", "1")


def call(method, path, payload=None):
    data = json.dumps(payload).encode("utf-8") if payload is not None else None
    req = urllib.request.Request(
        CART_URL + path, data=data, method=method, headers={"Content-Type": "application/json"}
    )
    try:
        with urllib.request.urlopen(req, timeout=15) as resp:
            print(method, path, "->", resp.status)
            print(resp.read().decode("utf-8"))
    except urllib.error.HTTPError as e:
        print(method, path, "->", e.code)
        print(e.read().decode("utf-8"))
    except urllib.error.URLError as e:
        print("Request failed:", e.reason)


if __name__ == "__main__":
    user = f"e2e-{uuid.uuid4()}"
    call("POST", f"/api/cart/{user}/items", {"productId": PRODUCT_ID, "quantity": 2})
    call("PUT", f"/api/cart/{user}/items/{PRODUCT_ID}", {"quantity": 3})
    call("GET", f"/api/cart/{user}/summary")
    call("DELETE", f"/api/cart/{user}")
