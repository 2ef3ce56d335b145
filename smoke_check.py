#!/usr/bin/env python3
"""Smoke check against a running Club Manager instance."""

import os

import requests

BASE_URL = os.environ.get("CLUB_MANAGER_URL", "http://localhost:3000")
EMAIL = os.environ.get("CLUB_MANAGER_EMAIL")
PASSWORD = os.environ.get("CLUB_MANAGER_PASSWORD")


def check_health():
    """Check the health endpoint."""
    print("Checking health endpoint...")
    response = requests.get(f"{BASE_URL}/health")
    print(f"  Status: {response.status_code}")
    print(f"  Response: {response.json()}")
    assert response.status_code == 200
    backend = response.json().get("backend") or {}
    if backend:
        state = "up" if backend.get("is_healthy") else "DOWN"
        print(f"  Backend {backend.get('backend_url')} is {state}")
    print("  ✓ Health check passed\n")


def check_config():
    """Check the system configuration endpoint."""
    print("Checking system config...")
    response = requests.get(f"{BASE_URL}/api/config")
    print(f"  Status: {response.status_code}")
    assert response.status_code == 200
    print(f"  Default club: {response.json()['defaultClubId']}")
    print("  ✓ Config passed\n")


def check_auth_guard():
    """Protected routes must refuse anonymous callers."""
    print("Checking auth guard...")
    response = requests.get(f"{BASE_URL}/api/members")
    print(f"  Status: {response.status_code}")
    assert response.status_code == 401
    print(f"  Message: {response.json()['message']}")
    print("  ✓ Anonymous access refused\n")


def check_login():
    """Log in and list the club's members with the issued token."""
    print(f"Logging in as {EMAIL}...")
    response = requests.post(f"{BASE_URL}/api/auth/login", json={"email": EMAIL, "password": PASSWORD})
    print(f"  Status: {response.status_code}")
    if response.status_code != 200:
        print(f"  Response: {response.json()}")
        return None

    tokens = response.json()
    print(f"  Logged in as {tokens['user'].get('name')}")
    headers = {"Authorization": f"Bearer {tokens['accessToken']}"}

    response = requests.get(f"{BASE_URL}/api/members", headers=headers)
    print(f"  Members status: {response.status_code}")
    if response.ok:
        print(f"  Found {len(response.json())} member(s)")
    print("  ✓ Login passed\n")
    return tokens


def check_dashboard():
    """The dashboard login page must render."""
    print("Checking dashboard...")
    response = requests.get(f"{BASE_URL}/login")
    print(f"  Status: {response.status_code}")
    assert response.status_code == 200
    print("  ✓ Dashboard accessible at /login\n")


def main():
    """Run all checks."""
    print("=" * 60)
    print("CLUB MANAGER - SMOKE CHECK")
    print("=" * 60)
    print()

    try:
        check_health()
        check_config()
        check_auth_guard()
        check_dashboard()

        if EMAIL and PASSWORD:
            check_login()
        else:
            print("Set CLUB_MANAGER_EMAIL and CLUB_MANAGER_PASSWORD to check login\n")

        print("=" * 60)
        print("ALL CHECKS PASSED! ✓")
        print("=" * 60)
        print()

    except requests.exceptions.ConnectionError:
        print("\n❌ ERROR: Could not connect to the API")
        print("   Make sure the server is running:")
        print("   uvicorn app.main:app --port 3000 --reload")
        print()
    except AssertionError as e:
        print(f"\n❌ CHECK FAILED: {e}")
        print()


if __name__ == "__main__":
    main()
