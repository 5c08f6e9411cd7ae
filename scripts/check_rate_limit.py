import requests
import time
import os

# --- Configuration ---
# Make sure the Flask app is running!
BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:5000")
# Login is limited to 10 requests per minute per client address.
ENDPOINT_TO_TEST = "/api/auth/login"
NUM_REQUESTS = 12
# Delay between requests (in seconds) - keep total time under 60s
DELAY_SECONDS = 0.5
EXPECTED_SUCCESS = 10
# --- End Configuration ---

TARGET_URL = f"{BASE_URL}{ENDPOINT_TO_TEST}"
PAYLOAD = {"username": "rate-limit-check", "password": "not-a-real-password"}

print(f"Testing rate limiting on: {TARGET_URL}")
print(f"Sending {NUM_REQUESTS} requests with a {DELAY_SECONDS}s delay...")
print("-" * 30)

answered_count = 0
rate_limit_hit_count = 0

for i in range(NUM_REQUESTS):
    request_num = i + 1
    print(f"Sending request {request_num}/{NUM_REQUESTS}... ", end="")
    try:
        response = requests.post(TARGET_URL, json=PAYLOAD, timeout=10)
        print(f"Status Code: {response.status_code}")

        # Bad credentials answer 401; that still counts against the limit.
        if response.status_code == 401:
            answered_count += 1
        elif response.status_code == 429:
            rate_limit_hit_count += 1
            print("  -> Rate limit triggered!")
        else:
            print(f"  -> WARNING: Received unexpected status code {response.status_code}")

    except requests.exceptions.ConnectionError as e:
        print(f"\nError: Could not connect to {BASE_URL}. Is the Flask server running?")
        print(f"Details: {e}")
        break

    if request_num < NUM_REQUESTS:
        time.sleep(DELAY_SECONDS)

print("-" * 30)
print("Test Summary:")
print(f"  Answered requests (Status 401): {answered_count}")
print(f"  Rate limited requests (Status 429): {rate_limit_hit_count}")

if answered_count == EXPECTED_SUCCESS and rate_limit_hit_count == (NUM_REQUESTS - EXPECTED_SUCCESS):
    print(f"\nResult: PASSED! {EXPECTED_SUCCESS} allowed, then 429.")
elif rate_limit_hit_count == 0:
    print("\nResult: FAILED? No rate limit triggered. Check RATELIMIT_ENABLED and the limiter storage.")
else:
    print(f"\nResult: PARTIAL? Rate limit triggered after {answered_count} requests. Check the configured limits.")
