"""
Author: Ian Young
Purpose: Print the current TOTP for the secret stored in the environment.

Usage:
    python -m authenticator
"""

import time
from os import getenv

from dotenv import load_dotenv

from .secret import generate_secret
from .totp import compute_code

load_dotenv()  # Load new variables


def main():
    """Prints the current code twice, five seconds apart."""
    totp_secret = getenv("totp_secret")
    if not totp_secret:
        totp_secret = generate_secret()
        print("No totp_secret set, created a new one.")

    print(f"Secret: {totp_secret}")
    try:
        for _ in range(2):
            current_totp = compute_code(totp_secret)
            print(f"Current TOTP: {current_totp}")
            # TOTP codes change every 30 seconds
            time.sleep(5)  # Run after 5 seconds in case it changed
    except KeyboardInterrupt:
        print("\nLeaving program.")


# Run directly if not being imported as a module
if __name__ == "__main__":
    main()
