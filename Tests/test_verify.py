"""
Author: Ian Young
Purpose: Test the verification of user submitted codes.
"""

import hmac

import pytest

from authenticator import compute_code, timing_safe_equals, verify_code

RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
TIME_STEP = 1000


@pytest.mark.parametrize("discrepancy", [0, 1, 2, 4])
@pytest.mark.parametrize("drift", range(-6, 7))
def test_verify_window(discrepancy, drift):
    """
    Test that a code is accepted only while the drift stays inside the
    window.

    Args:
        discrepancy: The number of steps tolerated on each side.
        drift: How many steps the verifier's clock is off by.

    Returns:
        None
    """
    code = compute_code(RFC_SECRET, TIME_STEP)

    # Act
    result = verify_code(
        RFC_SECRET,
        code,
        discrepancy=discrepancy,
        current_time_step=TIME_STEP + drift,
    )

    # Assert
    assert result is (abs(drift) <= discrepancy)


def test_verify_default_window():
    """Test that the default window accepts one step on each side."""
    code = compute_code(RFC_SECRET, TIME_STEP)

    assert verify_code(RFC_SECRET, code, current_time_step=TIME_STEP - 1)
    assert verify_code(RFC_SECRET, code, current_time_step=TIME_STEP + 1)
    assert not verify_code(RFC_SECRET, code, current_time_step=TIME_STEP + 2)


def test_verify_uses_clock(monkeypatch):
    """Test that the current time step is used when none is given."""
    monkeypatch.setattr("authenticator.totp.time.time", lambda: 59.0)

    assert verify_code(RFC_SECRET, "287082")


def test_verify_near_epoch():
    """Test that steps before the epoch are skipped, not computed."""
    assert verify_code(RFC_SECRET, "755224", current_time_step=0)


def test_verify_wrong_code():
    """Test that a wrong code is rejected."""
    code = compute_code(RFC_SECRET, TIME_STEP)
    wrong = str((int(code) + 1) % 1000000).zfill(6)

    assert not verify_code(
        RFC_SECRET, wrong, discrepancy=0, current_time_step=TIME_STEP
    )


@pytest.mark.parametrize(
    "code", ["", "12345", "1234567", "0123456789"],
    ids=["empty", "short", "long", "very_long"],
)
def test_verify_wrong_length_skips_computation(monkeypatch, code):
    """Test that codes of the wrong length are rejected straight away."""

    def fail(*args, **kwargs):
        raise AssertionError("compute_code should not be called")

    monkeypatch.setattr("authenticator.verify.compute_code", fail)

    assert verify_code(RFC_SECRET, code, current_time_step=TIME_STEP) is False


@pytest.mark.parametrize(
    "secret",
    ["GEZDGNBVGY3TQOJ1", "GEZ=DGNBVGY3TQOJQ", "not base32!", "abcdefgh"],
    ids=["bad_char", "bad_padding", "symbols", "lowercase"],
)
def test_verify_bad_secret(secret):
    """Test that an undecodable secret reads as a wrong code."""
    assert verify_code(secret, "123456", current_time_step=TIME_STEP) is False


@pytest.mark.parametrize(
    "safe, user, expected",
    [
        ("123456", "123456", True),
        ("123456", "923456", False),
        ("123456", "123459", False),
        ("123456", "12345", False),
        ("123456", "1234567", False),
        ("", "", True),
    ],
    ids=[
        "equal",
        "first_differs",
        "last_differs",
        "shorter",
        "longer",
        "empty",
    ],
)
def test_timing_safe_equals(safe, user, expected):
    """Test the results of the constant-time comparison."""
    assert timing_safe_equals(safe, user) is expected


@pytest.mark.parametrize(
    "user", ["923456", "123459"], ids=["first_differs", "last_differs"]
)
def test_timing_safe_equals_scans_full_length(monkeypatch, user):
    """
    Test that both full strings reach the constant-time comparator no
    matter where they first differ.

    Args:
        monkeypatch: Pytest fixture used to record comparator calls.
        user: The user submitted value.

    Returns:
        None
    """
    calls = []
    compare_digest = hmac.compare_digest

    def record(left, right):
        calls.append((left, right))
        return compare_digest(left, right)

    monkeypatch.setattr("authenticator.verify.hmac.compare_digest", record)

    # Act
    result = timing_safe_equals("123456", user)

    # Assert
    assert result is False
    assert calls == [(b"123456", user.encode("utf-8"))]


@pytest.mark.parametrize(
    "code", ["12345\ud800", "\udfff12345", "１２３４５６"],
    ids=["trailing_surrogate", "leading_surrogate", "fullwidth_digits"],
)
def test_verify_unencodable_code(code):
    """Test that odd user input is rejected instead of raising."""
    assert verify_code(RFC_SECRET, code, current_time_step=TIME_STEP) is False


def test_timing_safe_equals_lone_surrogate():
    """Test that a lone surrogate is compared rather than raising."""
    assert timing_safe_equals("123456", "12345\ud800") is False


def test_verify_near_counter_limit():
    """Test that steps past the 64-bit counter are skipped."""
    code = compute_code(RFC_SECRET, 2**64 - 1)

    assert verify_code(RFC_SECRET, code, current_time_step=2**64)


@pytest.mark.parametrize("current_time_step", [2**64 + 1, 2**70])
def test_verify_out_of_range_step(current_time_step):
    """Test that a time step beyond the counter reads as a wrong code."""
    assert (
        verify_code(
            RFC_SECRET, "123456", current_time_step=current_time_step
        )
        is False
    )
