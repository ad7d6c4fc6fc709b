from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from msexlib import ApplicationError, ApplicationErrorCode, ApplicationErrorPayload, DomainStatus
from msexlib.domain import Freezable
from msexlib.tests.helpers import PlainPayload, make_payload


def test_payload_exposes_code_and_description() -> None:
    payload = make_payload()

    assert payload.error_code == ApplicationErrorCode(code="ORDER_REJECTED", description="Order rejected")
    assert payload.description == "Order rejected"
    assert payload.native_error_text is None
    assert str(payload.error_code) == "ORDER_REJECTED"


def test_native_text_is_writable_before_freezing() -> None:
    payload = make_payload()

    payload.native_error_text = "set by caller"

    assert payload.native_error_text == "set by caller"


def test_fixed_fields_cannot_be_reassigned() -> None:
    payload = make_payload()

    with pytest.raises(FrozenInstanceError):
        payload.description = "other"  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        payload.error_code = ApplicationErrorCode("X", "y")  # type: ignore[misc]


def test_fill_native_text_first_write_wins() -> None:
    payload = make_payload()

    assert payload.fill_native_error_text("first") is True
    assert payload.fill_native_error_text("second") is False
    assert payload.native_error_text == "first"


def test_error_construction_freezes_payload() -> None:
    payload = make_payload()

    ApplicationError(500, DomainStatus.ERROR, payload, "msg", RuntimeError("root"))

    assert payload.frozen is True
    with pytest.raises(FrozenInstanceError):
        payload.native_error_text = "late"
    with pytest.raises(FrozenInstanceError):
        payload.fill_native_error_text("late")
    assert payload.native_error_text == "root"


def test_payloads_compare_by_value() -> None:
    assert make_payload("x") == make_payload("x")
    assert make_payload("x") != make_payload("y")


def test_frozen_state_is_ignored_by_equality() -> None:
    frozen = make_payload()
    frozen.freeze()

    assert frozen == make_payload()


def test_freezable_protocol() -> None:
    assert isinstance(make_payload(), Freezable)
    assert not isinstance(PlainPayload(), Freezable)


def test_code_is_immutable() -> None:
    code = ApplicationErrorCode(code="A", description="b")

    with pytest.raises(FrozenInstanceError):
        code.code = "B"  # type: ignore[misc]


def test_of_builds_matching_code() -> None:
    payload = ApplicationErrorPayload.of("DUP", "Duplicate record", native_error_text="unique violation")

    assert payload.error_code.code == "DUP"
    assert payload.error_code.description == "Duplicate record"
    assert payload.native_error_text == "unique violation"


def test_reused_frozen_payload_is_not_backfilled() -> None:
    payload = make_payload()
    ApplicationError(400, DomainStatus.ERROR, payload, "first")

    second = ApplicationError(500, DomainStatus.ERROR, payload, "second", RuntimeError("root"))

    assert second.native_error_text is None
