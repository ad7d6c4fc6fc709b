from __future__ import annotations

from dataclasses import dataclass

from msexlib import ApplicationErrorPayload


@dataclass
class PlainCode:
    code: str
    description: str


class PlainPayload:
    """Payload owned by a caller; satisfies the contract without freezing."""

    def __init__(self, native_error_text: str | None = None) -> None:
        self.native_error_text = native_error_text
        self.description = "Test error description"
        self.error_code = PlainCode(code="TEST_ERROR", description="Test error code")


def make_payload(native_error_text: str | None = None) -> ApplicationErrorPayload:
    return ApplicationErrorPayload.of(
        "ORDER_REJECTED",
        "Order rejected",
        native_error_text=native_error_text,
    )
