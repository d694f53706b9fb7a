"""Unit tests for the message model and the retry counter header schema."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from maxretry.kernel.messaging import (
    X_DEATH,
    X_RETRY_COUNT,
    HandlerResult,
    Message,
    RetryCounter,
    RouteDecision,
)
from maxretry.kernel.messaging.headers import coerce_count


def _death(queue: str, reason: str, count: object) -> dict[str, object]:
    return {"queue": queue, "reason": reason, "count": count, "exchange": "", "routing-keys": ["orders"]}


# ---------------------------------------------------------------------------
# coerce_count
# ---------------------------------------------------------------------------


class TestCoerceCount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (0, 0),
            (3, 3),
            ("4", 4),
            (b"5", 5),
            (" 2 ", 2),
            (2.0, 2),
            (-1, None),
            ("-3", None),
            ("abc", None),
            (2.5, None),
            (True, None),
            (None, None),
            ([1], None),
        ],
    )
    def test_values(self, raw: object, expected: int | None) -> None:
        assert coerce_count(raw) == expected


# ---------------------------------------------------------------------------
# RetryCounter
# ---------------------------------------------------------------------------


class TestRetryCounterRead:
    def setup_method(self) -> None:
        self.counter = RetryCounter("orders-retry")

    def test_absent_headers_is_zero(self) -> None:
        assert self.counter.read(None) == 0
        assert self.counter.read({}) == 0

    def test_reads_x_retry_count(self) -> None:
        assert self.counter.read({X_RETRY_COUNT: 3}) == 3

    def test_corrupt_x_retry_count_is_zero(self) -> None:
        assert self.counter.read({X_RETRY_COUNT: "three"}) == 0
        assert self.counter.read({X_RETRY_COUNT: -4}) == 0

    def test_reads_expired_count_from_retry_queue(self) -> None:
        headers = {
            X_DEATH: [
                _death("orders-retry", "expired", 2),
                _death("orders", "rejected", 3),
            ]
        }
        assert self.counter.read(headers) == 2

    def test_ignores_other_queues_and_reasons(self) -> None:
        headers = {
            X_DEATH: [
                _death("orders", "rejected", 4),
                _death("invoices-retry", "expired", 7),
            ]
        }
        assert self.counter.read(headers) == 0

    def test_x_death_wins_over_x_retry_count(self) -> None:
        headers = {X_DEATH: [_death("orders-retry", "expired", 1)], X_RETRY_COUNT: 9}
        assert self.counter.read(headers) == 1

    def test_corrupt_x_death_falls_back_to_x_retry_count(self) -> None:
        headers = {X_DEATH: [_death("orders-retry", "expired", "n/a")], X_RETRY_COUNT: 2}
        assert self.counter.read(headers) == 2

    def test_malformed_x_death_shapes(self) -> None:
        assert self.counter.read({X_DEATH: "garbage"}) == 0
        assert self.counter.read({X_DEATH: ["garbage", 42]}) == 0

    def test_bytes_fields_are_decoded(self) -> None:
        headers = {X_DEATH: [{"queue": b"orders-retry", "reason": b"expired", "count": 3}]}
        assert self.counter.read(headers) == 3


class TestRetryCounterWrite:
    def test_returns_copy(self) -> None:
        original = {"a": 1}
        updated = RetryCounter.write(original, 2)
        assert updated == {"a": 1, X_RETRY_COUNT: 2}
        assert original == {"a": 1}

    def test_none_headers(self) -> None:
        assert RetryCounter.write(None, 0) == {X_RETRY_COUNT: 0}

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            RetryCounter.write({}, -1)

    def test_write_then_read(self) -> None:
        counter = RetryCounter("q-retry")
        assert counter.read(RetryCounter.write({}, 4)) == 4


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------


class TestMessage:
    def test_defaults(self) -> None:
        msg = Message()
        assert msg.payload == b""
        assert msg.retry_count == 0
        assert msg.headers == {}
        assert msg.message_id

    def test_negative_retry_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            Message(retry_count=-1)

    def test_is_frozen(self) -> None:
        msg = Message(payload=b"x")
        with pytest.raises((AttributeError, TypeError)):
            msg.payload = b"y"  # type: ignore[misc]

    def test_from_delivery(self) -> None:
        delivery = SimpleNamespace(
            body=b"payload",
            headers={"k": "v"},
            message_id="m-1",
            routing_key="orders",
            delivery_tag=7,
            redelivered=True,
        )
        msg = Message.from_delivery(delivery, queue="orders", retry_count=2)  # type: ignore[arg-type]
        assert msg.payload == b"payload"
        assert msg.headers == {"k": "v"}
        assert msg.retry_count == 2
        assert msg.original_queue == "orders"
        assert msg.message_id == "m-1"
        assert msg.delivery_tag == 7
        assert msg.redelivered is True

    def test_from_delivery_without_id_or_headers(self) -> None:
        delivery = SimpleNamespace(
            body=b"", headers=None, message_id=None, routing_key=None, delivery_tag=None, redelivered=None
        )
        msg = Message.from_delivery(delivery, queue="q", retry_count=0)  # type: ignore[arg-type]
        assert msg.headers == {}
        assert msg.message_id
        assert msg.routing_key == ""
        assert msg.redelivered is False


class TestEnums:
    def test_route_decision_values(self) -> None:
        assert RouteDecision.REQUEUE.value == "requeue"
        assert RouteDecision.ERROR.value == "error"

    def test_handler_result_values(self) -> None:
        assert {r.value for r in HandlerResult} == {"ack", "reject"}
