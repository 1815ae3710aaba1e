"""Unit tests for the Sensitive container."""

from __future__ import annotations

import copy
import pickle
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest
from structlog.testing import capture_logs

from mp_sensitive.kernel.errors import InvalidArgumentError, NullValueError
from mp_sensitive.kernel.redaction import extractors, redactors, renderers
from mp_sensitive.kernel.sensitive import Deferred, DoNotSerialize, Sensitive

CONTAINED = "test case"


class Echo(Sensitive[str], renderer=renderers.unredacted()):
    __slots__ = ()


class Card(
    Sensitive[str],
    renderer=renderers.simple(extractors.identity(), redactors.DEFAULT_MASK),
    alt_renderer=renderers.unredacted(),
):
    __slots__ = ()


class CardUpperAlt(Card, alt_renderer=renderers.simple(extractors.identity(), redactors.truncated())):
    __slots__ = ()


# ---------------------------------------------------------------------------
# Safe by default
# ---------------------------------------------------------------------------


class TestDefaultRenderer:
    def test_str_is_empty(self) -> None:
        assert str(Sensitive(CONTAINED)) == ""
        assert str(Sensitive(object())) == ""

    def test_format_is_empty_for_any_directive(self) -> None:
        sensitive = Sensitive(CONTAINED)
        assert f"{sensitive}" == ""
        assert f"{sensitive:#.100}" == ""
        assert "%s" % sensitive == ""

    def test_width_still_applies(self) -> None:
        sensitive = Sensitive(object())
        assert f"{sensitive:1}" == " "
        assert f"{sensitive:3}" == "   "

    def test_repr_does_not_leak(self) -> None:
        assert repr(Sensitive(CONTAINED)) == "<Sensitive ''>"
        assert CONTAINED not in repr(Sensitive(CONTAINED))

    def test_default_text_matches_render_defaults(self) -> None:
        card = Card("4111-1111-1111-1111")
        assert card.default_text() == card.render(-1, False, -1, False, False)
        assert str(card) == card.default_text()


# ---------------------------------------------------------------------------
# Residual formatting
# ---------------------------------------------------------------------------


class TestResidualFormat:
    def test_plain(self) -> None:
        echo = Echo(CONTAINED)
        assert f"{echo}" == "test case"
        assert f"{echo:1}" == "test case"

    def test_right_justified_by_default(self) -> None:
        echo = Echo(CONTAINED)
        assert f"{echo:10}" == " test case"
        assert f"{echo:12}" == "   test case"

    def test_left_justify(self) -> None:
        echo = Echo(CONTAINED)
        assert f"{echo:-10}" == "test case "
        assert f"{echo:<12}" == "test case   "

    def test_upper_case(self) -> None:
        assert f"{Echo(CONTAINED):S}" == "TEST CASE"
        assert Echo(CONTAINED).render(upper_case=True) == "TEST CASE"

    def test_alternate_defaults_to_primary(self) -> None:
        assert f"{Echo(CONTAINED):#}" == "test case"

    def test_render_keywords(self) -> None:
        card = Card("4111-1111-1111-1111")
        assert card.render(precision=4, width=22, left_justify=True) == "####-####-####-1111   "

    def test_bad_spec_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            format(Echo(CONTAINED), "d")

    def test_idempotent(self) -> None:
        card = Card("4111-1111-1111-1111")
        assert f"{card:.6}" == f"{card:.6}"


# ---------------------------------------------------------------------------
# Renderer declaration
# ---------------------------------------------------------------------------


class TestRendererDeclaration:
    def test_primary_and_alternate(self) -> None:
        card = Card("4111-1111-1111-1111")
        assert f"{card:.4}" == "####-####-####-1111"
        assert f"{card:#}" == "4111-1111-1111-1111"

    def test_subclass_inherits_primary_and_overrides_alternate(self) -> None:
        card = CardUpperAlt("4111-1111-1111-1111")
        assert f"{card:.4}" == "####-####-####-1111"
        assert f"{card:#.4}" == "1111"

    def test_instance_renderer_overrides_class(self) -> None:
        sensitive = Sensitive("secret", renderer=renderers.masked())
        assert str(sensitive) == "###ret"
        assert f"{sensitive:#}" == "###ret"

    def test_instance_alt_renderer(self) -> None:
        sensitive = Sensitive("secret", renderer=renderers.masked(), alt_renderer=renderers.truncated())
        assert f"{sensitive:#.2}" == "et"

    def test_instance_renderer_does_not_pick_class_alternate(self) -> None:
        card = Card("4111", renderer=renderers.masked())
        assert f"{card:#}" == "##11"

    def test_renderers_are_shared_between_instances(self) -> None:
        first, second = Card("1"), Card("2")
        assert first._renderer is second._renderer
        assert first._alt_renderer is second._alt_renderer


# ---------------------------------------------------------------------------
# Construction and value sources
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_none_value_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Sensitive(None)

    def test_value_and_source_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Sensitive("x", source=DoNotSerialize("y"))

    def test_is_immutable(self) -> None:
        sensitive = Sensitive("x")
        with pytest.raises(AttributeError):
            sensitive._source = DoNotSerialize("y")  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del sensitive._renderer

    def test_explicit_source(self) -> None:
        echo = Echo(source=DoNotSerialize("from source"))
        assert str(echo) == "from source"


class TestDeferred:
    def test_supplier_called_lazily_once(self) -> None:
        calls: list[int] = []

        def supplier() -> str:
            calls.append(1)
            return "secret"

        echo = Echo.deferred(supplier)
        assert calls == []
        assert str(echo) == "secret"
        assert str(echo) == "secret"
        assert calls == [1]

    def test_deferred_keeps_class_renderers(self) -> None:
        card = Card.deferred(lambda: "4111-1111")
        assert f"{card:.4}" == "####-1111"

    def test_none_from_source_renders_empty(self) -> None:
        card = Card.deferred(lambda: None)
        assert str(card) == ""
        assert f"{card:#10}" == "          "

    def test_null_value_error_renders_empty_and_logs(self) -> None:
        def supplier() -> str:
            raise NullValueError("vault unavailable")

        card = Card.deferred(supplier)
        with capture_logs() as logs:
            assert f"{card:#}" == ""
        assert logs[0]["event"] == "sensitive.value_unavailable"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["container"] == "Card"

    def test_failing_supplier_renders_empty_and_logs_type_only(self) -> None:
        def supplier() -> str:
            raise KeyError("4111-1111")

        card = Card.deferred(supplier)
        with capture_logs() as logs:
            assert str(card) == ""
            assert f"{card:#.4}" == ""
            assert repr(card) == "<Card ''>"
        assert logs[0] == {
            "event": "sensitive.value_unavailable",
            "container": "Card",
            "code": "null_value",
            "error": "KeyError",
            "log_level": "warning",
        }
        assert "4111" not in repr(logs)

    def test_supplier_error_is_reported_as_null_value(self) -> None:
        def supplier() -> str:
            raise ValueError("corrupt payload")

        with pytest.raises(NullValueError) as exc_info:
            Deferred(supplier).get()
        assert isinstance(exc_info.value.cause, ValueError)

    def test_failure_is_not_memoised(self) -> None:
        attempts: list[int] = []

        def supplier() -> str:
            attempts.append(1)
            if len(attempts) == 1:
                raise ConnectionError("vault down")
            return "recovered"

        echo = Echo.deferred(supplier)
        with capture_logs():
            assert str(echo) == ""
        assert str(echo) == "recovered"
        assert len(attempts) == 2

    def test_custom_source_error_renders_empty(self) -> None:
        class Broken:
            def get(self) -> str:
                raise ValueError("undecodable")

        with capture_logs() as logs:
            assert str(Echo(source=Broken())) == ""
        assert logs[0]["code"] == "source_error"
        assert logs[0]["error"] == "ValueError"

    def test_concurrent_rendering_sees_one_value(self) -> None:
        workers = 16
        barrier = threading.Barrier(workers)
        supplied: list[str] = []

        def supplier() -> str:
            value = "4111-1111-1111-1111"
            supplied.append(value)
            return value

        card = Card.deferred(supplier)

        def render_once(_: int) -> str:
            barrier.wait()
            return f"{card:.4}"

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(render_once, range(workers)))

        assert set(results) == {"####-####-####-1111"}
        assert 1 <= len(supplied) <= workers
        assert all(value == supplied[0] for value in supplied)

    def test_source_repr_hides_value(self) -> None:
        assert "secret" not in repr(Deferred(lambda: "secret"))
        assert "secret" not in repr(DoNotSerialize("secret"))


class TestSerialization:
    def test_pickle_refused(self) -> None:
        with pytest.raises(TypeError):
            pickle.dumps(DoNotSerialize("secret"))
        with pytest.raises(TypeError):
            pickle.dumps(Sensitive("secret"))

    def test_copies_are_same_instance(self) -> None:
        card = Card("4111")
        assert copy.copy(card) is card
        assert copy.deepcopy(card) is card
        assert copy.deepcopy({"card": card})["card"] is card


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------


class TestEquality:
    def test_equal_raw_values(self) -> None:
        assert Sensitive(CONTAINED) == Sensitive(CONTAINED)
        assert hash(Sensitive(CONTAINED)) == hash(CONTAINED)

    def test_equal_despite_different_renderers(self) -> None:
        plain = Sensitive("secret")
        masked = Sensitive("secret", renderer=renderers.masked())
        assert plain == masked
        assert str(plain) != str(masked)

    def test_different_values(self) -> None:
        assert Sensitive("a") != Sensitive("b")

    def test_different_types_are_not_equal(self) -> None:
        assert Echo("a") != Sensitive("a")
        assert Sensitive("a") != Echo("a")

    def test_not_equal_to_raw_value(self) -> None:
        assert Sensitive("a") != "a"

    def test_usable_in_sets(self) -> None:
        values: set[Any] = {Sensitive("a"), Sensitive("a"), Sensitive("b")}
        assert len(values) == 2


# ---------------------------------------------------------------------------
# pydantic integration
# ---------------------------------------------------------------------------


class TestPydantic:
    def test_validates_and_serialises_redacted(self) -> None:
        pydantic = pytest.importorskip("pydantic")

        class Payment(pydantic.BaseModel):
            card: Card

        payment = Payment(card="4111-1111-1111-1111")
        assert isinstance(payment.card, Card)
        assert payment.model_dump() == {"card": "####-####-1111-1111"}
        assert "4111-1111-1111-1111" not in payment.model_dump_json()

    def test_accepts_instance(self) -> None:
        pydantic = pytest.importorskip("pydantic")

        class Payment(pydantic.BaseModel):
            card: Card

        card = Card("4111")
        assert Payment(card=card).card is card
