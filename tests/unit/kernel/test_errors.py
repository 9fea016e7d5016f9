"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

import pytest

from mp_masking.application.masking import Masker
from mp_masking.kernel.errors import (
    BaseError,
    CyclicValueError,
    InvalidArgumentError,
    MaskingError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause(self) -> None:
        cause = ValueError("original")
        err = BaseError("wrapper", cause=cause)
        assert err.__cause__ is cause
        assert "original" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"
        assert repr(BaseError("m", code="c", field="x")) == (
            "BaseError(code='c', message='m', field='x')"
        )

    def test_initial_field(self) -> None:
        err = BaseError("m", field="MASK_TAG_NAME")
        assert err.field == "MASK_TAG_NAME"
        assert err.to_dict()["field"] == "MASK_TAG_NAME"

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        err = BaseError("m", detail=detail)
        err.detail["k"] = 2
        assert detail == {"k": 1}


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error_cls", "parent"),
        [
            (MaskingError, BaseError),
            (InvalidArgumentError, MaskingError),
            (CyclicValueError, MaskingError),
        ],
    )
    def test_subclassing(self, error_cls: type, parent: type) -> None:
        assert issubclass(error_cls, parent)

    def test_default_codes(self) -> None:
        assert MaskingError("m").code == "masking_error"
        assert InvalidArgumentError("random", "x").code == "invalid_argument"
        assert CyclicValueError("Node").code == "cyclic_value"


# ---------------------------------------------------------------------------
# Masking errors
# ---------------------------------------------------------------------------


class TestInvalidArgumentError:
    def test_attributes(self) -> None:
        err = InvalidArgumentError("random", "XX.4", "expected an integer")
        assert err.rule == "random"
        assert err.argument == "XX.4"
        assert err.detail == {"rule": "random", "argument": "XX.4"}
        assert err.message == "invalid argument 'XX.4' for mask rule 'random': expected an integer"

    def test_no_reason(self) -> None:
        assert InvalidArgumentError("filled", "x").message == (
            "invalid argument 'x' for mask rule 'filled'"
        )

    def test_no_field_until_propagated(self) -> None:
        err = InvalidArgumentError("filled", "x")
        assert err.field is None
        assert "field" not in err.to_dict()


class TestFieldPath:
    def test_segments_joined(self) -> None:
        err = MaskingError("m")
        for segment in ("balance", "[0]", "accounts"):
            err.add_path_segment(segment)
        assert err.field == "accounts[0].balance"
        assert err.to_dict()["field"] == "accounts[0].balance"

    def test_leading_index(self) -> None:
        err = MaskingError("m")
        err.add_path_segment("[3]")
        assert err.field == "[3]"

    def test_path_from_masking(self) -> None:
        @dataclass
        class Account:
            balance: int = field(default=0, metadata={"mask": "randomXX"})

        @dataclass
        class Customer:
            accounts: list[Account] = field(default_factory=list)
            extra: dict[str, Account] = field(default_factory=dict)

        with pytest.raises(InvalidArgumentError) as exc_info:
            Masker().mask(Customer(accounts=[Account(5)]))
        assert exc_info.value.field == "accounts[0].balance"

        with pytest.raises(InvalidArgumentError) as exc_info:
            Masker().mask(Customer(extra={"n": Account(5)}))
        assert exc_info.value.field == "extra['n'].balance"


class TestCyclicValueError:
    def test_attributes(self) -> None:
        err = CyclicValueError("Node")
        assert err.type_name == "Node"
        assert err.detail == {"type": "Node"}
        assert "Node" in err.message

    def test_raised_for_self_reference(self) -> None:
        items: list[object] = [1]
        items.append(items)
        with pytest.raises(CyclicValueError) as exc_info:
            Masker().mask(items)
        assert exc_info.value.field == "[1]"
