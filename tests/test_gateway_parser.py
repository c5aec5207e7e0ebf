"""Tests for tradereport.gateway.parser — parse_instruction, instruction_to_dict."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradereport.core.errors import (
    InvalidAction,
    InvalidDateOrdering,
    MalformedInput,
    MissingField,
    NegativeValue,
)
from tradereport.core.result import Err, Ok, unwrap
from tradereport.gateway.parser import (
    INSTRUCTION_FIELDS,
    instruction_to_dict,
    parse_instruction,
)
from tradereport.gateway.types import Action


class TestParseValid:
    def test_parse_valid_record(self, raw_record: dict[str, object]) -> None:
        result = parse_instruction(raw_record)
        assert isinstance(result, Ok)
        instruction = result.value
        assert instruction.entity.value == "3I GRP."
        assert instruction.action is Action.SELL
        assert instruction.currency.value == "AED"
        assert instruction.settlement_date == date(2018, 1, 26)
        assert instruction.adjusted_settlement_date == date(2018, 1, 28)
        assert instruction.cost == Decimal("13875.000")

    def test_decimal_and_int_values(self, raw_record: dict[str, object]) -> None:
        raw_record["units"] = 1000
        raw_record["agreedFx"] = Decimal("1.11")
        result = parse_instruction(raw_record)
        assert isinstance(result, Ok)
        assert result.value.units.value == Decimal("1000")

    def test_date_objects_accepted(self, raw_record: dict[str, object]) -> None:
        raw_record["instructionDate"] = date(2018, 1, 25)
        raw_record["settlementDate"] = date(2018, 1, 26)
        assert isinstance(parse_instruction(raw_record), Ok)

    def test_round_trip(self, raw_record: dict[str, object]) -> None:
        instruction = unwrap(parse_instruction(raw_record))
        assert unwrap(parse_instruction(instruction_to_dict(instruction))) == instruction


class TestParseInvalid:
    @pytest.mark.parametrize("field", INSTRUCTION_FIELDS)
    def test_missing_field(self, raw_record: dict[str, object], field: str) -> None:
        del raw_record[field]
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert isinstance(result.error, MissingField)
        assert result.error.field == field
        assert result.error.message == f"Missing required property '{field}'"

    def test_null_is_missing(self, raw_record: dict[str, object]) -> None:
        raw_record["currency"] = None
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert isinstance(result.error, MissingField)

    def test_first_missing_field_reported(self, raw_record: dict[str, object]) -> None:
        del raw_record["units"]
        del raw_record["entity"]
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert result.error.message == "Missing required property 'entity'"

    def test_unknown_field(self, raw_record: dict[str, object]) -> None:
        raw_record["desk"] = "FX"
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedInput)
        assert result.error.message == "Unrecognized field 'desk'"

    @pytest.mark.parametrize(
        "value", ["26 Jan 2018", "20180126", "2018-W04-5", "2018-026", "2018-01-26T00:00"],
    )
    def test_bad_date(self, raw_record: dict[str, object], value: str) -> None:
        raw_record["settlementDate"] = value
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedInput)
        assert result.error.location == "settlementDate"

    @pytest.mark.parametrize("value", ["abc", 1.5, True, "NaN", "Infinity", [1]])
    def test_bad_decimal(self, raw_record: dict[str, object], value: object) -> None:
        raw_record["pricePerUnit"] = value
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedInput)
        assert result.error.location == "pricePerUnit"

    def test_non_string_entity(self, raw_record: dict[str, object]) -> None:
        raw_record["entity"] = 42
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedInput)

    def test_not_a_mapping(self) -> None:
        result = parse_instruction(["entity", "foo"])  # type: ignore[arg-type]
        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedInput)

    def test_domain_errors_pass_through(self, raw_record: dict[str, object]) -> None:
        raw_record["action"] = "X"
        assert isinstance(parse_instruction(raw_record).error, InvalidAction)  # type: ignore[union-attr]

        raw_record["action"] = "S"
        raw_record["units"] = "-1"
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert isinstance(result.error, NegativeValue)
        assert result.error.message == "Units should not be negative"

        raw_record["units"] = "1000"
        raw_record["settlementDate"] = "2018-01-24"
        result = parse_instruction(raw_record)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidDateOrdering)


class TestParseTotality:
    @settings(max_examples=200)
    @given(st.dictionaries(
        st.sampled_from(INSTRUCTION_FIELDS) | st.text(min_size=0, max_size=10),
        st.one_of(
            st.none(),
            st.text(min_size=0, max_size=20),
            st.integers(min_value=-1000, max_value=1000),
            st.booleans(),
            st.floats(allow_nan=True),
        ),
        max_size=12,
    ))
    def test_never_raises(self, raw: dict[str, object]) -> None:
        """parse_instruction always returns Ok or Err."""
        result = parse_instruction(raw)
        assert isinstance(result, (Ok, Err))
