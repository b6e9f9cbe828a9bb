from __future__ import annotations

import json

import pytest
from web3 import Web3

from core.domain.entities.strategy_entity import ExternalStrategy, RawStrategyObservation
from core.domain.enums.strategy_enums import StrategyCondition, StrategyStatus
from core.services.strategy_normalizer import (
    filter_strategies,
    normalize,
    resolve_status,
    should_be_included,
)


# --- status resolution ---


@pytest.mark.parametrize(
    "overrides",
    [
        {"is_retired": True},
        {"last_total_debt": 0},
        {"is_retired": True, "last_total_debt": 0},
        {},
    ],
)
def test_curated_status_wins_over_everything(make_raw, overrides):
    raw = make_raw(status="endorsed", **overrides)

    assert normalize(raw).status == "endorsed"


def test_retired_strategy_is_not_active_even_with_debt(make_raw):
    raw = make_raw(is_retired=True, last_total_debt=10**24)

    assert resolve_status(raw) == StrategyStatus.NOT_ACTIVE == "not_active"


def test_zero_debt_strategy_is_unallocated(make_raw):
    assert normalize(make_raw(last_total_debt=0)).status == "unallocated"


def test_funded_strategy_is_active(make_raw):
    assert normalize(make_raw(last_total_debt=1)).status == "active"


# --- field mapping ---


def test_display_name_is_preferred(make_raw):
    assert normalize(make_raw(display_name="Curve Boost")).name == "Curve Boost"
    assert normalize(make_raw(display_name="")).name == "StrategyCurveBoost"


def test_details_copy_report_snapshot(make_raw):
    big = 123_456_789_012_345_678_901_234_567_890
    raw = make_raw(last_total_debt=big, last_total_gain=big + 1, is_in_queue=True)

    details = normalize(raw).details

    assert details.total_debt == big
    assert details.total_gain == big + 1
    assert details.total_loss == 0
    assert details.performance_fee == 1_000
    assert details.last_report == 1_700_000_000
    assert details.debt_ratio == 2_500
    assert details.in_queue is True


def test_counters_are_narrowed_to_uint64(make_raw):
    details = normalize(make_raw(last_performance_fee=2**64 + 7)).details

    assert details.performance_fee == 7


def test_address_is_checksummed(make_raw):
    strategy = normalize(make_raw())

    assert Web3.is_checksum_address(strategy.address)


def test_missing_and_malformed_fields_degrade_to_defaults():
    raw = RawStrategyObservation.model_validate(
        {
            "address": None,
            "name": None,
            "isRetired": None,
            "lastTotalDebt": "not-a-number",
            "lastTotalGain": "0x10",
            "lastReport": "1700000000",
            "lastDebtRatio": None,
            "netAPR": "n/a",
        }
    )

    strategy = normalize(raw)

    assert strategy.address == ""
    assert strategy.name == ""
    assert strategy.status == "unallocated"
    assert strategy.net_apr == 0.0
    assert strategy.details.total_gain == 16
    assert strategy.details.last_report == 1_700_000_000
    assert strategy.details.debt_ratio == 0


def test_empty_observation_normalizes():
    strategy = normalize(RawStrategyObservation())

    assert strategy.status == "unallocated"
    assert strategy.details is not None


# --- serialization ---


def test_serialized_shape(make_raw):
    payload = json.loads(normalize(make_raw(description="Boosted Curve LP")).model_dump_json())

    assert payload == {
        "address": Web3.to_checksum_address("0x1f8ad2cec4a2595ff3cda9e8a39c0b1be1a02014"),
        "name": "StrategyCurveBoost",
        "description": "Boosted Curve LP",
        "status": "active",
        "netAPR": 0.042,
        "details": {
            "totalDebt": "1000",
            "totalLoss": "0",
            "totalGain": "50",
            "performanceFee": 1000,
            "lastReport": 1700000000,
            "debtRatio": 2500,
        },
    }


def test_optional_fields_are_omitted_when_empty(make_raw):
    payload = normalize(make_raw(description="", net_apr=0, last_debt_ratio=0)).model_dump(mode="json")

    assert "description" not in payload
    assert "netAPR" not in payload
    assert "debtRatio" not in payload["details"]


def test_details_omitted_when_absent():
    strategy = ExternalStrategy(address="0x0", name="x", status="active")

    assert "details" not in strategy.model_dump(mode="json")


@pytest.mark.parametrize("in_queue", [True, False])
@pytest.mark.parametrize("retired", [True, False])
@pytest.mark.parametrize("debt_ratio", [0, 1])
def test_in_queue_is_never_serialized(make_raw, in_queue, retired, debt_ratio):
    strategy = normalize(make_raw(is_in_queue=in_queue, is_retired=retired, last_debt_ratio=debt_ratio))

    text = strategy.model_dump_json()

    assert "inQueue" not in text
    assert "in_queue" not in text
    assert "inQueue" not in strategy.model_dump()["details"]


def test_big_amounts_serialize_as_decimal_strings(make_raw):
    big = 2**200
    payload = json.loads(normalize(make_raw(last_total_debt=big)).model_dump_json())

    assert payload["details"]["totalDebt"] == str(big)


# --- inclusion predicate ---


def test_all_includes_empty_strategy(make_raw):
    strategy = normalize(make_raw(last_total_debt=0, last_debt_ratio=0, is_in_queue=False))

    assert should_be_included(strategy, "all")
    assert strategy.should_be_included(StrategyCondition.ALL)


def test_absolute_requires_positive_debt(make_raw):
    assert not normalize(make_raw(last_total_debt=0)).should_be_included("absolute")
    assert normalize(make_raw(last_total_debt=1)).should_be_included("absolute")


def test_in_queue_condition(make_raw):
    assert normalize(make_raw(is_in_queue=True)).should_be_included("inQueue")
    assert not normalize(make_raw(is_in_queue=False)).should_be_included("inQueue")


def test_debt_ratio_condition(make_raw):
    assert not normalize(make_raw(last_debt_ratio=0)).should_be_included("debtRatio")
    assert normalize(make_raw(last_debt_ratio=1)).should_be_included("debtRatio")


@pytest.mark.parametrize("condition", ["unknown-keyword", "ALL", "inqueue", "", None, 1])
def test_unknown_conditions_fail_closed(make_raw, condition):
    strategy = normalize(make_raw(is_in_queue=True))

    assert strategy.should_be_included(condition) is False


def test_condition_without_details_is_excluded():
    strategy = ExternalStrategy(address="0x0", name="x", status="active")

    assert strategy.should_be_included("all")
    assert not strategy.should_be_included("absolute")


def test_filter_strategies_keeps_matching_records(make_raw):
    funded = normalize(make_raw(last_total_debt=5))
    empty = normalize(make_raw(last_total_debt=0))
    strategies = [funded, empty]

    assert filter_strategies(strategies, "absolute") == [funded]
    assert filter_strategies(strategies, "all") == strategies
    assert filter_strategies(strategies, "bogus") == []
    assert strategies == [funded, empty]


@pytest.mark.parametrize(
    "debt, expected",
    [
        ("1.5e21", 1_500_000_000_000_000_000_000),
        ("1000.0", 1_000),
        (" 42 ", 42),
        ("0x2a", 42),
    ],
)
def test_numeric_strings_in_any_notation_keep_their_value(debt, expected):
    strategy = normalize(RawStrategyObservation.model_validate({"lastTotalDebt": debt}))

    assert strategy.status == "active"
    assert strategy.details.total_debt == expected
    assert strategy.should_be_included("absolute")


def test_exponent_string_serializes_as_full_decimal():
    strategy = normalize(RawStrategyObservation.model_validate({"lastTotalDebt": "1.5e21"}))

    assert json.loads(strategy.model_dump_json())["details"]["totalDebt"] == "1500000000000000000000"


@pytest.mark.parametrize("debt", ["n/a", "NaN", "Infinity", "1e999999999", ""])
def test_non_numeric_or_out_of_range_strings_become_zero(debt):
    strategy = normalize(RawStrategyObservation.model_validate({"lastTotalDebt": debt}))

    assert strategy.details.total_debt == 0
    assert strategy.status == "unallocated"
