"""Unit tests for ConversionRule."""

import dataclasses

import pytest

from massconv.conversion import (
    ConversionRule,
    KNOWN_CONVERSIONS,
    Unit,
    UnknownUnitError,
    load_seed_rules,
    parse_rule,
)


class TestRuleIdentity:
    """Test rule equality on the unit pair."""

    def test_equal_regardless_of_factor(self):
        a = ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.45359237)
        b = ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.5)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_direction_matters(self):
        a = ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.45359237)
        b = ConversionRule(Unit.KILOGRAM, Unit.POUND, 0.45359237)
        assert a != b

    def test_rules_are_immutable(self):
        rule = ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.45359237)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.factor = 1.0


class TestInvert:
    """Test rule inversion."""

    def test_invert_swaps_units(self):
        rule = ConversionRule(Unit.KILOGRAM, Unit.METRIC_TON, 0.001).invert()
        assert rule.from_unit == Unit.METRIC_TON
        assert rule.to_unit == Unit.KILOGRAM
        assert rule.factor == pytest.approx(1000.0)

    def test_invert_returns_new_rule(self):
        rule = ConversionRule(Unit.POUND, Unit.GRAM, 453.59237)
        inverted = rule.invert()
        assert rule.factor == 453.59237
        assert inverted.factor == pytest.approx(1 / 453.59237)


class TestCombine:
    """Test rule composition."""

    def test_combine_multiplies_factors(self):
        lb_to_kg = ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.45359237)
        kg_to_ton = ConversionRule(Unit.KILOGRAM, Unit.METRIC_TON, 0.001)
        rule = lb_to_kg.combine(kg_to_ton)
        assert rule.pair == (Unit.POUND, Unit.METRIC_TON)
        assert rule.factor == pytest.approx(0.00045359237)

    def test_self_loop_is_exactly_one(self):
        lb_to_kg = ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.45359237)
        kg_to_lb = ConversionRule(Unit.KILOGRAM, Unit.POUND, 2.20462262)
        rule = lb_to_kg.combine(kg_to_lb)
        assert rule.pair == (Unit.POUND, Unit.POUND)
        assert rule.factor == 1.0

    def test_metric_factor_rounded_up(self):
        """Test kg -> lb -> g lands on the exact integer factor."""
        kg_to_lb = ConversionRule(Unit.KILOGRAM, Unit.POUND, 2.20462262)
        lb_to_g = ConversionRule(Unit.POUND, Unit.GRAM, 453.59237)
        rule = kg_to_lb.combine(lb_to_g)
        assert rule.pair == (Unit.KILOGRAM, Unit.GRAM)
        assert rule.factor == 1000.0

    def test_metric_factor_below_one_untouched(self):
        g_to_lb = ConversionRule(Unit.GRAM, Unit.POUND, 1 / 453.59237)
        lb_to_kg = ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.45359237)
        rule = g_to_lb.combine(lb_to_kg)
        assert rule.factor < 1.0
        assert rule.factor == pytest.approx(0.001)

    def test_pound_factor_keeps_fraction(self):
        ton_to_kg = ConversionRule(Unit.METRIC_TON, Unit.KILOGRAM, 1000.0)
        kg_to_lb = ConversionRule(Unit.KILOGRAM, Unit.POUND, 2.20462262)
        rule = ton_to_kg.combine(kg_to_lb)
        assert rule.factor == pytest.approx(2204.62262)
        assert rule.factor < 2205.0

    def test_combine_requires_chain(self):
        lb_to_kg = ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.45359237)
        lb_to_g = ConversionRule(Unit.POUND, Unit.GRAM, 453.59237)
        with pytest.raises(ValueError):
            lb_to_kg.combine(lb_to_g)


class TestSeedRules:
    """Test parsing of seed rows."""

    def test_parse_rule(self):
        rule = parse_rule(("kg", "metric ton", "0.001"))
        assert rule.pair == (Unit.KILOGRAM, Unit.METRIC_TON)
        assert rule.factor == 0.001

    def test_parse_rule_unknown_unit(self):
        with pytest.raises(UnknownUnitError) as exc_info:
            parse_rule(("lb", "stone", "0.0714"))
        assert exc_info.value.token == "stone"

    def test_load_known_conversions(self):
        rules = load_seed_rules()
        assert len(rules) == len(KNOWN_CONVERSIONS)
        assert rules[0] == ConversionRule(Unit.POUND, Unit.KILOGRAM, 0.0)
        assert rules[0].factor == 0.45359237
