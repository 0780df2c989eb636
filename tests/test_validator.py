"""
Tests for the Validator rule methods.
"""

from datetime import date, datetime

import pytest

from fieldcheck.core.exceptions import FieldNotFoundError


def rule_of(validator, key):
    error = validator.get_error(key)
    return error.rule if error else None


class TestPresenceRules:
    """required / not_null / not_empty and how they differ."""

    def test_required_missing_field(self, make_validator):
        validator = make_validator({}).required("name")
        assert rule_of(validator, "name") == "required"

    def test_required_accepts_null(self, make_validator):
        validator = make_validator({"name": None}).required("name")
        assert validator.is_valid()

    def test_required_nested(self, make_validator, signup_data):
        validator = make_validator(signup_data).required(
            "user[email]", "user[address][zip]", "user[phone]"
        )
        assert list(validator.errors) == ["user[phone]"]

    def test_not_null_ignores_missing_field(self, make_validator):
        assert make_validator({}).not_null("name").is_valid()

    def test_not_null_rejects_null(self, make_validator):
        validator = make_validator({"name": None}).not_null("name")
        assert rule_of(validator, "name") == "notNull"

    def test_not_null_accepts_falsy_values(self, make_validator):
        validator = make_validator({"a": "", "b": 0, "c": False}).not_null("a", "b", "c")
        assert validator.is_valid()

    @pytest.mark.parametrize("value", ["", {}, [], 0, False])
    def test_not_empty_rejects_empty(self, make_validator, value):
        validator = make_validator({"x": value}).not_empty("x")
        assert rule_of(validator, "x") == "empty"

    @pytest.mark.parametrize("value", [None, "0", "a", [0], 1])
    def test_not_empty_passes(self, make_validator, value):
        validator = make_validator({"x": value}).not_empty("x")
        assert validator.is_valid()

    def test_not_empty_skips_missing(self, make_validator):
        assert make_validator({}).not_empty("x").is_valid()

    def test_required_and_not_empty_on_missing_field(self, make_validator):
        validator = make_validator({}).required_and_not_empty("x")
        assert rule_of(validator, "x") == "required"

    def test_required_and_not_empty_on_blank_field(self, make_validator):
        validator = make_validator({"x": ""}).required_and_not_empty("x")
        assert rule_of(validator, "x") == "empty"

    def test_required_and_not_empty_several_keys(self, make_validator):
        validator = make_validator({"a": "ok", "b": ""}).required_and_not_empty("a", "b", "c")
        assert validator.errors["b"].rule == "empty"
        assert validator.errors["c"].rule == "required"
        assert not validator.has_error("a")


class TestLength:
    """length(key, min, max)."""

    def test_within_bounds(self, make_validator):
        assert make_validator({"x": "abc"}).length("x", 2, 5).is_valid()

    def test_too_short(self, make_validator):
        error = make_validator({"x": "a"}).length("x", 2, 5).get_error("x")
        assert (error.rule, error.attributes) == ("minLength", [2])

    def test_too_long(self, make_validator):
        error = make_validator({"x": "abcdefgh"}).length("x", 2, 5).get_error("x")
        assert (error.rule, error.attributes) == ("maxLength", [5])

    def test_min_only(self, make_validator):
        assert make_validator({"x": "abcdefgh"}).length("x", 2).is_valid()
        error = make_validator({"x": "a"}).length("x", 2).get_error("x")
        assert error.rule == "minLength"

    def test_max_only(self, make_validator):
        error = make_validator({"x": "abcdef"}).length("x", None, 3).get_error("x")
        assert (error.rule, error.attributes) == ("maxLength", [3])

    def test_counts_code_points(self, make_validator):
        assert make_validator({"x": "éèà"}).length("x", 3, 3).is_valid()

    def test_empty_value_skipped(self, make_validator):
        assert make_validator({"x": ""}).length("x", 2, 5).is_valid()


class TestDateTime:
    """date_time(key, format)."""

    def test_default_format(self, make_validator):
        assert make_validator({"d": "2024-02-29 10:30:00"}).date_time("d").is_valid()

    def test_rejects_impossible_date(self, make_validator):
        error = make_validator({"d": "2023-02-30"}).date_time("d", "%Y-%m-%d").get_error("d")
        assert (error.rule, error.attributes) == ("datetime", ["%Y-%m-%d"])

    def test_rejects_trailing_data(self, make_validator):
        validator = make_validator({"d": "2024-01-01 extra"}).date_time("d", "%Y-%m-%d")
        assert not validator.is_valid()

    def test_accepts_date_objects(self, make_validator):
        validator = make_validator({"a": date(2024, 1, 1), "b": datetime(2024, 1, 1)})
        assert validator.date_time("a").date_time("b").is_valid()

    def test_format_from_config(self, make_validator):
        from fieldcheck.core.config import get_config

        get_config().set("validation.datetime_format", "%d/%m/%Y")
        assert make_validator({"d": "31/12/2024"}).date_time("d").is_valid()


class TestPatternRules:
    """slug, url, email, integer, float, alpha_numerical, pattern_match."""

    @pytest.mark.parametrize("value", ["hello", "hello-world", "a1-b2-c3", "trailing-"])
    def test_slug_valid(self, make_validator, value):
        assert make_validator({"s": value}).slug("s").is_valid()

    @pytest.mark.parametrize("value", ["Hello", "double--dash", "-lead", "with space", "under_score"])
    def test_slug_invalid(self, make_validator, value):
        assert rule_of(make_validator({"s": value}).slug("s"), "s") == "slug"

    @pytest.mark.parametrize(
        "value",
        ["http://example.com", "https://sub.example.co.uk:8080/path?q=1", "HTTPS://EXAMPLE.COM"],
    )
    def test_url_valid(self, make_validator, value):
        assert make_validator({"u": value}).url("u").is_valid()

    @pytest.mark.parametrize("value", ["ftp://example.com", "example.com", "http://", "http://exa mple.com"])
    def test_url_invalid(self, make_validator, value):
        assert rule_of(make_validator({"u": value}).url("u"), "u") == "url"

    def test_email(self, make_validator):
        assert make_validator({"e": "a@b.com"}).email("e").is_valid()
        assert rule_of(make_validator({"e": "not-an-email"}).email("e"), "e") == "email"

    def test_email_nested(self, make_validator, signup_data):
        assert make_validator(signup_data).email("user[email]").is_valid()

    @pytest.mark.parametrize("value", ["123", 123, "2024-01-15", "12-"])
    def test_integer_valid(self, make_validator, value):
        assert make_validator({"n": value}).integer("n").is_valid()

    @pytest.mark.parametrize("value", ["12a", "-5", "1.5", "1--2"])
    def test_integer_invalid(self, make_validator, value):
        assert rule_of(make_validator({"n": value}).integer("n"), "n") == "integer"

    def test_integer_does_not_hang_on_long_input(self, make_validator):
        validator = make_validator({"n": "1" * 5000 + "a"}).integer("n")
        assert not validator.is_valid()

    @pytest.mark.parametrize("value", ["1.5", 2.25, ".5", "5.", "1x5", "1,5"])
    def test_float_accepts_any_separator(self, make_validator, value):
        # the separator is matched by an unescaped "." in the pattern
        assert make_validator({"f": value}).float("f").is_valid()

    @pytest.mark.parametrize("value", ["15", 15, "1.2.3", "a.5"])
    def test_float_invalid(self, make_validator, value):
        # a bare digit run has no separator and is rejected
        assert rule_of(make_validator({"f": value}).float("f"), "f") == "float"

    def test_alpha_numerical(self, make_validator):
        validator = make_validator({"a": "abc123", "b": "abc 123", "c": "héllo"})
        validator.alpha_numerical("a", "b", "c")
        assert list(validator.errors) == ["b", "c"]

    def test_pattern_match_searches(self, make_validator):
        assert make_validator({"p": "order-42"}).pattern_match("p", r"\d+").is_valid()
        validator = make_validator({"p": "order"}).pattern_match("p", r"^\d+$")
        assert rule_of(validator, "p") == "patternMatch"

    def test_pattern_match_compiled(self, make_validator):
        import re

        pattern = re.compile(r"^[A-Z]{3}$")
        assert make_validator({"p": "EUR"}).pattern_match("p", pattern).is_valid()

    def test_format_rules_skip_empty_values(self, make_validator):
        validator = make_validator({"a": "", "b": None})
        validator.slug("a").url("a").email("a").integer("a", "b").float("a", "b")
        validator.alpha_numerical("a").pattern_match("b", "x").date_time("missing")
        assert validator.is_valid()


class TestComparisonRules:
    """match and equal use loose equality."""

    def test_match_loose(self, make_validator):
        assert make_validator({"n": "1"}).match("n", 1).is_valid()

    def test_match_failure(self, make_validator):
        error = make_validator({"n": "yes"}).match("n", "no").get_error("n")
        assert (error.rule, error.attributes) == ("match", ["no"])

    def test_match_skips_empty_expected(self, make_validator):
        assert make_validator({"n": "value"}).match("n", "").is_valid()

    def test_equal(self, make_validator, signup_data):
        assert make_validator(signup_data).equal("password", "password_confirm").is_valid()

    def test_equal_failure(self, make_validator):
        validator = make_validator({"a": "x", "b": "y"}).equal("a", "b")
        error = validator.get_error("a")
        assert (error.rule, error.attributes) == ("notEqual", ["b"])
        assert not validator.has_error("b")

    def test_equal_compares_lists_element_wise(self, make_validator):
        data = {"ids": ["1", "2"], "expected": [1, 2], "other": [1, 3]}
        assert make_validator(data).equal("ids", "expected").is_valid()
        assert make_validator(data).equal("ids", "other").has_error("ids")

    def test_equal_skips_missing_other(self, make_validator):
        assert make_validator({"a": "x"}).equal("a", "b").is_valid()


class TestTypeRules:
    """array, boolean, between."""

    def test_array(self, make_validator, signup_data):
        validator = make_validator(signup_data).array("tags", "user", "name")
        assert list(validator.errors) == ["name"]

    @pytest.mark.parametrize("value", [True, False, "true", "false", 0, 1, "0", "1"])
    def test_boolean_valid(self, make_validator, value):
        assert make_validator({"b": value}).boolean("b").is_valid()

    @pytest.mark.parametrize("value", ["yes", 2, 1.0, "TRUE", []])
    def test_boolean_invalid(self, make_validator, value):
        assert rule_of(make_validator({"b": value}).boolean("b"), "b") == "boolean"

    def test_boolean_skips_blank(self, make_validator):
        assert make_validator({"a": "", "b": None}).boolean("a", "b", "c").is_valid()

    def test_between_out_of_range(self, make_validator):
        error = make_validator({"x": 11}).between("x", 1, 10).get_error("x")
        assert (error.rule, error.attributes) == ("between", [1, 10])

    def test_between_inclusive(self, make_validator):
        assert make_validator({"x": 10}).between("x", 1, 10).is_valid()
        assert make_validator({"x": 1}).between("x", 1, 10).is_valid()

    def test_between_strict(self, make_validator):
        validator = make_validator({"x": 10}).between("x", 1, 10, strict=True)
        error = validator.get_error("x")
        assert (error.rule, error.attributes) == ("betweenStrict", [1, 10])
        assert make_validator({"x": 5}).between("x", 1, 10, strict=True).is_valid()

    @pytest.mark.parametrize("value", ["11", 11.5, True])
    def test_between_ignores_non_integers(self, make_validator, value):
        assert make_validator({"x": value}).between("x", 1, 10).is_valid()


class TestEngineBehaviour:
    """Error accumulation, chaining and data access."""

    def test_chaining_returns_validator(self, make_validator):
        validator = make_validator({})
        assert validator.required("a").not_null("a").length("a", 1) is validator

    def test_last_failing_rule_wins(self, make_validator):
        validator = make_validator({"x": "Not A Slug!"}).slug("x").alpha_numerical("x")
        assert rule_of(validator, "x") == "alphaNumerical"

    def test_passing_rule_keeps_earlier_error(self, make_validator):
        validator = make_validator({"x": "abc"}).integer("x").length("x", 1, 5)
        assert rule_of(validator, "x") == "integer"

    def test_same_rule_twice_stores_one_error(self, make_validator):
        validator = make_validator({}).required("name").required("name")
        assert len(validator.errors) == 1
        assert len(validator.get_errors()) == 1

    def test_overwrite_keeps_field_position(self, make_validator):
        validator = make_validator({"a": "x", "b": "y"}).integer("a").integer("b").slug("a")
        validator.add_error("a", "required")
        assert list(validator.errors) == ["a", "b"]

    def test_errors_view_is_read_only(self, make_validator):
        validator = make_validator({}).required("a")
        with pytest.raises(TypeError):
            validator.errors["b"] = None

    def test_get_value(self, make_validator, signup_data):
        validator = make_validator(signup_data)
        assert validator.get_value("user[address][city]") == "Lyon"
        assert validator.get_value("user[phone]") is None

    def test_get_value_enforcing_existence(self, make_validator):
        validator = make_validator({"a": None})
        assert validator.get_value("a", enforce_existence=True) is None
        with pytest.raises(FieldNotFoundError) as exc_info:
            validator.get_value("b", enforce_existence=True)
        assert exc_info.value.key == "b"

    def test_exists_is_top_level_only(self, make_validator, signup_data):
        validator = make_validator(signup_data)
        assert validator.exists("user")
        assert not validator.exists("user[email]")
        assert not make_validator({}).exists("user")
        assert not make_validator(None).exists("user")

    def test_debug_log_on_failure(self, make_validator, log_stream):
        make_validator({}).required("name")
        output = log_stream.getvalue()
        assert "Validation rule failed" in output
        assert "field=name" in output
        assert "rule=required" in output
