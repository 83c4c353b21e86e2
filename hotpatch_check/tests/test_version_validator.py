import unittest

from hotpatch_check.exceptions import USAGE_MESSAGE, UsageError
from hotpatch_check.validators.version_validator import (
    check_arg_count,
    parse_version_number,
    validate_args,
)


class TestParseVersionNumber(unittest.TestCase):
    def test_dotted_version_truncates_to_leading_number(self):
        self.assertEqual(parse_version_number("2.17.15"), 2.17)
        self.assertEqual(parse_version_number("3.0.4"), 3.0)

    def test_plain_numbers(self):
        self.assertEqual(parse_version_number("3"), 3.0)
        self.assertEqual(parse_version_number("10.2"), 10.2)
        self.assertEqual(parse_version_number("  4.1"), 4.1)

    def test_trailing_garbage_is_ignored(self):
        self.assertEqual(parse_version_number("3.2-rc1"), 3.2)
        self.assertEqual(parse_version_number("5abc"), 5.0)

    def test_no_numeric_prefix_is_zero(self):
        self.assertEqual(parse_version_number(""), 0.0)
        self.assertEqual(parse_version_number("v3.1"), 0.0)
        self.assertEqual(parse_version_number("latest"), 0.0)


class TestValidateArgs(unittest.TestCase):
    def test_rejects_wrong_argument_count(self):
        for args in ([], ["3.1", "3.2"], ["3", "4", "5"]):
            with self.assertRaises(UsageError) as ctx:
                validate_args(args)
            self.assertEqual(ctx.exception.message, USAGE_MESSAGE)
            self.assertEqual(ctx.exception.exit_code, 2)

    def test_arg_count_alone_ignores_the_value(self):
        check_arg_count(["not-a-version"])
        with self.assertRaises(UsageError):
            check_arg_count([])

    def test_rejects_versions_below_three(self):
        for version in ("2.99", "2.17.15", "0", "-4", "abc"):
            with self.assertRaises(UsageError):
                validate_args([version])

    def test_returns_original_token(self):
        self.assertEqual(validate_args(["3"]), "3")
        self.assertEqual(validate_args(["3.0.4"]), "3.0.4")
        self.assertEqual(validate_args(["3.1.0-hotfix"]), "3.1.0-hotfix")

    def test_min_version_is_configurable(self):
        self.assertEqual(validate_args(["2.17.15"], min_version=2), "2.17.15")
        with self.assertRaises(UsageError):
            validate_args(["3.9"], min_version=4)

    def test_threshold_is_inclusive(self):
        self.assertEqual(validate_args(["3.0"]), "3.0")


if __name__ == "__main__":
    unittest.main()
