"""
Tests for recursive key filtering and transformation over nested structures.
Run from repo root: python -m pytest tests/test_keys.py -v
"""
import copy
import unittest

from utils.case import CasingConvention, Keyword
from utils.keys import filter_keys_letter_case, transform_keys_letter_case, walk_maps


def _camel_document():
    return {
        "userName": "ada",
        "accountId": 7,
        "userId2": 2,
        "s3Bucket": "assets",
        "httpServer2": True,
        "line2Text": "x",
        "items": [
            {"itemName": "lamp", "unitPrice": 10, "tags": ["home-office", "light"]},
            [{"nestedKey": {"deepValue": None}}],
        ],
        "shippingAddress": {"streetName": "Main", "postalCode": "12345"},
    }


class TestWalkMaps(unittest.TestCase):
    def test_scalars_untouched_and_sequence_types_kept(self):
        calls = []

        def visit(k, v):
            calls.append(k)
            return k, v

        self.assertEqual(walk_maps("user_name", visit), "user_name")
        self.assertEqual(walk_maps(5, visit), 5)
        self.assertEqual(walk_maps(({"a": 1},), visit), ({"a": 1},))
        self.assertIsInstance(walk_maps(({"a": 1},), visit), tuple)
        self.assertEqual(calls, ["a", "a"])

    def test_values_are_walked_before_their_entry(self):
        seen = []

        def visit(k, v):
            seen.append((k, v))
            return k.upper(), v

        result = walk_maps({"outer": {"inner": 1}}, visit)
        self.assertEqual(seen, [("inner", 1), ("outer", {"INNER": 1})])
        self.assertEqual(result, {"OUTER": {"INNER": 1}})

    def test_dropping_entries(self):
        result = walk_maps({"keep": 1, "drop": 2}, lambda k, v: None if k == "drop" else (k, v))
        self.assertEqual(result, {"keep": 1})


class TestFilterKeys(unittest.TestCase):
    def test_self_consistent_document_is_unchanged(self):
        doc = _camel_document()
        self.assertEqual(filter_keys_letter_case(doc, CasingConvention.CAMEL), doc)

    def test_drops_non_conforming_keys_at_every_depth(self):
        doc = {
            "userName": "a",
            "user_id": 5,
            "nested": {"innerKey": [{"deepKey": 1, "Bad-Key": 2}], "inner_bad": 3},
        }
        result = filter_keys_letter_case(doc, CasingConvention.CAMEL)
        self.assertEqual(result, {"userName": "a", "nested": {"innerKey": [{"deepKey": 1}]}})

    def test_removes_rather_than_renames(self):
        doc = {"user_name": 1, "user-id": 2, "USER_ROLE": 3, "email": 4}
        result = filter_keys_letter_case(doc, CasingConvention.SNAKE)
        self.assertEqual(result, {"user_name": 1, "email": 4})
        self.assertEqual(len(result), 2)

    def test_keys_with_digits_kept_when_self_consistent(self):
        doc = {"user-id2": 1, "address2-line": 2, "s3-bucket": 3, "userID2": 4}
        result = filter_keys_letter_case(doc, CasingConvention.KEBAB)
        self.assertEqual(result, {"user-id2": 1, "address2-line": 2, "s3-bucket": 3})
        self.assertEqual(filter_keys_letter_case({"user_id2": 1}, CasingConvention.SNAKE), {"user_id2": 1})

    def test_number_keys_are_kept_unchanged(self):
        result = filter_keys_letter_case({42: "answer"}, CasingConvention.KEBAB)
        self.assertEqual(result, {42: "answer"})
        self.assertIs(type(next(iter(result))), int)

    def test_does_not_mutate_input(self):
        doc = {"userName": "a", "user_id": 5}
        snapshot = copy.deepcopy(doc)
        filter_keys_letter_case(doc, CasingConvention.CAMEL)
        self.assertEqual(doc, snapshot)


class TestTransformKeys(unittest.TestCase):
    def test_converts_every_key_and_keeps_values(self):
        result = transform_keys_letter_case(_camel_document(), CasingConvention.KEBAB)
        self.assertEqual(
            result,
            {
                "user-name": "ada",
                "account-id": 7,
                "user-id2": 2,
                "s3-bucket": "assets",
                "http-server2": True,
                "line2-text": "x",
                "items": [
                    {"item-name": "lamp", "unit-price": 10, "tags": ["home-office", "light"]},
                    [{"nested-key": {"deep-value": None}}],
                ],
                "shipping-address": {"street-name": "Main", "postal-code": "12345"},
            },
        )

    def test_idempotent(self):
        for convention in CasingConvention:
            once = transform_keys_letter_case(_camel_document(), convention)
            self.assertEqual(transform_keys_letter_case(once, convention), once, convention)

    def test_idempotent_on_digit_and_acronym_keys(self):
        doc = {"userID2": 1, "HTTPServer2": [{"address2Line": 2}], "s3Bucket": 3}
        for convention in CasingConvention:
            once = transform_keys_letter_case(doc, convention)
            self.assertEqual(transform_keys_letter_case(once, convention), once, convention)
        self.assertEqual(
            transform_keys_letter_case(doc, CasingConvention.KEBAB),
            {"user-id2": 1, "http-server2": [{"address2-line": 2}], "s3-bucket": 3},
        )

    def test_filter_then_transform_for_every_pair(self):
        base = _camel_document()
        for from_case in CasingConvention:
            source = transform_keys_letter_case(base, from_case)
            self.assertEqual(filter_keys_letter_case(source, from_case), source, from_case)
            for to_case in CasingConvention:
                self.assertEqual(
                    transform_keys_letter_case(filter_keys_letter_case(source, from_case), to_case),
                    transform_keys_letter_case(base, to_case),
                    (from_case, to_case),
                )

    def test_number_key_becomes_keyword(self):
        result = transform_keys_letter_case({42: "answer"}, CasingConvention.CAMEL)
        key = next(iter(result))
        self.assertIsInstance(key, Keyword)
        self.assertEqual(key, "42")

    def test_collision_last_write_wins(self):
        result = transform_keys_letter_case({"userName": 1, "user_name": 2}, CasingConvention.CAMEL)
        self.assertEqual(result, {"userName": 2})

    def test_unknown_convention_keeps_text(self):
        result = transform_keys_letter_case({"user_name": {"Other-Key": 1}}, "Title Case")
        self.assertEqual(result, {"user_name": {"Other-Key": 1}})
        self.assertIsInstance(next(iter(result)), Keyword)


if __name__ == "__main__":
    unittest.main()
