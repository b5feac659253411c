"""
Tests for the authorization gate.
Run from repo root: python -m pytest tests/test_auth.py -v
"""
import unittest

from middleware.auth import authorize_middleware, check_authorization


class TestAuthorizeMiddleware(unittest.TestCase):
    def test_default_check_allows(self):
        self.assertTrue(check_authorization({"uri": "/"}))
        handler = authorize_middleware(lambda request: {"status": 200, "body": "ok"})
        self.assertEqual(handler({}), {"status": 200, "body": "ok"})

    def test_denied_short_circuits(self):
        calls = []

        def handler(request):
            calls.append(request)
            return {"status": 200}

        gated = authorize_middleware(handler, check=lambda request: False)
        with self.assertLogs("middleware.auth", level="WARNING"):
            result = gated({"body": {"userName": "a"}})
        self.assertEqual(result, {"status": 401, "body": "Unauthorized"})
        self.assertEqual(calls, [])

    def test_denied_response_is_fresh(self):
        gated = authorize_middleware(lambda request: None, check=lambda request: False)
        first = gated({})
        first["body"] = "changed"
        self.assertEqual(gated({}), {"status": 401, "body": "Unauthorized"})


if __name__ == "__main__":
    unittest.main()
