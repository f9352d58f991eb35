#!/usr/bin/env python3
"""
Tests for classification of Business Central error responses.
"""

import unittest

from bc_mcp_lib.errors import BcError, BcMcpError, parse_bc_error


class TestParseBcError(unittest.TestCase):
    """Test parse_bc_error against the status codes Business Central returns."""

    def test_structured_error_body(self):
        body = {"error": {"code": "BadRequest_NotFound", "message": "Customer 42 does not exist"}}
        error = parse_bc_error(404, body)
        self.assertIsInstance(error, BcError)
        self.assertIsInstance(error, BcMcpError)
        self.assertEqual(error.status_code, 404)
        self.assertEqual(error.code, "BadRequest_NotFound")
        self.assertEqual(error.message, "Customer 42 does not exist")
        self.assertEqual(error.user_message,
                         "Resource not found: Customer 42 does not exist. Verify the ID exists and you have access.")
        self.assertFalse(error.is_retryable)

    def test_user_messages_by_status(self):
        body = {"error": {"code": "X", "message": "boom"}}
        cases = {
            400: "Validation error: boom",
            401: "Authentication failed. Please re-authenticate with Business Central.",
            403: "Access denied. Your account does not have permission for this operation.",
            409: "Concurrency conflict: The record was modified by another user. "
                 "Please re-fetch and try again. Details: boom",
            429: "Rate limit exceeded. The request will be retried automatically.",
            504: "Request timed out. Try a smaller query with $filter or $top to reduce data.",
            500: "Business Central error (500): boom",
        }
        for status, expected in cases.items():
            with self.subTest(status=status):
                self.assertEqual(parse_bc_error(status, body).user_message, expected)

    def test_retryable_statuses(self):
        for status in (408, 429, 500, 502, 503, 504):
            with self.subTest(status=status):
                self.assertTrue(parse_bc_error(status, {}).is_retryable)
        for status in (400, 401, 403, 404, 409, 422):
            with self.subTest(status=status):
                self.assertFalse(parse_bc_error(status, {}).is_retryable)

    def test_missing_code_falls_back_to_status(self):
        error = parse_bc_error(502, {"error": {"message": "Bad gateway"}})
        self.assertEqual(error.code, "HTTP_502")
        self.assertEqual(error.message, "Bad gateway")

    def test_unstructured_bodies_never_raise(self):
        for body in (None, "plain text failure", ["a", "b"], {"error": "just a string"}, 12):
            with self.subTest(body=body):
                error = parse_bc_error(500, body)
                self.assertEqual(error.code, "HTTP_500")
                self.assertTrue(error.message)

    def test_string_body_is_message(self):
        error = parse_bc_error(400, "Invalid JSON")
        self.assertEqual(error.message, "Invalid JSON")
        self.assertEqual(error.user_message, "Validation error: Invalid JSON")

    def test_retry_after_is_carried(self):
        error = parse_bc_error(429, {}, retry_after_ms=5000)
        self.assertEqual(error.retry_after_ms, 5000)
        self.assertIsNone(parse_bc_error(429, {}).retry_after_ms)

    def test_str_is_technical_message(self):
        error = parse_bc_error(400, {"error": {"code": "X", "message": "field too long"}})
        self.assertEqual(str(error), "field too long")


if __name__ == "__main__":
    unittest.main()
