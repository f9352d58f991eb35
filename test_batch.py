#!/usr/bin/env python3
"""
Tests for $batch request building and response parsing.
"""

import unittest

from bc_mcp_lib.batch import BatchOperation, build_batch_request, parse_batch_response


class TestBuildBatchRequest(unittest.TestCase):
    """Test JSON $batch envelopes."""

    def test_ids_and_headers(self):
        ops = [
            BatchOperation(method="GET", url="companies(c1)/customers"),
            BatchOperation(method="POST", url="companies(c1)/customers", body={"displayName": "Adatum"}),
            BatchOperation(method="DELETE", url="companies(c1)/customers(x)", headers={"If-Match": "*"}),
        ]
        payload = build_batch_request(ops)
        requests = payload["requests"]

        self.assertEqual([r["id"] for r in requests], ["0", "1", "2"])
        self.assertEqual(requests[0], {"id": "0", "method": "GET", "url": "companies(c1)/customers", "headers": {}})
        self.assertEqual(requests[1]["headers"], {"Content-Type": "application/json"})
        self.assertEqual(requests[1]["body"], {"displayName": "Adatum"})
        self.assertEqual(requests[2]["headers"], {"If-Match": "*"})
        self.assertNotIn("body", requests[2])

    def test_explicit_content_type_is_kept(self):
        op = BatchOperation(method="PATCH", url="x", body={"a": 1}, headers={"Content-Type": "application/json;odata=x"})
        payload = build_batch_request([op])
        self.assertEqual(payload["requests"][0]["headers"]["Content-Type"], "application/json;odata=x")

    def test_operation_limit(self):
        ops = [BatchOperation(method="GET", url=f"items({i})") for i in range(100)]
        self.assertEqual(len(build_batch_request(ops)["requests"]), 100)

        ops.append(BatchOperation(method="GET", url="items(100)"))
        with self.assertRaises(ValueError):
            build_batch_request(ops)


class TestParseBatchResponse(unittest.TestCase):
    """Test per-operation results."""

    def test_success_and_errors(self):
        payload = {"responses": [
            {"id": "0", "status": 200, "body": {"value": []}},
            {"id": "1", "status": 201, "body": {"id": "new"}},
            {"id": "2", "status": 400, "body": {"error": {"code": "BadRequest", "message": "Name is required"}}},
            {"id": "3", "status": 503},
        ]}
        results = parse_batch_response(payload)

        self.assertEqual([r.success for r in results], [True, True, False, False])
        self.assertEqual(results[1].body, {"id": "new"})
        self.assertIsNone(results[0].error)
        self.assertEqual(results[2].error, "Name is required")
        self.assertEqual(results[3].error, "HTTP 503")
        self.assertEqual(results[3].id, "3")

    def test_missing_responses(self):
        self.assertEqual(parse_batch_response({}), [])
        self.assertEqual(parse_batch_response(None), [])


if __name__ == "__main__":
    unittest.main()
