"""
OData JSON $batch request building and response parsing.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel

from .constants import MAX_BATCH_OPERATIONS


class BatchOperation(BaseModel):
    method: Literal["GET", "POST", "PATCH", "DELETE"]
    url: str  # relative to the API base, e.g. companies(...)/customers
    body: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, str]] = None


class BatchResult(BaseModel):
    id: str
    status: int
    success: bool
    body: Any = None
    error: Optional[str] = None


def build_batch_request(operations: List[BatchOperation]) -> Dict[str, Any]:
    if len(operations) > MAX_BATCH_OPERATIONS:
        raise ValueError(f"Batch cannot exceed {MAX_BATCH_OPERATIONS} operations, got {len(operations)}")

    requests = []
    for index, op in enumerate(operations):
        headers = dict(op.headers or {})
        entry: Dict[str, Any] = {
            "id": str(index),
            "method": op.method,
            "url": op.url,
        }
        if op.body is not None:
            headers.setdefault("Content-Type", "application/json")
            entry["body"] = op.body
        entry["headers"] = headers
        requests.append(entry)
    return {"requests": requests}


def parse_batch_response(payload: Any) -> List[BatchResult]:
    responses = payload.get("responses", []) if isinstance(payload, dict) else []
    results = []
    for index, item in enumerate(responses):
        status = int(item.get("status", 0))
        body = item.get("body")
        success = 200 <= status < 300
        error = None
        if not success:
            error_obj = body.get("error") if isinstance(body, dict) else None
            message = error_obj.get("message") if isinstance(error_obj, dict) else None
            error = message or f"HTTP {status}"
        results.append(BatchResult(
            id=str(item.get("id", index)),
            status=status,
            success=success,
            body=body,
            error=error,
        ))
    return results
