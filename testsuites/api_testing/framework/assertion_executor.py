"""
================================================================================
Assertion Executor Module
================================================================================

Field-equality checks against JSON API responses.

Fields are addressed with dot paths ("data.id", "items[0].name") and
compared by their string form, so a numeric id 2 matches the literal "2".
Execution stops at the first mismatch.

================================================================================
"""

import json
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import allure
from loguru import logger


_MISSING = object()


@dataclass
class AssertionResult:
    """Result of a single assertion execution."""
    passed: bool
    field: str
    expected: Any
    actual: Any
    message: str


def as_string(value: Any) -> Optional[str]:
    """
    Render a JSON value the way a JSON-path getString call would.

    None stays None, booleans become "true"/"false", integral floats
    lose their fraction and containers are serialized as compact JSON.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


# ================================================================================
# Assertion Executor
# ================================================================================

class AssertionExecutor:
    """
    Executes field-equality assertions against an API response body.

    Example:
        executor = AssertionExecutor({"data": {"id": 2}})
        executor.execute_assertions([("data.id", "2")])
        assert executor.all_passed()
    """

    def __init__(self, response_data: Any):
        """
        Initialize the assertion executor.

        Args:
            response_data: The decoded API response body
        """
        self.response_data = response_data
        self.results: List[AssertionResult] = []

    def get_field_value(self, field_path: str) -> Any:
        """
        Extract a value from nested response data using dot notation.

        Args:
            field_path: Dot-separated path to the field (e.g., "data.id")

        Returns:
            The value at the specified path, or None if not found
        """
        value = self._lookup(field_path)
        return None if value is _MISSING else value

    def _lookup(self, field_path: str) -> Any:
        if not field_path:
            return self.response_data

        current = self.response_data
        for part in field_path.split("."):
            # Handle array indexing (e.g., "items[0]")
            if "[" in part and part.endswith("]"):
                key = part[:part.index("[")]
                try:
                    index = int(part[part.index("[") + 1:-1])
                except ValueError:
                    return _MISSING

                if key:
                    if not isinstance(current, dict) or key not in current:
                        return _MISSING
                    current = current[key]

                if isinstance(current, list) and -len(current) <= index < len(current):
                    current = current[index]
                else:
                    return _MISSING
            else:
                if isinstance(current, dict) and part in current:
                    current = current[part]
                else:
                    return _MISSING

        return current

    def execute_assertion(self, field: str, expected: Any) -> AssertionResult:
        """
        Compare one field against its expected literal.

        Returns:
            AssertionResult with pass/fail status and details
        """
        raw = self._lookup(field)
        if raw is _MISSING:
            result = AssertionResult(
                passed=False,
                field=field,
                expected=expected,
                actual=None,
                message=f"Field '{field}' not found in response",
            )
        else:
            actual = as_string(raw)
            wanted = as_string(expected)
            result = AssertionResult(
                passed=actual == wanted,
                field=field,
                expected=wanted,
                actual=actual,
                message=f"Expected '{field}' to equal {wanted!r}, got {actual!r}",
            )

        self.results.append(result)
        return result

    def execute_assertions(self, assertions: Iterable[Any]) -> List[AssertionResult]:
        """
        Execute (field, expected) pairs in order, stopping at the first failure.

        Items may be tuples or objects with `path` and `expected` attributes.

        Returns:
            List of AssertionResults executed so far
        """
        with allure.step("Verify response fields"):
            for assertion in assertions:
                if isinstance(assertion, tuple):
                    field, expected = assertion
                else:
                    field, expected = assertion.path, assertion.expected

                result = self.execute_assertion(field, expected)

                status = "✅ PASS" if result.passed else "❌ FAIL"
                logger.debug(f"{status}: {result.field} - {result.message}")

                allure.attach(
                    json.dumps({
                        "field": result.field,
                        "expected": result.expected,
                        "actual": result.actual,
                        "passed": result.passed
                    }, indent=2, ensure_ascii=False),
                    name=f"Assertion: {result.field}",
                    attachment_type=allure.attachment_type.JSON
                )

                if not result.passed:
                    break

        return self.results

    def all_passed(self) -> bool:
        """Check if all assertions passed."""
        return all(r.passed for r in self.results)

    def get_failures(self) -> List[AssertionResult]:
        """Get list of failed assertions."""
        return [r for r in self.results if not r.passed]
