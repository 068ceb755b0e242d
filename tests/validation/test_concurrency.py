"""Tests for sharing one validator between threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from shapeguard.validation import ValidationError, a_number, a_string, an_object

an_order = an_object({
    "id": a_string,
    "lines": an_object({
        "sku": a_string,
        "quantity": a_number,
        "tags": a_string.array.or_undefined,
    }).array,
})
a_batch = an_order.array


def _payload(index: int) -> tuple[list, str | None]:
    """Build batch ``index``; every third one breaks at a path derived from the index."""
    lines = [{"sku": f"s{n}", "quantity": n, "tags": ["a", "b"]} for n in range(index % 5 + 2)]
    orders = [{"id": f"o{index}-{n}", "lines": [dict(line) for line in lines]} for n in range(3)]
    if index % 3:
        return orders, None
    order, line = (index // 3) % 3, index % len(lines)
    orders[order]["lines"][line]["tags"] = ["ok", index]
    return orders, f"{order}.lines.{line}.tags.1"


def _run(index: int):
    payload, expected_path = _payload(index)
    try:
        result = a_batch.validate(payload)
    except ValidationError as e:
        return index, payload, expected_path, e
    return index, payload, expected_path, result


def test_shared_validator_keeps_per_call_paths_across_threads():
    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(_run, range(200)))

    failures = 0
    for index, payload, expected_path, outcome in outcomes:
        if expected_path is None:
            assert outcome is payload, index
        else:
            failures += 1
            assert isinstance(outcome, ValidationError), index
            assert outcome.dotted_path == expected_path
            assert str(outcome) == f"Validation error for key '{expected_path}': expected a string, not a number"

    assert failures == len(range(0, 200, 3))
