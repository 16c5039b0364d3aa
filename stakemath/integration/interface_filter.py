"""
Contract interface (ABI) reduction.

Keeps only the events and functions a consumer cares about, in a compact shape:

    {
        "events": {name: {"fields": [...]}},
        "functions": {name: {"inputs": [...], "outputs": [...]}},
    }
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence


def extract_simplified_api(
    abi: Iterable[Mapping[str, Any]],
    relevant_events: Optional[Sequence[str]] = None,
    relevant_functions: Optional[Sequence[str]] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    Reduce an interface descriptor list to the selected events and functions.

    An allow-list of None includes every entry of that kind. Entries with any
    other (or no) `type` are skipped. A later entry with a repeated name
    replaces the earlier one.
    """
    events: Dict[str, Any] = {}
    functions: Dict[str, Any] = {}
    event_names = None if relevant_events is None else set(relevant_events)
    function_names = None if relevant_functions is None else set(relevant_functions)

    for item in abi:
        kind = item.get("type")
        name = item.get("name")
        if kind == "event":
            if event_names is None or name in event_names:
                events[name] = {"fields": item.get("inputs")}
        elif kind == "function":
            if function_names is None or name in function_names:
                functions[name] = {"inputs": item.get("inputs"), "outputs": item.get("outputs")}

    return {"events": events, "functions": functions}
