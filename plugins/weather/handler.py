#!/usr/bin/env python3
"""
Weather plugin - Configure the weather workflow
Reads/writes config from ~/.config/hamr/weather.json

Features:
- Browse all weather options with their current values
- Pick enum values and icon sets from a checklist
- Toggle flags directly from the browse list
- Type integers, strings and locations (geocoded on the fly)
"""

import json
import logging
import sys

from weather_config import (
    ConfigStore,
    WeatherConfigError,
    apply,
    describe_all,
    list_candidates,
)
from weather_config.logs import configure_logging

logger = logging.getLogger(__name__)

PLACEHOLDER = "Search weather settings..."
# Options whose values cost a network round trip; search only on Enter
SUBMIT_CONTEXTS = {"option:Location"}


def results_response(
    candidates, context: str = "", placeholder: str = PLACEHOLDER, **extra
) -> dict:
    response = {
        "type": "results",
        "results": [c.to_result() for c in candidates],
        "inputMode": "submit" if context in SUBMIT_CONTEXTS else "realtime",
        "placeholder": placeholder,
        "context": context,
    }
    response.update(extra)
    return response


def option_query(context: str, query: str = "") -> str:
    """Rebuild the full query for a search made inside an option."""
    name = context.split(":", 1)[1]
    return f"{name} {query}"


def handle(input_data: dict, store: ConfigStore, options=None) -> dict:
    """Build the response for one hamr request."""
    if options is None:
        options = describe_all()

    step = input_data.get("step", "initial")
    query = input_data.get("query", "").strip()
    selected = input_data.get("selected", {})
    context = input_data.get("context", "")
    selected_id = selected.get("id", "")

    if step == "initial":
        return results_response(list_candidates(store.config, "", options))

    if step == "search":
        if context.startswith("option:"):
            name = context.split(":", 1)[1]
            return results_response(
                list_candidates(store.config, option_query(context, query), options),
                context=context,
                placeholder=f"New value for {name}...",
            )
        return results_response(list_candidates(store.config, query, options))

    if step == "action":
        if selected_id.startswith("apply:"):
            status = apply(store, selected_id.split(":", 1)[1])
            return results_response(
                list_candidates(store.config, "", options),
                placeholder=status,
                clearInput=True,
                navigateBack=bool(context),
            )

        if selected_id.startswith("open:"):
            name = selected_id.split(":", 1)[1]
            context = f"option:{name}"
            return results_response(
                list_candidates(store.config, option_query(context), options),
                context=context,
                placeholder=f"New value for {name}...",
                clearInput=True,
                navigateForward=True,
            )

        if selected_id.startswith("info:"):
            # Informational rows have nothing to commit; redraw where we are
            full_query = (
                option_query(context, query) if context.startswith("option:") else query
            )
            return results_response(
                list_candidates(store.config, full_query, options), context=context
            )

        if selected_id == "__back__":
            return results_response(
                list_candidates(store.config, "", options), clearInput=True
            )

        return {"type": "error", "message": f"Unknown selection: {selected_id}"}

    return {"type": "error", "message": f"Unknown step: {step}"}


def main():
    configure_logging()
    input_data = json.load(sys.stdin)
    store = ConfigStore()

    try:
        response = handle(input_data, store)
    except WeatherConfigError as e:
        logger.warning("Request failed: %s", e)
        response = {"type": "error", "message": str(e)}

    print(json.dumps(response))


if __name__ == "__main__":
    main()
