"""Batch refresh tool."""

import logging
from time import perf_counter
from typing import Any

from portfolio_mcp import config
from portfolio_mcp.engine.alerts import detect_alerts
from portfolio_mcp.engine.metrics import calculate_metrics
from portfolio_mcp.utils.provenance import build_error_response, build_meta
from portfolio_mcp.utils.validators import parse_optional_number, parse_position

logger = logging.getLogger(__name__)


async def refresh_positions(
    positions: list[dict[str, Any]],
    ev_alert_threshold: float | None = None,
) -> dict[str, Any]:
    """
    Recalculate a batch of positions and collect alerts.

    Each position's incoming 'expected_value' is treated as the previous EV,
    so a large swing after recalculation raises an ev_change alert. A bad
    payload fails only that position.

    Args:
        positions: List of position dicts
        ev_alert_threshold: EV change that triggers an alert
            (default: EV_ALERT_THRESHOLD)

    Returns:
        Dict with refreshed positions, alerts, and per-position failures
    """
    start_time = perf_counter()
    threshold = config.EV_ALERT_THRESHOLD if ev_alert_threshold is None else ev_alert_threshold
    if threshold < 0:
        return build_error_response(
            error_type="invalid_parameters",
            message=f"ev_alert_threshold must be non-negative, got {threshold}",
        )

    refreshed: list[dict[str, Any]] = []
    alerts: list[dict[str, Any]] = []
    failures: list[dict[str, Any]] = []

    for index, payload in enumerate(positions):
        try:
            position = parse_position(payload)
            previous_ev = parse_optional_number(payload.get("expected_value"), "expected_value")
        except ValueError as e:
            logger.warning(f"refresh_positions: skipping position {index}: {e}")
            failures.append({"index": index, "message": str(e)})
            continue

        calculate_metrics(position)
        refreshed.append(position.to_dict())
        alerts.extend(detect_alerts(position, previous_ev, threshold))

    logger.info(
        f"refresh_positions: refreshed={len(refreshed)} failed={len(failures)} "
        f"alerts={len(alerts)}"
    )

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("refresh_positions", duration_ms),
        "positions": refreshed,
        "alerts": alerts,
        "failures": failures,
    }
