"""
Text rendering of Analytics Reporting API v4 responses.
"""
import sys
import logging
from typing import Any, Dict, List, Optional, TextIO

logger = logging.getLogger(__name__)


def _header_names(report: Dict[str, Any]):
    header = report['columnHeader']
    dimension_headers = header.get('dimensions', [])
    metric_headers = [entry['name'] for entry in header['metricHeader']['metricHeaderEntries']]
    return dimension_headers, metric_headers


def render_report(report: Dict[str, Any], view_id: str) -> List[str]:
    """
    Render one report as output lines.

    Header names and row values are matched by position; when the lists
    differ in length the extra entries are dropped.
    """
    dimension_headers, metric_headers = _header_names(report)
    rows = report['data'].get('rows')

    if rows is None:
        return [f"No data found for {view_id}"]

    lines = []
    for row in rows:
        dimensions = row.get('dimensions', [])
        for name, value in zip(dimension_headers, dimensions):
            lines.append(f"{name}: {value}")

        for j, date_range_values in enumerate(row.get('metrics', [])):
            lines.append(f"Date Range ({j}): ")
            for name, value in zip(metric_headers, date_range_values['values']):
                lines.append(f"{name}: {value}")
    return lines


def render_response(response: Dict[str, Any], view_id: str) -> List[str]:
    """
    Render every report of a batchGet response, in response order.

    Args:
        response: Parsed batchGet response
        view_id: View the reports were requested for

    Returns:
        Output lines without trailing newlines
    """
    lines = []
    for report in response['reports']:
        lines.extend(render_report(report, view_id))
    return lines


def print_response(response: Dict[str, Any], view_id: str, stream: Optional[TextIO] = None) -> None:
    """Print the rendered response, one line per dimension or metric value."""
    if stream is None:
        stream = sys.stdout
    for line in render_response(response, view_id):
        print(line, file=stream)


def report_to_records(report: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Flatten report rows into dicts keyed by header name.

    Only the first date range is used for metric values.
    """
    dimension_headers, metric_headers = _header_names(report)
    records = []
    for row in report['data'].get('rows') or []:
        record = dict(zip(dimension_headers, row.get('dimensions', [])))
        metrics = row.get('metrics', [])
        if metrics:
            record.update(zip(metric_headers, metrics[0]['values']))
        records.append(record)
    logger.debug(f"Flattened {len(records)} row(s)")
    return records
