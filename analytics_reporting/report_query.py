"""
Builder for the "Add to Order" events report request.

Retrieves "Item" events with action "Add to Order" and returns their labels
(the name of the ordered item) with the number of times each was logged.
Dimension and metric names: https://ga-dev-tools.appspot.com/dimensions-metrics-explorer/
"""
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

START_DATE = '7DaysAgo'
END_DATE = 'today'

TOTAL_EVENTS_METRIC = 'ga:totalEvents'
EVENT_LABEL_DIMENSION = 'ga:eventLabel'

EVENT_CATEGORY_DIMENSION = 'ga:eventCategory'
EVENT_ACTION_DIMENSION = 'ga:eventAction'
STORE_DIMENSION = 'ga:dimension1'

ITEM_CATEGORY = 'Item'
ADD_TO_ORDER_ACTION = 'Add to Order'

EXACT = 'EXACT'
AND = 'AND'


def exact_filter(dimension_name: str, *expressions: str) -> Dict[str, Any]:
    """Dimension filter matching any of the given values exactly."""
    return {
        'dimensionName': dimension_name,
        'operator': EXACT,
        'expressions': list(expressions),
    }


def build_dimension_filters(store_id: Optional[str] = None) -> List[Dict[str, Any]]:
    filters = [
        exact_filter(EVENT_CATEGORY_DIMENSION, ITEM_CATEGORY),
        exact_filter(EVENT_ACTION_DIMENSION, ADD_TO_ORDER_ACTION),
    ]
    # Custom dimension set by the client to identify the store
    if store_id:
        filters.append(exact_filter(STORE_DIMENSION, store_id))
    return filters


def build_report_request(view_id: str, store_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the report request counting "Add to Order" events per item label.

    Filtering happens server side: a row is returned only when every filter
    of the AND clause matches. Values are sent as-is, a malformed expression
    comes back as an API error.

    Args:
        view_id: Analytics view to query
        store_id: Optional value of the store custom dimension

    Returns:
        Report request in the Reporting API v4 format
    """
    request = {
        'viewId': view_id,
        'dateRanges': [{'startDate': START_DATE, 'endDate': END_DATE}],
        'metrics': [{'expression': TOTAL_EVENTS_METRIC}],
        'dimensions': [{'name': EVENT_LABEL_DIMENSION}],
        'dimensionFilterClauses': [
            {
                'operator': AND,
                'filters': build_dimension_filters(store_id),
            }
        ],
    }
    logger.debug(f"Built report request for view {view_id}")
    return request


def build_batch_request(view_id: str, store_id: Optional[str] = None) -> Dict[str, Any]:
    """Wrap the report request into a batchGet body."""
    return {'reportRequests': [build_report_request(view_id, store_id)]}
