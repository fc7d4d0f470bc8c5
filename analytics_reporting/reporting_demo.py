"""
Fetch the "Add to Order" events report and print it to the console.
"""
import sys
import json
import logging
import argparse
from typing import Any, Dict, List, Optional

from analytics_reporting.config import ReportingConfig, load_config
from analytics_reporting.errors import SetupError, RemoteCallError
from analytics_reporting.analytics_client import init_analytics_reporting, get_report
from analytics_reporting.report_query import build_batch_request
from analytics_reporting.report_printer import print_response, report_to_records

logger = logging.getLogger(__name__)

EXIT_SETUP_ERROR = 1
EXIT_REMOTE_ERROR = 2


def fetch_report(config: ReportingConfig) -> Dict[str, Any]:
    """
    Run one reporting pass: credentials, request, batchGet.

    Raises:
        SetupError: credentials or service object could not be prepared
        RemoteCallError: the API call failed
    """
    service = init_analytics_reporting(config)
    body = build_batch_request(config.view_id, config.store_id)
    return get_report(service, body)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the Add to Order events report from Google Analytics")
    parser.add_argument("--key-file", help="Service account JSON key file (default: GA_KEY_FILE_LOCATION)")
    parser.add_argument("--view-id", help="Analytics view ID (default: GA_VIEW_ID)")
    parser.add_argument("--application-name", help="Application name sent with requests")
    parser.add_argument("--store-id", help="Only count events for this store (ga:dimension1)")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format (default: text)")
    parser.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        default="WARNING", help="Logging level (default: WARNING)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point.

    Returns:
        0 on success, 1 on setup failure, 2 when the API call fails
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        config = load_config(
            key_file_path=args.key_file,
            view_id=args.view_id,
            application_name=args.application_name,
            store_id=args.store_id,
        )
    except ValueError:
        logger.exception("Invalid Analytics Reporting configuration")
        return EXIT_SETUP_ERROR

    try:
        response = fetch_report(config)
    except SetupError:
        logger.exception("Failed to initialize Analytics Reporting client")
        return EXIT_SETUP_ERROR
    except RemoteCallError:
        logger.exception("Analytics Reporting request failed")
        return EXIT_REMOTE_ERROR

    if args.format == "json":
        records = [report_to_records(report) for report in response['reports']]
        print(json.dumps(records, ensure_ascii=False, indent=2))
    else:
        print_response(response, config.view_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
