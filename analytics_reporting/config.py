"""
Runtime configuration for the Analytics Reporting demo.
"""
import os
import logging
from typing import Optional, NamedTuple

logger = logging.getLogger(__name__)

DEFAULT_APPLICATION_NAME = "Hello Analytics Reporting"
# Service-account key generated for the reporting app
DEFAULT_KEY_FILE_LOCATION = "myserviceapp-123456-123456789abc.json"
DEFAULT_VIEW_ID = "123456789"


class ReportingConfig(NamedTuple):
    key_file_path: str
    view_id: str
    application_name: str
    store_id: Optional[str] = None


def load_config(key_file_path: Optional[str] = None,
                view_id: Optional[str] = None,
                application_name: Optional[str] = None,
                store_id: Optional[str] = None) -> ReportingConfig:
    """
    Resolve configuration from explicit arguments, then environment, then defaults.

    Args:
        key_file_path: Path to the service-account JSON key (GA_KEY_FILE_LOCATION)
        view_id: Analytics view to query (GA_VIEW_ID)
        application_name: Attribution label sent with requests (GA_APPLICATION_NAME)
        store_id: Optional store filter on ga:dimension1 (GA_STORE_ID)

    Returns:
        ReportingConfig
    """
    if key_file_path is None:
        key_file_path = os.getenv('GA_KEY_FILE_LOCATION', DEFAULT_KEY_FILE_LOCATION)
    if view_id is None:
        view_id = os.getenv('GA_VIEW_ID', DEFAULT_VIEW_ID)
    if application_name is None:
        application_name = os.getenv('GA_APPLICATION_NAME', DEFAULT_APPLICATION_NAME)
    if store_id is None:
        store_id = os.getenv('GA_STORE_ID')
    # An empty store ID means no store filter
    store_id = store_id or None

    if not view_id.strip():
        raise ValueError("View ID must not be blank")

    logger.debug(f"Using key file {key_file_path} for view {view_id}")
    return ReportingConfig(
        key_file_path=key_file_path,
        view_id=view_id,
        application_name=application_name,
        store_id=store_id,
    )
