"""
Analytics Reporting API v4 client initialization using a service account.
"""
import os
import logging
from typing import Any, Dict

import httplib2
import google_auth_httplib2
from google.oauth2 import service_account
from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiClientError
from googleapiclient.http import set_user_agent

from analytics_reporting.config import ReportingConfig
from analytics_reporting.errors import SetupError, RemoteCallError

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/analytics.readonly']
API_NAME = 'analyticsreporting'
API_VERSION = 'v4'


def load_credentials(key_file_path: str):
    """
    Load scoped service-account credentials from a JSON key file.

    Args:
        key_file_path: Path to the service-account key file

    Returns:
        google.oauth2.service_account.Credentials bound to SCOPES
    """
    if not os.path.isfile(key_file_path):
        logger.error(f"Credentials file not found: {key_file_path}")
        raise SetupError(f"Key file does not exist: {key_file_path}") from FileNotFoundError(key_file_path)

    try:
        credentials = service_account.Credentials.from_service_account_file(
            key_file_path,
            scopes=SCOPES
        )
    except OSError as e:
        logger.error(f"Cannot read credentials file {key_file_path}: {e}")
        raise SetupError(f"Cannot read key file {key_file_path}") from e
    except (ValueError, KeyError, GoogleAuthError) as e:
        logger.error(f"Malformed service account key in {key_file_path}: {e}")
        raise SetupError(f"Malformed service account key: {key_file_path}") from e

    logger.info(f"Loaded service account credentials for {credentials.service_account_email}")
    return credentials


def init_analytics_reporting(config: ReportingConfig):
    """
    Initialize an authorized Analytics Reporting API v4 service object.

    The application name is sent as the user agent of every request.
    """
    credentials = load_credentials(config.key_file_path)

    try:
        http = google_auth_httplib2.AuthorizedHttp(credentials, http=httplib2.Http())
        http = set_user_agent(http, config.application_name)
        service = build(API_NAME, API_VERSION, http=http, cache_discovery=False)
    except (GoogleApiClientError, httplib2.HttpLib2Error, OSError) as e:
        logger.error(f"Failed to build {API_NAME} {API_VERSION} service: {e}")
        raise SetupError(f"Cannot initialize {API_NAME} {API_VERSION} service") from e

    logger.info(f"Analytics Reporting service initialized for '{config.application_name}'")
    return service


def get_report(service, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Call reports.batchGet once and return the parsed response.

    Blocks until the server answers or the transport fails.
    """
    report_count = len(body.get('reportRequests', []))
    logger.debug(f"Calling {API_NAME}.reports.batchGet with {report_count} report request(s)")
    try:
        response = service.reports().batchGet(body=body).execute()
    except (GoogleApiClientError, GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
        logger.error(f"batchGet request failed: {e}")
        raise RemoteCallError(f"{API_NAME}.reports.batchGet failed: {e}") from e

    logger.info(f"Received {len(response.get('reports', []))} report(s)")
    return response
