from dependency_injector import containers, providers
from clients.auth_client import AuthClient
from clients.finds_client import FindsClient
from clients.s3_client import S3Client
from clients.supabase_client import create_supabase_client
from config.config import SETTINGS
from mapping.map_widget import FoliumMapWidget
from mapping.marker_synchronizer import MarkerSynchronizer
from ui.feed_view import FeedView
from ui.map_view import MapView
from ui.state import select_find
from workflows.find_capture_workflow import FindCaptureWorkflow


class Container(containers.DeclarativeContainer):
    """Everything one browser session needs; build one per session."""

    # Clients
    supabase_client = providers.Singleton(
        create_supabase_client,
        url=SETTINGS.supabase_url,
        key=SETTINGS.supabase_anon_key,
    )
    s3_client = providers.Singleton(
        S3Client,
        bucket=SETTINGS.s3_bucket,
        public_base_url=SETTINGS.photo_public_base_url,
        endpoint_url=SETTINGS.s3_endpoint_url,
        region=SETTINGS.aws_region,
    )
    finds_client = providers.Singleton(
        FindsClient, supabase=supabase_client, limit=SETTINGS.feed_limit
    )
    auth_client = providers.Singleton(
        AuthClient, supabase=supabase_client, redirect_url=SETTINGS.app_url
    )

    # Workflows
    find_capture_workflow = providers.Singleton(
        FindCaptureWorkflow, s3_client=s3_client, finds_client=finds_client
    )

    # Map
    map_widget = providers.Singleton(FoliumMapWidget)
    marker_synchronizer = providers.Singleton(
        MarkerSynchronizer,
        widget=map_widget,
        on_select=providers.Object(select_find),
    )

    # UI Pages
    map_view = providers.Singleton(
        MapView,
        map_widget=map_widget,
        marker_synchronizer=marker_synchronizer,
        capture_workflow=find_capture_workflow,
        auth_client=auth_client,
        s3_client=s3_client,
        location_timeout_ms=SETTINGS.location_timeout_ms,
    )
    feed_view = providers.Singleton(
        FeedView, finds_client=finds_client, s3_client=s3_client
    )
