"""Data models for desired and remote pages."""

from src.models.desired_page import DesiredPage
from src.models.remote_page import RemoteAttachment, RemotePage

__all__ = ['DesiredPage', 'RemoteAttachment', 'RemotePage']
